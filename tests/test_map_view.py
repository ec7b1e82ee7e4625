from geosight.models.analysis import AnalysisResult
from geosight.services.map_view import (
    FLY_DURATION_SECONDS,
    RESULT_ZOOM,
    WORLD_CENTER,
    WORLD_ZOOM,
    build_map_view,
    world_view,
)
from conftest import PARIS_ANALYSIS

RESULT = AnalysisResult.model_validate(PARIS_ANALYSIS)


class TestBuildMapView:
    def test_no_result_shows_world(self):
        view = build_map_view(None)
        assert view == world_view()
        assert view.center == WORLD_CENTER
        assert view.zoom == WORLD_ZOOM
        assert view.marker is None
        assert view.fly_duration is None

    def test_flies_to_result(self):
        view = build_map_view(RESULT)
        assert (view.center.lat, view.center.lng) == (48.85, 2.35)
        assert view.zoom == RESULT_ZOOM
        assert view.fly_duration == FLY_DURATION_SECONDS

    def test_marker_popup(self):
        marker = build_map_view(RESULT).marker
        assert marker.title == "France"
        assert marker.subtitle == "Île-de-France"
        assert marker.label == "48.8500, 2.3500"

    def test_marker_without_region(self):
        result = RESULT.model_copy(update={"region": None})
        assert build_map_view(result).marker.subtitle is None

    def test_non_finite_coordinates_show_world(self):
        result = RESULT.model_copy(update={"latitude": float("nan")})
        assert build_map_view(result).marker is None

    def test_tile_layer(self):
        view = world_view()
        assert "basemaps.cartocdn.com/dark_all" in view.tile_url
        assert "OpenStreetMap" in view.attribution
