import math

from geosight.models.analysis import AnalysisResult
from geosight.models.map import LatLng, MapMarker, MapView

WORLD_CENTER = LatLng(lat=20, lng=0)
WORLD_ZOOM = 2
RESULT_ZOOM = 6
FLY_DURATION_SECONDS = 2.0

TILE_URL = "https://{s}.basemaps.cartocdn.com/dark_all/{z}/{x}/{y}{r}.png"
ATTRIBUTION = (
    '&copy; <a href="https://www.openstreetmap.org/copyright">OpenStreetMap</a> contributors'
)


def _has_valid_coordinates(result: AnalysisResult | None) -> bool:
    return (
        result is not None
        and math.isfinite(result.latitude)
        and math.isfinite(result.longitude)
    )


def world_view() -> MapView:
    return MapView(center=WORLD_CENTER, zoom=WORLD_ZOOM, tile_url=TILE_URL, attribution=ATTRIBUTION)


def build_map_view(result: AnalysisResult | None) -> MapView:
    """Fly to the estimated location and drop a marker, or show the whole world."""
    if not _has_valid_coordinates(result):
        return world_view()
    position = LatLng(lat=result.latitude, lng=result.longitude)
    return MapView(
        center=position,
        zoom=RESULT_ZOOM,
        marker=MapMarker(
            position=position,
            title=result.country,
            subtitle=result.region or None,
            label=f"{result.latitude:.4f}, {result.longitude:.4f}",
        ),
        fly_duration=FLY_DURATION_SECONDS,
        tile_url=TILE_URL,
        attribution=ATTRIBUTION,
    )
