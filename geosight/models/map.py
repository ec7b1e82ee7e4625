from pydantic import BaseModel


class LatLng(BaseModel):
    lat: float
    lng: float


class MapMarker(BaseModel):
    position: LatLng
    title: str
    subtitle: str | None = None
    label: str  # "lat, lng" to 4 decimals


class MapView(BaseModel):
    center: LatLng
    zoom: int
    marker: MapMarker | None = None
    fly_duration: float | None = None  # seconds; None means no animation
    tile_url: str
    attribution: str
