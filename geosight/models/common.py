from pydantic import BaseModel

from geosight.models.analysis import AnalysisResult
from geosight.models.map import MapView


class ErrorResponse(BaseModel):
    error_code: str
    message: str


class GeolocationResponse(BaseModel):
    analysis: AnalysisResult
    map: MapView


class ServiceStatus(BaseModel):
    model: str
    configured: bool
    message: str
