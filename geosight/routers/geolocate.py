from fastapi import APIRouter, File, UploadFile

from geosight.models.analysis import AnalysisRequest
from geosight.models.common import GeolocationResponse
from geosight.models.map import MapView
from geosight.services import gemini as gemini_service
from geosight.services import intake
from geosight.services.map_view import build_map_view, world_view

router = APIRouter(prefix="/api", tags=["geolocate"])


async def _geolocate(base64_payload: str, mime_type: str) -> GeolocationResponse:
    result = await gemini_service.analyze(base64_payload, mime_type)
    return GeolocationResponse(analysis=result, map=build_map_view(result))


@router.post("/geolocate")
async def geolocate_upload(file: UploadFile = File(...)) -> GeolocationResponse:
    image = intake.select_image(await file.read(), file.content_type, file.filename)
    return await _geolocate(image.base64_payload, image.mime_type)


@router.post("/geolocate/base64")
async def geolocate_base64(req: AnalysisRequest) -> GeolocationResponse:
    return await _geolocate(req.image_bytes, req.mime_type)


@router.get("/map")
def default_map() -> MapView:
    return world_view()
