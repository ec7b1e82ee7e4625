from fastmcp import FastMCP

from geosight.exceptions import (
    AuthenticationError,
    EmptyResponseError,
    GeoSightError,
    InvalidInputError,
    MalformedResponseError,
    TransportError,
)
from geosight.models.analysis import AnalysisResult
from geosight.services import gemini as gemini_service
from geosight.services import intake
from geosight.services.map_view import build_map_view

mcp = FastMCP("GeoSight")


def _handle_mcp_error(e: Exception) -> dict:
    """Convert exceptions to agent-friendly error dicts."""
    if isinstance(e, AuthenticationError):
        return {"error": "auth_error", "message": str(e), "action": "Ask the user to set GEMINI_API_KEY"}
    if isinstance(e, InvalidInputError):
        return {"error": "invalid_input", "message": str(e), "action": "Provide an image file"}
    if isinstance(e, TransportError):
        return {"error": "transport_error", "message": str(e)}
    if isinstance(e, (EmptyResponseError, MalformedResponseError)):
        return {"error": "bad_response", "message": str(e), "action": "Retry the analysis"}
    return {"error": "unknown_error", "message": str(e)}


def _result_dict(result: AnalysisResult) -> dict:
    return {
        "analysis": result.model_dump(mode="json", by_alias=True),
        "map": build_map_view(result).model_dump(mode="json"),
    }


@mcp.tool
async def geolocate_image(image_path: str) -> dict:
    """Estimate where a street-level photo was taken. Provide the path to a local image file.
    Returns the country, region, latitude/longitude, confidence (0-100), an explanation,
    the visual cues used and the full step-by-step thought process."""
    try:
        image = intake.load_image(image_path)
        result = await gemini_service.analyze(image.base64_payload, image.mime_type)
        return _result_dict(result)
    except GeoSightError as e:
        return _handle_mcp_error(e)


@mcp.tool
async def geolocate_image_base64(image_base64: str, mime_type: str = "image/jpeg") -> dict:
    """Estimate where a street-level photo was taken from base64-encoded image bytes.
    mime_type must be an image type such as image/jpeg or image/png."""
    try:
        result = await gemini_service.analyze(image_base64, mime_type)
        return _result_dict(result)
    except GeoSightError as e:
        return _handle_mcp_error(e)
