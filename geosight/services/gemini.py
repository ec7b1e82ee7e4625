"""Gemini geolocation client — sends one street-level image and parses the structured answer."""

import logging

import httpx
from google import genai
from google.genai import errors, types
from pydantic import ValidationError

from geosight.config import get_settings
from geosight.exceptions import (
    AuthenticationError,
    EmptyResponseError,
    InvalidInputError,
    MalformedResponseError,
    TransportError,
)
from geosight.models.analysis import AnalysisRequest, AnalysisResult, RawAnalysis
from geosight.services.sanitizer import sanitize

logger = logging.getLogger(__name__)

SYSTEM_INSTRUCTION = """\
You are a world-champion GeoGuessr player and an expert geographer.
Your task is to analyze a street-level image and determine its most likely location.

First, write out your thought process (thoughtProcess). Perform a detailed, step-by-step
visual analysis, looking for:
- Vegetation (hardiness zone, specific plant species)
- Soil color and texture
- Road markings (line color, style, width)
- Architecture and infrastructure (utility pole types, bollards)
- Driving side (left-hand or right-hand traffic)
- Sun position (hemisphere)
- Language and script on signs
- Camera generation or vehicle metadata (if visible or known)

After the analysis, give a precise latitude/longitude estimate and a final summary explanation.
Write every output field in {language}.
"""

USER_PROMPT = (
    "Analyze this image. Where was it taken? "
    "First give a detailed step-by-step thought process."
)

# Reasoning fields come first so the model writes them before committing to an answer.
PROPERTY_ORDERING = [
    "thoughtProcess",
    "visualCues",
    "country",
    "region",
    "latitude",
    "longitude",
    "explanation",
    "confidence",
]

REQUIRED_FIELDS = [
    "thoughtProcess",
    "latitude",
    "longitude",
    "country",
    "explanation",
    "visualCues",
    "confidence",
]

_PROPERTIES = {
    "thoughtProcess": types.Schema(
        type=types.Type.STRING,
        description=(
            "The raw step-by-step analysis. Describe what you see, what you rule out, "
            "and how you narrow the location down before deciding."
        ),
    ),
    "visualCues": types.Schema(
        type=types.Type.ARRAY,
        items=types.Schema(type=types.Type.STRING),
        description="Specific visual clues found, e.g. 'yellow license plates', 'eucalyptus trees'.",
    ),
    "country": types.Schema(type=types.Type.STRING, description="Country name"),
    "region": types.Schema(type=types.Type.STRING, description="State, province or region name"),
    "latitude": types.Schema(type=types.Type.NUMBER, description="Estimated latitude"),
    "longitude": types.Schema(type=types.Type.NUMBER, description="Estimated longitude"),
    "explanation": types.Schema(
        type=types.Type.STRING,
        description="Polished summary of the final conclusion and the key reasoning.",
    ),
    "confidence": types.Schema(type=types.Type.NUMBER, description="Confidence score (0-100)"),
}

RESPONSE_SCHEMA = types.Schema(
    type=types.Type.OBJECT,
    properties={name: _PROPERTIES[name] for name in PROPERTY_ORDERING},
    required=REQUIRED_FIELDS,
    property_ordering=PROPERTY_ORDERING,
)


def _get_client() -> genai.Client:
    settings = get_settings()
    if not settings.gemini_api_key:
        raise AuthenticationError(
            "Gemini API key not configured. Get one at "
            "https://aistudio.google.com/apikey and set GEMINI_API_KEY in .env"
        )
    http_options = None
    if settings.gemini_base_url:
        http_options = types.HttpOptions(base_url=settings.gemini_base_url)
    return genai.Client(api_key=settings.gemini_api_key, http_options=http_options)


def build_contents(request: AnalysisRequest) -> list[types.Content]:
    """The user turn: the inline image followed by the instruction text."""
    return [
        types.Content(
            role="user",
            parts=[
                types.Part.from_bytes(data=request.decoded(), mime_type=request.mime_type),
                types.Part.from_text(text=USER_PROMPT),
            ],
        )
    ]


def build_config(language: str | None = None) -> types.GenerateContentConfig:
    language = language or get_settings().response_language
    return types.GenerateContentConfig(
        system_instruction=SYSTEM_INSTRUCTION.format(language=language),
        response_mime_type="application/json",
        response_schema=RESPONSE_SCHEMA,
    )


def parse_analysis(text: str | None) -> RawAnalysis:
    """Parse Gemini's JSON text. Coordinates are left as received."""
    if not text:
        raise EmptyResponseError("No response text received from Gemini.")
    try:
        return RawAnalysis.model_validate_json(text)
    except ValidationError as e:
        raise MalformedResponseError(f"Gemini response did not match the expected schema: {e}") from e


async def fetch_analysis(request: AnalysisRequest, model: str | None = None) -> RawAnalysis:
    """Issue the single generate_content call for a request and parse the reply."""
    client = _get_client()
    model = model or get_settings().gemini_model
    logger.info(
        "Submitting %s image (%d base64 chars) to %s",
        request.mime_type, len(request.image_bytes), model,
    )
    try:
        response = await client.aio.models.generate_content(
            model=model,
            contents=build_contents(request),
            config=build_config(),
        )
    except (errors.APIError, httpx.HTTPError) as e:
        logger.error("Gemini analysis failed: %s", e)
        raise TransportError(str(e)) from e
    try:
        return parse_analysis(response.text)
    except (EmptyResponseError, MalformedResponseError) as e:
        logger.error("Gemini analysis failed: %s", e)
        raise


async def analyze(base64_payload: str, mime_type: str, model: str | None = None) -> AnalysisResult:
    """Geolocate a base64-encoded image and return the sanitized result."""
    try:
        request = AnalysisRequest(image_bytes=base64_payload, mime_type=mime_type)
    except ValidationError as e:
        raise InvalidInputError(e.errors()[0]["msg"]) from e
    return sanitize(await fetch_analysis(request, model))
