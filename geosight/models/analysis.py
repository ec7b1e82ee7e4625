import base64
import binascii
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

_CAMEL = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AnalysisRequest(BaseModel):
    """One image submitted for geolocation. Consumed once, then discarded."""

    model_config = _CAMEL

    image_bytes: str  # base64
    mime_type: str

    @field_validator("mime_type")
    @classmethod
    def _must_be_image(cls, value: str) -> str:
        if not value.startswith("image/"):
            raise ValueError(f"not an image: {value!r}")
        return value

    @field_validator("image_bytes")
    @classmethod
    def _must_decode(cls, value: str) -> str:
        try:
            decoded = base64.b64decode(value, validate=True)
        except (binascii.Error, ValueError) as e:
            raise ValueError(f"image payload is not valid base64: {e}") from e
        if not decoded:
            raise ValueError("image payload is empty")
        return value

    def decoded(self) -> bytes:
        return base64.b64decode(self.image_bytes, validate=True)


class RawAnalysis(BaseModel):
    """Gemini's answer as parsed, before coordinates are sanitized."""

    model_config = _CAMEL

    thought_process: str
    visual_cues: list[str]
    country: str
    region: str | None = None
    latitude: Any
    longitude: Any
    explanation: str
    confidence: float


class AnalysisResult(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    thought_process: str
    visual_cues: tuple[str, ...]
    country: str
    region: str | None = None
    latitude: float
    longitude: float
    explanation: str
    confidence: float  # 0-100, not enforced


class ImageSelection(BaseModel):
    model_config = ConfigDict(frozen=True)

    mime_type: str
    base64_payload: str
    preview_data_url: str
    filename: str | None = None

    def to_request(self) -> AnalysisRequest:
        return AnalysisRequest(image_bytes=self.base64_payload, mime_type=self.mime_type)
