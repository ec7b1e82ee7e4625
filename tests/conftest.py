import base64
import json
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from fastapi.testclient import TestClient


# --- Canned payloads ---

# SOI + APP0 marker; enough for anything that does not actually decode pixels
JPEG_BYTES = b"\xff\xd8\xff\xe0\x00\x10JFIF\x00\x01\x01\x00\x00\x01\x00\x01\x00\x00\xff\xd9"
JPEG_B64 = base64.b64encode(JPEG_BYTES).decode("ascii")

PARIS_ANALYSIS = {
    "thoughtProcess": "Right-hand traffic, white dashed lines, Haussmann facades...",
    "visualCues": ["French road signage", "Plane trees"],
    "country": "France",
    "region": "Île-de-France",
    "latitude": 48.85,
    "longitude": 2.35,
    "explanation": "Parisian boulevard with typical street furniture.",
    "confidence": 87,
}


def gemini_response(payload) -> SimpleNamespace:
    """Shape of a google-genai GenerateContentResponse as far as the client reads it."""
    text = payload if payload is None or isinstance(payload, str) else json.dumps(payload)
    return SimpleNamespace(text=text)


@pytest.fixture
def mock_gemini_client(mocker):
    client = MagicMock()
    client.aio.models.generate_content = AsyncMock(return_value=gemini_response(PARIS_ANALYSIS))
    mocker.patch("geosight.services.gemini._get_client", return_value=client)
    return client


@pytest.fixture
def api_client():
    """FastAPI TestClient for router tests."""
    from geosight.main import api
    return TestClient(api)
