"""Validate a user-selected image file and prepare it for analysis."""

import base64
import mimetypes
from pathlib import Path

from geosight.exceptions import InvalidInputError
from geosight.models.analysis import ImageSelection


def _data_url(mime_type: str, payload: str) -> str:
    return f"data:{mime_type};base64,{payload}"


def select_image(
    data: bytes, mime_type: str | None, filename: str | None = None
) -> ImageSelection:
    """Encode an uploaded image into a base64 payload plus a preview data URL.

    The media type must be ``image/*``. Nothing is resized or recompressed.
    """
    if not mime_type or not mime_type.startswith("image/"):
        raise InvalidInputError(
            f"Please upload a valid image file (got {mime_type or 'unknown type'})."
        )
    if not data:
        raise InvalidInputError("The selected image is empty.")
    payload = base64.b64encode(data).decode("ascii")
    return ImageSelection(
        mime_type=mime_type,
        base64_payload=payload,
        preview_data_url=_data_url(mime_type, payload),
        filename=filename,
    )


def load_image(path: str | Path) -> ImageSelection:
    """Read an image from disk, inferring its media type from the file name."""
    path = Path(path)
    if not path.is_file():
        raise InvalidInputError(f"Image file not found: {path}")
    mime_type = mimetypes.guess_type(path.name)[0]
    return select_image(path.read_bytes(), mime_type, filename=path.name)
