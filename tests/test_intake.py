import base64

import pytest

from geosight.exceptions import InvalidInputError
from geosight.models.analysis import ImageSelection
from geosight.services import intake
from conftest import JPEG_B64, JPEG_BYTES


class TestSelectImage:
    def test_encodes_payload_and_preview(self):
        image = intake.select_image(JPEG_BYTES, "image/jpeg", "street.jpg")
        assert isinstance(image, ImageSelection)
        assert image.base64_payload == JPEG_B64
        assert image.preview_data_url == f"data:image/jpeg;base64,{JPEG_B64}"
        assert image.mime_type == "image/jpeg"
        assert image.filename == "street.jpg"

    @pytest.mark.parametrize("mime_type", ["image/png", "image/webp", "image/heic"])
    def test_accepts_any_image_type(self, mime_type):
        image = intake.select_image(b"\x89PNG", mime_type)
        assert base64.b64decode(image.base64_payload) == b"\x89PNG"

    @pytest.mark.parametrize("mime_type", ["text/plain", "application/pdf", "video/mp4", "", None])
    def test_rejects_non_images(self, mime_type):
        with pytest.raises(InvalidInputError):
            intake.select_image(JPEG_BYTES, mime_type)

    def test_rejects_empty_file(self):
        with pytest.raises(InvalidInputError, match="empty"):
            intake.select_image(b"", "image/jpeg")

    def test_selection_builds_request(self):
        request = intake.select_image(JPEG_BYTES, "image/jpeg").to_request()
        assert request.decoded() == JPEG_BYTES
        assert request.mime_type == "image/jpeg"


class TestLoadImage:
    def test_infers_mime_type_from_name(self, tmp_path):
        path = tmp_path / "street.png"
        path.write_bytes(b"\x89PNG\r\n")
        image = intake.load_image(path)
        assert image.mime_type == "image/png"
        assert image.filename == "street.png"

    def test_rejects_non_image_file(self, tmp_path):
        path = tmp_path / "notes.txt"
        path.write_text("hello")
        with pytest.raises(InvalidInputError):
            intake.load_image(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(InvalidInputError, match="not found"):
            intake.load_image(tmp_path / "nope.jpg")
