from __future__ import annotations

import pytest

from src.application.errors import ValidationError
from src.application.use_cases.animals.upload_photo import (
    UploadPhotoInput,
    build_storage_key,
    validate_upload,
)


def test_content_type_parameters_are_ignored():
    payload = UploadPhotoInput(filename="a.PNG", content_type="Image/PNG; q=1", data=b"x")
    assert validate_upload(payload, max_bytes=10) == "image/png"


@pytest.mark.parametrize(
    "payload, message",
    [
        (UploadPhotoInput("a.pdf", "application/pdf", b"x"), "Only image files are allowed"),
        (UploadPhotoInput("a.jpg", None, b"x"), "Only image files are allowed"),
        (UploadPhotoInput("a.jpg", "image/jpeg", b""), "Uploaded file is empty"),
        (UploadPhotoInput("a.jpg", "image/jpeg", b"x" * 11), "File too large"),
    ],
)
def test_rejected_uploads(payload, message):
    with pytest.raises(ValidationError) as exc:
        validate_upload(payload, max_bytes=10)
    assert exc.value.message == message


def test_storage_key_keeps_extension_or_falls_back():
    key = build_storage_key("SFP-001", "image/png", "Photo.JPEG")
    assert key.startswith("animals/SFP-001/")
    assert key.endswith(".jpeg")
    assert build_storage_key("SFP-001", "image/webp", None).endswith(".webp")
    assert build_storage_key("SFP-001", "image/gif", "blob.toolongext").endswith(".gif")
