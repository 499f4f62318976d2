from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import PurePath
from uuid import UUID, uuid4

from src.application.errors import InfrastructureError, NotFound, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.animals.update_animal import ensure_can_edit
from src.domain.models.animal_photo import AnimalPhoto
from src.domain.value_objects.role import Role
from src.infrastructure.storage.ports import StorageService

logger = logging.getLogger(__name__)

ALLOWED_IMAGE_TYPES: dict[str, str] = {
    "image/jpeg": ".jpg",
    "image/png": ".png",
    "image/gif": ".gif",
    "image/webp": ".webp",
}


@dataclass(slots=True)
class UploadPhotoInput:
    filename: str | None
    content_type: str | None
    data: bytes


def build_storage_key(unique_id: str, content_type: str, filename: str | None) -> str:
    suffix = PurePath(filename or "").suffix.lower()
    if not suffix or len(suffix) > 6:
        suffix = ALLOWED_IMAGE_TYPES[content_type]
    return f"animals/{unique_id}/{uuid4().hex}{suffix}"


def validate_upload(payload: UploadPhotoInput, *, max_bytes: int) -> str:
    content_type = (payload.content_type or "").split(";")[0].strip().lower()
    if content_type not in ALLOWED_IMAGE_TYPES:
        raise ValidationError(
            "Only image files are allowed",
            details={"allowed": sorted(ALLOWED_IMAGE_TYPES), "received": content_type or None},
        )
    if not payload.data:
        raise ValidationError("Uploaded file is empty")
    if len(payload.data) > max_bytes:
        raise ValidationError(
            "File too large",
            details={"max_bytes": max_bytes, "size_bytes": len(payload.data)},
        )
    return content_type


async def execute(
    uow: UnitOfWork,
    storage: StorageService | None,
    role: Role,
    actor_id: UUID,
    unique_id: str,
    payload: UploadPhotoInput,
    *,
    max_bytes: int,
) -> AnimalPhoto:
    animal = await uow.animals.get_by_unique_id(unique_id)
    if not animal:
        raise NotFound("Animal not found")
    ensure_can_edit(role, actor_id, animal)
    content_type = validate_upload(payload, max_bytes=max_bytes)
    if storage is None:
        raise InfrastructureError("Photo storage is not configured")

    key = build_storage_key(unique_id, content_type, payload.filename)
    stored_key = await storage.put_object(key, payload.data, content_type, public=True)
    url = await storage.get_public_url(stored_key)

    existing = await uow.animal_photos.count_for_animal(animal.id)
    photo = AnimalPhoto.create(
        animal_id=animal.id,
        url=url,
        storage_key=stored_key,
        mime_type=content_type,
        size_bytes=len(payload.data),
        is_primary=existing == 0,
        position=await uow.animal_photos.next_position(animal.id),
    )
    created = await uow.animal_photos.add(photo)
    await uow.commit()
    logger.info("Uploaded photo %s for animal %s", created.id, unique_id)
    return created
