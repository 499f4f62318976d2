from __future__ import annotations

import logging
from uuid import UUID

from src.application.errors import AppError, NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.animals.update_animal import ensure_can_edit
from src.domain.value_objects.role import Role
from src.infrastructure.storage.ports import StorageService

logger = logging.getLogger(__name__)


async def remove_objects(storage: StorageService | None, keys: list[str]) -> None:
    """Best-effort cleanup of stored objects; the database rows are already gone."""
    if storage is None:
        return
    for key in keys:
        try:
            await storage.delete_object(key)
        except AppError as exc:
            logger.warning("Could not delete stored object %s: %s", key, exc.message)


async def execute(
    uow: UnitOfWork,
    storage: StorageService | None,
    role: Role,
    actor_id: UUID,
    unique_id: str,
    photo_id: UUID,
) -> None:
    animal = await uow.animals.get_by_unique_id(unique_id)
    if not animal:
        raise NotFound("Animal not found")
    ensure_can_edit(role, actor_id, animal)
    photo = await uow.animal_photos.get(photo_id)
    if not photo or photo.animal_id != animal.id:
        raise NotFound("Photo not found")

    await uow.animal_photos.delete(photo_id)
    if photo.is_primary:
        remaining = await uow.animal_photos.list_for_animal(animal.id)
        if remaining:
            await uow.animal_photos.set_primary(animal.id, remaining[0].id)
    await uow.commit()
    await remove_objects(storage, [photo.storage_key])
