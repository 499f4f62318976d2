from __future__ import annotations

from uuid import UUID

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.animals.update_animal import ensure_can_edit
from src.domain.models.animal_photo import AnimalPhoto
from src.domain.value_objects.role import Role


async def execute(
    uow: UnitOfWork,
    role: Role,
    actor_id: UUID,
    unique_id: str,
    photo_id: UUID,
) -> list[AnimalPhoto]:
    animal = await uow.animals.get_by_unique_id(unique_id)
    if not animal:
        raise NotFound("Animal not found")
    ensure_can_edit(role, actor_id, animal)
    photo = await uow.animal_photos.get(photo_id)
    if not photo or photo.animal_id != animal.id:
        raise NotFound("Photo not found")
    await uow.animal_photos.set_primary(animal.id, photo_id)
    await uow.commit()
    return await uow.animal_photos.list_for_animal(animal.id)
