from __future__ import annotations

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.animal_photo import AnimalPhoto


async def execute(uow: UnitOfWork, unique_id: str) -> list[AnimalPhoto]:
    animal = await uow.animals.get_by_unique_id(unique_id)
    if not animal:
        raise NotFound("Animal not found")
    return await uow.animal_photos.list_for_animal(animal.id)
