from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.models.animal_photo import AnimalPhoto


class AnimalPhotoRepository(Protocol):
    async def add(self, photo: AnimalPhoto) -> AnimalPhoto: ...

    async def get(self, photo_id: UUID) -> AnimalPhoto | None: ...

    async def list_for_animal(self, animal_id: UUID) -> list[AnimalPhoto]: ...

    async def list_for_animals(self, animal_ids: list[UUID]) -> dict[UUID, list[AnimalPhoto]]: ...

    async def count_for_animal(self, animal_id: UUID) -> int: ...

    async def next_position(self, animal_id: UUID) -> int: ...

    async def set_primary(self, animal_id: UUID, photo_id: UUID) -> None: ...

    async def delete(self, photo_id: UUID) -> bool: ...

    async def delete_for_animal(self, animal_id: UUID) -> list[str]: ...
