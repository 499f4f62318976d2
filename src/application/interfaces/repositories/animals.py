from __future__ import annotations

from datetime import datetime
from typing import Protocol
from uuid import UUID

from src.domain.models.animal import Animal
from src.domain.value_objects.animal_status import AnimalStatus


class AnimalRepository(Protocol):
    async def add(self, animal: Animal) -> Animal: ...

    async def get(self, animal_id: UUID) -> Animal | None: ...

    async def get_by_unique_id(self, unique_id: str) -> Animal | None: ...

    async def get_many(self, animal_ids: list[UUID]) -> dict[UUID, Animal]: ...

    async def list(
        self,
        *,
        statuses: list[AnimalStatus] | None = None,
        volunteer_id: UUID | None = None,
        search: str | None = None,
        limit: int | None = None,
        offset: int | None = None,
    ) -> list[Animal]: ...

    async def count(
        self,
        *,
        statuses: list[AnimalStatus] | None = None,
        volunteer_id: UUID | None = None,
        search: str | None = None,
        updated_since: datetime | None = None,
    ) -> int: ...

    async def count_by_status(self, *, volunteer_id: UUID | None = None) -> dict[str, int]: ...

    async def list_unique_ids(self) -> list[str]: ...

    async def update(self, animal_id: UUID, data: dict) -> Animal | None: ...

    async def delete(self, animal_id: UUID) -> bool: ...
