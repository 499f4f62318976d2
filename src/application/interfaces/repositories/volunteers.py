from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.models.volunteer import Volunteer
from src.domain.value_objects.role import Role


class VolunteerRepository(Protocol):
    async def add(self, volunteer: Volunteer) -> Volunteer: ...

    async def get(self, volunteer_id: UUID) -> Volunteer | None: ...

    async def get_by_email(self, email: str) -> Volunteer | None: ...

    async def list(self) -> list[Volunteer]: ...

    async def list_active_by_roles(self, roles: list[Role]) -> list[Volunteer]: ...

    async def count(self) -> int: ...

    async def update(self, volunteer_id: UUID, data: dict) -> Volunteer | None: ...

    async def delete(self, volunteer_id: UUID) -> bool: ...
