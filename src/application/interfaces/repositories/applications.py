from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.models.application import Application
from src.domain.value_objects.application_status import ApplicationStatus


class ApplicationRepository(Protocol):
    async def add(self, application: Application) -> Application: ...

    async def get(self, application_id: UUID) -> Application | None: ...

    async def list(
        self,
        *,
        animal_id: UUID | None = None,
        statuses: list[ApplicationStatus] | None = None,
    ) -> list[Application]: ...

    async def count(
        self,
        *,
        animal_id: UUID | None = None,
        statuses: list[ApplicationStatus] | None = None,
    ) -> int: ...

    async def update_status(
        self, application_id: UUID, status: ApplicationStatus
    ) -> Application | None: ...

    async def delete(self, application_id: UUID) -> bool: ...
