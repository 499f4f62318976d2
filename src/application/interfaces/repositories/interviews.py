from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.models.interview import Interview
from src.domain.value_objects.application_status import FinalDecision


class InterviewRepository(Protocol):
    async def add(self, interview: Interview) -> Interview: ...

    async def get(self, interview_id: UUID) -> Interview | None: ...

    async def list(
        self,
        *,
        volunteer_id: UUID | None = None,
        application_id: UUID | None = None,
    ) -> list[Interview]: ...

    async def count(
        self,
        *,
        volunteer_id: UUID | None = None,
        final_decision: FinalDecision | None = None,
        scheduled_only: bool = False,
    ) -> int: ...

    async def update(self, interview_id: UUID, data: dict) -> Interview | None: ...

    async def delete(self, interview_id: UUID) -> bool: ...

    async def delete_for_application(self, application_id: UUID) -> int: ...