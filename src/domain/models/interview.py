from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID, uuid4

from src.domain.value_objects.application_status import FinalDecision


@dataclass(slots=True)
class Interview:
    id: UUID
    application_id: UUID
    volunteer_id: UUID
    volunteer_name: str
    interview_time: datetime | None = None
    interview_result: str | None = None
    final_decision: FinalDecision = FinalDecision.PENDING

    @classmethod
    def schedule(
        cls,
        *,
        application_id: UUID,
        volunteer_id: UUID,
        volunteer_name: str,
        interview_time: datetime | None = None,
    ) -> Interview:
        return cls(
            id=uuid4(),
            application_id=application_id,
            volunteer_id=volunteer_id,
            volunteer_name=volunteer_name,
            interview_time=interview_time,
            interview_result=None,
            final_decision=FinalDecision.PENDING,
        )

    def is_assigned_to(self, volunteer_id: UUID) -> bool:
        return self.volunteer_id == volunteer_id
