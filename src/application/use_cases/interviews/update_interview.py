from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from src.application.errors import AppError, NotFound, PermissionDenied
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.interviews.create_interview import ensure_can_conduct
from src.domain.models.audit_log import AuditLog
from src.domain.models.interview import Interview
from src.domain.value_objects.application_status import FinalDecision
from src.domain.value_objects.audit import AuditEntityType
from src.domain.value_objects.role import Role


@dataclass(slots=True)
class UpdateInterviewInput:
    interview_time: datetime | None = None
    interview_result: str | None = None
    final_decision: FinalDecision | None = None


def ensure_can_access(role: Role, actor_id: UUID, interview: Interview) -> None:
    ensure_can_conduct(role)
    if role is Role.INTERVIEWER and not interview.is_assigned_to(actor_id):
        raise PermissionDenied("Access denied: not assigned to this interview")


async def execute(
    uow: UnitOfWork,
    role: Role,
    actor_id: UUID,
    interview_id: UUID,
    payload: UpdateInterviewInput,
) -> Interview:
    existing = await uow.interviews.get(interview_id)
    if not existing:
        raise NotFound("Interview not found")
    ensure_can_access(role, actor_id, existing)

    data: dict = {}
    if payload.interview_time is not None:
        if existing.interview_time is not None:
            raise AppError("Interview time already set and cannot be updated")
        data["interview_time"] = payload.interview_time
    if payload.interview_result is not None:
        data["interview_result"] = payload.interview_result
    if payload.final_decision is not None:
        if not role.is_admin():
            raise PermissionDenied("Only admin can set final decision")
        data["final_decision"] = payload.final_decision
    if not data:
        return existing

    previous_decision = existing.final_decision
    updated = await uow.interviews.update(interview_id, data)
    if not updated:
        raise NotFound("Interview not found")
    if "final_decision" in data and previous_decision is not payload.final_decision:
        await uow.audit_logs.add(
            AuditLog.record(
                entity_type=AuditEntityType.INTERVIEW,
                entity_id=interview_id,
                action="final_decision",
                actor_user_id=actor_id,
                from_value={"final_decision": previous_decision.value},
                to_value={"final_decision": updated.final_decision.value},
            )
        )
    await uow.commit()
    return updated
