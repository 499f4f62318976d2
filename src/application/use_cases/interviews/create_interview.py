from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from src.application.errors import AppError, NotFound, PermissionDenied
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.audit_log import AuditLog
from src.domain.models.interview import Interview
from src.domain.value_objects.audit import AuditEntityType
from src.domain.value_objects.role import Role

INTERVIEWER_ROLES = (Role.INTERVIEWER, Role.ADMIN)


@dataclass(slots=True)
class CreateInterviewInput:
    application_id: UUID
    volunteer_id: UUID | None = None
    interview_time: datetime | None = None


def ensure_can_conduct(role: Role) -> None:
    if not role.can_conduct_interviews():
        raise PermissionDenied("Role not allowed to manage interviews")


async def execute(
    uow: UnitOfWork,
    role: Role,
    actor_id: UUID,
    payload: CreateInterviewInput,
) -> Interview:
    ensure_can_conduct(role)
    application = await uow.applications.get(payload.application_id)
    if not application:
        raise NotFound("Application not found")

    volunteer_id = payload.volunteer_id
    if volunteer_id is None:
        if role is not Role.INTERVIEWER:
            raise AppError("Admin must provide volunteer_id to assign an interviewer")
        volunteer_id = actor_id
    volunteer = await uow.volunteers.get(volunteer_id)
    if not volunteer:
        raise NotFound("Interviewer not found")
    if volunteer.role not in INTERVIEWER_ROLES:
        raise AppError("Selected volunteer must have interviewer or admin role")

    interview = await uow.interviews.add(
        Interview.schedule(
            application_id=application.id,
            volunteer_id=volunteer.id,
            volunteer_name=volunteer.full_name,
            interview_time=payload.interview_time,
        )
    )
    await uow.audit_logs.add(
        AuditLog.record(
            entity_type=AuditEntityType.INTERVIEW,
            entity_id=interview.id,
            action="scheduled",
            actor_user_id=actor_id,
            to_value={
                "application_id": str(application.id),
                "volunteer_id": str(volunteer.id),
            },
        )
    )
    await uow.commit()
    return interview
