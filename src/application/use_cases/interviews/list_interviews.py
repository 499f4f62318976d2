from __future__ import annotations

from uuid import UUID

from src.application.errors import NotFound, PermissionDenied
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.interviews.create_interview import ensure_can_conduct
from src.application.use_cases.interviews.update_interview import ensure_can_access
from src.domain.models.interview import Interview
from src.domain.value_objects.role import Role


async def execute(uow: UnitOfWork, role: Role, actor_id: UUID) -> list[Interview]:
    ensure_can_conduct(role)
    if role.is_admin():
        return await uow.interviews.list()
    return await uow.interviews.list(volunteer_id=actor_id)


async def get(uow: UnitOfWork, role: Role, actor_id: UUID, interview_id: UUID) -> Interview:
    interview = await uow.interviews.get(interview_id)
    if not interview:
        raise NotFound("Interview not found")
    ensure_can_access(role, actor_id, interview)
    return interview


async def list_for_application(uow: UnitOfWork, role: Role, application_id: UUID) -> list[Interview]:
    if not role.is_admin():
        raise PermissionDenied("Only admins can list interviews by application")
    if not await uow.applications.get(application_id):
        raise NotFound("Application not found")
    return await uow.interviews.list(application_id=application_id)
