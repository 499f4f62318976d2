from __future__ import annotations

from uuid import UUID

from src.application.errors import NotFound, PermissionDenied
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.value_objects.role import Role


async def execute(uow: UnitOfWork, role: Role, interview_id: UUID) -> None:
    if not role.is_admin():
        raise PermissionDenied("Only admins can delete interviews")
    deleted = await uow.interviews.delete(interview_id)
    if not deleted:
        raise NotFound("Interview not found")
    await uow.commit()
