from __future__ import annotations

from uuid import UUID

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.volunteers.list_volunteers import ensure_can_manage
from src.domain.models.volunteer import Volunteer
from src.domain.value_objects.role import Role


async def execute(uow: UnitOfWork, role: Role, volunteer_id: UUID) -> Volunteer:
    ensure_can_manage(role)
    volunteer = await uow.volunteers.get(volunteer_id)
    if not volunteer:
        raise NotFound("Volunteer not found")
    return volunteer
