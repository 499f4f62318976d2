from __future__ import annotations

from uuid import UUID

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.volunteer import Volunteer


async def execute(uow: UnitOfWork, volunteer_id: UUID) -> Volunteer:
    volunteer = await uow.volunteers.get(volunteer_id)
    if not volunteer:
        raise NotFound("User not found")
    return volunteer
