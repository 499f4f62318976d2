from __future__ import annotations

from uuid import UUID

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.applications.list_applications import ensure_can_review
from src.domain.models.application import Application
from src.domain.value_objects.role import Role


async def execute(uow: UnitOfWork, role: Role, application_id: UUID) -> Application:
    ensure_can_review(role)
    application = await uow.applications.get(application_id)
    if not application:
        raise NotFound("Application not found")
    return application
