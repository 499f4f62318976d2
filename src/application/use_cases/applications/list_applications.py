from __future__ import annotations

from src.application.errors import NotFound, PermissionDenied
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.application import Application
from src.domain.value_objects.application_status import ApplicationStatus
from src.domain.value_objects.role import Role


def ensure_can_review(role: Role) -> None:
    if not role.can_review_applications():
        raise PermissionDenied("Role not allowed to view applications")


async def execute(
    uow: UnitOfWork,
    role: Role,
    *,
    status: ApplicationStatus | None = None,
) -> list[Application]:
    ensure_can_review(role)
    return await uow.applications.list(statuses=[status] if status else None)


async def list_for_animal(uow: UnitOfWork, unique_id: str) -> list[Application]:
    # Every volunteer role (admin, interviewer, foster) may see an animal's applications
    animal = await uow.animals.get_by_unique_id(unique_id)
    if not animal:
        raise NotFound("Animal not found")
    return await uow.applications.list(animal_id=animal.id)
