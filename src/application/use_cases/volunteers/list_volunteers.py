from __future__ import annotations

from src.application.errors import PermissionDenied
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.volunteer import Volunteer
from src.domain.value_objects.role import Role


def ensure_can_manage(role: Role) -> None:
    if not role.can_manage_volunteers():
        raise PermissionDenied("Only admins can manage volunteers")


async def execute(uow: UnitOfWork, role: Role) -> list[Volunteer]:
    ensure_can_manage(role)
    return await uow.volunteers.list()


async def count_total(uow: UnitOfWork) -> int:
    return await uow.volunteers.count()
