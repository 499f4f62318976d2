from __future__ import annotations

from uuid import UUID

from src.application.errors import NotFound, PermissionDenied
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.animal import Animal
from src.domain.models.audit_log import AuditLog
from src.domain.value_objects.animal_status import AnimalStatus
from src.domain.value_objects.audit import AuditEntityType
from src.domain.value_objects.role import Role


def ensure_can_change_state(role: Role, actor_id: UUID, animal: Animal) -> None:
    if not role.can_change_animal_state():
        raise PermissionDenied("Role not allowed to change animal status")
    if role is Role.FOSTER and not animal.is_owned_by(actor_id):
        raise PermissionDenied("Fosters can only change the status of their own animals")


async def execute(
    uow: UnitOfWork,
    role: Role,
    actor_id: UUID,
    unique_id: str,
    status: AnimalStatus,
) -> Animal:
    existing = await uow.animals.get_by_unique_id(unique_id)
    if not existing:
        raise NotFound("Animal not found")
    ensure_can_change_state(role, actor_id, existing)
    if existing.status is status:
        return existing

    previous_status = existing.status
    updated = await uow.animals.update(existing.id, {"status": status})
    if not updated:
        raise NotFound("Animal not found")
    await uow.audit_logs.add(
        AuditLog.record(
            entity_type=AuditEntityType.ANIMAL,
            entity_id=unique_id,
            action="status_changed",
            actor_user_id=actor_id,
            from_value={"status": previous_status.value},
            to_value={"status": status.value},
        )
    )
    await uow.commit()
    return updated
