from __future__ import annotations

from uuid import UUID

from src.application.errors import ConflictError, NotFound, PermissionDenied
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.audit_log import AuditLog
from src.domain.value_objects.audit import AuditEntityType
from src.domain.value_objects.role import Role


def ensure_can_delete(role: Role) -> None:
    if not role.is_admin():
        raise PermissionDenied("Only admins can delete animals")


async def execute(uow: UnitOfWork, role: Role, actor_id: UUID, unique_id: str) -> list[str]:
    """Deletes the animal and its photo rows; returns the storage keys to clean up."""
    ensure_can_delete(role)
    existing = await uow.animals.get_by_unique_id(unique_id)
    if not existing:
        raise NotFound("Animal not found")
    applications = await uow.applications.count(animal_id=existing.id)
    if applications > 0:
        raise ConflictError(
            "Animal has adoption applications and cannot be deleted",
            details={"applications": applications},
        )
    storage_keys = await uow.animal_photos.delete_for_animal(existing.id)
    await uow.animals.delete(existing.id)
    await uow.audit_logs.add(
        AuditLog.record(
            entity_type=AuditEntityType.ANIMAL,
            entity_id=unique_id,
            action="deleted",
            actor_user_id=actor_id,
            from_value={"name": existing.name, "status": existing.status.value},
        )
    )
    await uow.commit()
    return storage_keys
