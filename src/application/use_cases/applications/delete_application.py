from __future__ import annotations

from uuid import UUID

from src.application.errors import ConflictError, NotFound, PermissionDenied
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.audit_log import AuditLog
from src.domain.value_objects.audit import AuditEntityType
from src.domain.value_objects.role import Role


async def execute(uow: UnitOfWork, role: Role, actor_id: UUID, application_id: UUID) -> None:
    if not role.is_admin():
        raise PermissionDenied("Only admins can delete applications")
    existing = await uow.applications.get(application_id)
    if not existing:
        raise NotFound("Application not found")
    if await uow.contracts.count_for_application(application_id) > 0:
        raise ConflictError("Application has a contract and cannot be deleted")
    await uow.interviews.delete_for_application(application_id)
    await uow.applications.delete(application_id)
    await uow.audit_logs.add(
        AuditLog.record(
            entity_type=AuditEntityType.APPLICATION,
            entity_id=application_id,
            action="deleted",
            actor_user_id=actor_id,
            from_value={"status": existing.status.value, "email": existing.email},
        )
    )
    await uow.commit()
