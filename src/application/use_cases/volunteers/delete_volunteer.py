from __future__ import annotations

from uuid import UUID

from src.application.errors import AppError, ConflictError, NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.volunteers.list_volunteers import ensure_can_manage
from src.domain.models.audit_log import AuditLog
from src.domain.value_objects.audit import AuditEntityType
from src.domain.value_objects.role import Role


async def execute(uow: UnitOfWork, role: Role, actor_id: UUID, volunteer_id: UUID) -> None:
    ensure_can_manage(role)
    if volunteer_id == actor_id:
        raise AppError("You cannot delete your own account")
    existing = await uow.volunteers.get(volunteer_id)
    if not existing:
        raise NotFound("Volunteer not found")
    assigned = await uow.interviews.count(volunteer_id=volunteer_id)
    if assigned > 0:
        raise ConflictError(
            "Volunteer is assigned to interviews; deactivate the account instead",
            details={"interviews": assigned},
        )
    await uow.volunteers.delete(volunteer_id)
    await uow.audit_logs.add(
        AuditLog.record(
            entity_type=AuditEntityType.USER,
            entity_id=volunteer_id,
            action="deleted",
            actor_user_id=actor_id,
            from_value={"email": existing.email, "role": existing.role.value},
        )
    )
    await uow.commit()
