from __future__ import annotations

from src.application.errors import PermissionDenied, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.audit_log import AuditLog
from src.domain.value_objects.audit import AuditEntityType
from src.domain.value_objects.role import Role


async def execute(
    uow: UnitOfWork,
    role: Role,
    *,
    entity_type: AuditEntityType | None = None,
    entity_id: str | None = None,
    limit: int = 100,
) -> list[AuditLog]:
    if not role.is_admin():
        raise PermissionDenied("Only admins can read the audit log")
    if limit <= 0 or limit > 500:
        raise ValidationError("limit must be between 1 and 500")
    return await uow.audit_logs.list(entity_type=entity_type, entity_id=entity_id, limit=limit)
