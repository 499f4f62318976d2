from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from src.application.errors import NotFound, PermissionDenied
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.applications.list_applications import ensure_can_review
from src.domain.models.animal import Animal
from src.domain.models.application import Application
from src.domain.models.audit_log import AuditLog
from src.domain.value_objects.application_status import ApplicationStatus
from src.domain.value_objects.audit import AuditEntityType
from src.domain.value_objects.role import Role


@dataclass(slots=True)
class StatusUpdateResult:
    application: Application
    animal: Animal | None
    changed: bool


async def execute(
    uow: UnitOfWork,
    role: Role,
    actor_id: UUID,
    application_id: UUID,
    status: ApplicationStatus,
) -> StatusUpdateResult:
    ensure_can_review(role)
    if status is ApplicationStatus.APPROVED and not role.can_approve_applications():
        raise PermissionDenied("Only admins can approve applications")
    existing = await uow.applications.get(application_id)
    if not existing:
        raise NotFound("Application not found")
    animal = await uow.animals.get(existing.animal_id)
    if existing.status is status:
        return StatusUpdateResult(application=existing, animal=animal, changed=False)

    updated = await uow.applications.update_status(application_id, status)
    if not updated:
        raise NotFound("Application not found")
    await uow.audit_logs.add(
        AuditLog.record(
            entity_type=AuditEntityType.APPLICATION,
            entity_id=application_id,
            action="status_changed",
            actor_user_id=actor_id,
            from_value={"status": existing.status.value},
            to_value={"status": status.value},
        )
    )
    await uow.commit()
    return StatusUpdateResult(application=updated, animal=animal, changed=True)
