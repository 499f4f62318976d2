from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from src.application.errors import AppError, NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.volunteers.list_volunteers import ensure_can_manage
from src.domain.models.audit_log import AuditLog
from src.domain.models.volunteer import Volunteer
from src.domain.value_objects.audit import AuditEntityType
from src.domain.value_objects.role import Role
from src.domain.value_objects.volunteer_status import VolunteerStatus


@dataclass(slots=True)
class UpdateVolunteerInput:
    first_name: str | None = None
    last_name: str | None = None
    role: Role | None = None
    status: VolunteerStatus | None = None


async def execute(
    uow: UnitOfWork,
    role: Role,
    actor_id: UUID,
    volunteer_id: UUID,
    payload: UpdateVolunteerInput,
) -> Volunteer:
    ensure_can_manage(role)
    existing = await uow.volunteers.get(volunteer_id)
    if not existing:
        raise NotFound("Volunteer not found")
    if volunteer_id == actor_id and (
        (payload.role is not None and payload.role is not existing.role)
        or payload.status is VolunteerStatus.INACTIVE
    ):
        raise AppError("You cannot demote or deactivate your own account")

    data: dict = {}
    for field_name in ("first_name", "last_name", "role", "status"):
        value = getattr(payload, field_name)
        if value is not None:
            data[field_name] = value.strip() if isinstance(value, str) else value
    if not data:
        return existing

    before = {"role": existing.role.value, "status": existing.status.value}
    updated = await uow.volunteers.update(volunteer_id, data)
    if not updated:
        raise NotFound("Volunteer not found")

    after = {"role": updated.role.value, "status": updated.status.value}
    if before != after:
        await uow.audit_logs.add(
            AuditLog.record(
                entity_type=AuditEntityType.USER,
                entity_id=volunteer_id,
                action="access_changed",
                actor_user_id=actor_id,
                from_value=before,
                to_value=after,
            )
        )
    await uow.commit()
    return updated
