from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from src.application.errors import ConflictError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.volunteers.list_volunteers import ensure_can_manage
from src.domain.models.audit_log import AuditLog
from src.domain.models.volunteer import Volunteer
from src.domain.value_objects.audit import AuditEntityType
from src.domain.value_objects.role import Role
from src.domain.value_objects.volunteer_status import VolunteerStatus
from src.infrastructure.auth.password import PasswordHasher


@dataclass(slots=True)
class CreateVolunteerInput:
    first_name: str
    last_name: str
    email: str
    password: str
    role: Role = Role.FOSTER
    status: VolunteerStatus = VolunteerStatus.ACTIVE


async def execute(
    uow: UnitOfWork,
    role: Role,
    actor_id: UUID,
    payload: CreateVolunteerInput,
    *,
    password_hasher: PasswordHasher,
) -> Volunteer:
    ensure_can_manage(role)
    if await uow.volunteers.get_by_email(payload.email):
        raise ConflictError("Volunteer with this email already exists")
    volunteer = Volunteer.create(
        first_name=payload.first_name,
        last_name=payload.last_name,
        email=payload.email,
        hashed_password=password_hasher.hash(payload.password),
        role=payload.role,
        status=payload.status,
    )
    created = await uow.volunteers.add(volunteer)
    await uow.audit_logs.add(
        AuditLog.record(
            entity_type=AuditEntityType.USER,
            entity_id=created.id,
            action="created",
            actor_user_id=actor_id,
            to_value={"role": created.role.value, "status": created.status.value},
        )
    )
    await uow.commit()
    return created
