from __future__ import annotations

from dataclasses import dataclass, fields

from src.application.errors import NotFound, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.animal import Animal
from src.domain.models.application import Application
from src.domain.models.audit_log import AuditLog
from src.domain.models.volunteer import Volunteer
from src.domain.value_objects.audit import AuditEntityType
from src.domain.value_objects.role import Role


@dataclass(slots=True)
class SubmitApplicationInput:
    animal_id: str
    full_name: str
    email: str
    phone: str
    address: str
    city: str
    state: str
    zip_code: str
    household_type: str
    experience_with_pets: str
    hours_away: str
    reason_for_adoption: str
    emergency_contact_name: str
    emergency_contact_phone: str
    agreed_to_terms: bool
    has_children: bool = False
    children_ages: str | None = None
    has_other_pets: bool = False
    other_pets_details: str | None = None


@dataclass(slots=True)
class SubmitApplicationResult:
    application: Application
    animal: Animal
    # Active admins and interviewers to notify
    reviewers: list[Volunteer]


async def execute(uow: UnitOfWork, payload: SubmitApplicationInput) -> SubmitApplicationResult:
    if not payload.agreed_to_terms:
        raise ValidationError("You must agree to the adoption terms")
    animal = await uow.animals.get_by_unique_id(payload.animal_id)
    if not animal:
        raise NotFound("Animal not found")

    form = {
        item.name: getattr(payload, item.name)
        for item in fields(payload)
        if item.name != "animal_id"
    }
    form["email"] = form["email"].strip().lower()
    application = await uow.applications.add(Application.submit(animal_id=animal.id, **form))
    await uow.audit_logs.add(
        AuditLog.record(
            entity_type=AuditEntityType.APPLICATION,
            entity_id=application.id,
            action="submitted",
            to_value={"status": application.status.value, "animal_id": animal.unique_id},
        )
    )
    await uow.commit()
    reviewers = await uow.volunteers.list_active_by_roles([Role.ADMIN, Role.INTERVIEWER])
    return SubmitApplicationResult(application=application, animal=animal, reviewers=reviewers)
