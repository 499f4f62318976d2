from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from src.application.errors import NotFound, PermissionDenied, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.unset import UNSET
from src.domain.models.animal import Animal
from src.domain.value_objects.animal_status import AnimalSize, Sex
from src.domain.value_objects.role import Role


@dataclass(slots=True)
class UpdateAnimalInput:
    name: str | None = UNSET
    species: str | None = UNSET
    breed: str | None = UNSET
    age: str | None = UNSET
    sex: Sex | None = UNSET
    size: AnimalSize | None = UNSET
    color: str | None = UNSET
    description: str | None = UNSET
    personality: list[str] | None = UNSET
    vaccinated: bool | None = UNSET
    neutered: bool | None = UNSET
    good_with_children: bool | None = UNSET
    good_with_dogs: bool | None = UNSET
    good_with_cats: bool | None = UNSET
    location: str | None = UNSET
    adoption_fee: float | None = UNSET
    intake_date: date | None = UNSET
    posted_date: date | None = UNSET
    volunteer_id: UUID | None = UNSET
    microchip_number: str | None = UNSET
    medical_history: str | None = UNSET
    behavior_notes: str | None = UNSET
    intake_source: str | None = UNSET
    internal_notes: str | None = UNSET


UPDATABLE_FIELDS = tuple(UpdateAnimalInput.__dataclass_fields__)

# Columns an update may set back to null
NULLABLE_FIELDS = frozenset(
    {"microchip_number", "medical_history", "behavior_notes", "intake_source", "internal_notes"}
)


def ensure_can_edit(role: Role, actor_id: UUID, animal: Animal) -> None:
    """Admins edit any animal; fosters only the ones assigned to them."""
    if not role.can_manage_animals():
        raise PermissionDenied("Role not allowed to edit animals")
    if role is Role.FOSTER and not animal.is_owned_by(actor_id):
        raise PermissionDenied("Fosters can only edit their own animals")


async def execute(
    uow: UnitOfWork,
    role: Role,
    actor_id: UUID,
    unique_id: str,
    payload: UpdateAnimalInput,
) -> Animal:
    existing = await uow.animals.get_by_unique_id(unique_id)
    if not existing:
        raise NotFound("Animal not found")
    ensure_can_edit(role, actor_id, existing)

    data = {
        name: getattr(payload, name)
        for name in UPDATABLE_FIELDS
        if getattr(payload, name) is not UNSET
    }
    not_nullable = sorted(k for k, v in data.items() if v is None and k not in NULLABLE_FIELDS)
    if not_nullable:
        raise ValidationError(
            "These fields cannot be cleared", details={"fields": not_nullable}
        )

    new_owner = data.get("volunteer_id")
    if new_owner is not None and new_owner != existing.volunteer_id:
        if role is Role.FOSTER:
            raise PermissionDenied("Fosters cannot reassign animals")
        if not await uow.volunteers.get(new_owner):
            raise NotFound("Volunteer not found")
    if not data:
        return existing

    updated = await uow.animals.update(existing.id, data)
    if not updated:
        raise NotFound("Animal not found")
    await uow.commit()
    return updated
