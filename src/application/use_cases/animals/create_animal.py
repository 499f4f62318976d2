from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from uuid import UUID

from src.application.errors import ConflictError, NotFound, PermissionDenied
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.animal import Animal, format_unique_id, parse_unique_number
from src.domain.models.audit_log import AuditLog
from src.domain.value_objects.animal_status import AnimalSize, AnimalStatus, Sex
from src.domain.value_objects.audit import AuditEntityType
from src.domain.value_objects.role import Role

logger = logging.getLogger(__name__)

MAX_ID_ATTEMPTS = 3


@dataclass(slots=True)
class CreateAnimalInput:
    name: str
    species: str
    breed: str
    age: str
    sex: Sex
    color: str
    description: str
    location: str
    adoption_fee: float
    intake_date: date
    posted_date: date | None = None
    volunteer_id: UUID | None = None
    size: AnimalSize = AnimalSize.MEDIUM
    personality: list[str] = field(default_factory=list)
    vaccinated: bool = False
    neutered: bool = False
    good_with_children: bool = False
    good_with_dogs: bool = False
    good_with_cats: bool = False
    status: AnimalStatus = AnimalStatus.DRAFT
    microchip_number: str | None = None
    medical_history: str | None = None
    behavior_notes: str | None = None
    intake_source: str | None = None
    internal_notes: str | None = None


def ensure_can_create(role: Role) -> None:
    if not role.can_manage_animals():
        raise PermissionDenied("Role not allowed to create animals")


async def next_unique_id(uow: UnitOfWork) -> str:
    """Next `SFP-###` after the highest existing number; ids not matching the pattern are ignored."""
    numbers = [
        number
        for number in (parse_unique_number(uid) for uid in await uow.animals.list_unique_ids())
        if number is not None
    ]
    return format_unique_id(max(numbers) + 1 if numbers else 1)


async def _resolve_owner(
    uow: UnitOfWork, role: Role, actor_id: UUID, requested: UUID | None
) -> UUID:
    if role is Role.FOSTER:
        if requested is not None and requested != actor_id:
            raise PermissionDenied("Fosters can only create animals for themselves")
        return actor_id
    owner_id = requested or actor_id
    if owner_id != actor_id and not await uow.volunteers.get(owner_id):
        raise NotFound("Volunteer not found")
    return owner_id


async def execute(
    uow: UnitOfWork,
    role: Role,
    actor_id: UUID,
    payload: CreateAnimalInput,
) -> Animal:
    ensure_can_create(role)
    owner_id = await _resolve_owner(uow, role, actor_id, payload.volunteer_id)

    created: Animal | None = None
    for attempt in range(1, MAX_ID_ATTEMPTS + 1):
        animal = Animal.create(
            unique_id=await next_unique_id(uow),
            name=payload.name,
            species=payload.species,
            breed=payload.breed,
            age=payload.age,
            sex=payload.sex,
            color=payload.color,
            description=payload.description,
            location=payload.location,
            adoption_fee=payload.adoption_fee,
            intake_date=payload.intake_date,
            posted_date=payload.posted_date,
            volunteer_id=owner_id,
            size=payload.size,
            personality=payload.personality,
            vaccinated=payload.vaccinated,
            neutered=payload.neutered,
            good_with_children=payload.good_with_children,
            good_with_dogs=payload.good_with_dogs,
            good_with_cats=payload.good_with_cats,
            status=payload.status,
            microchip_number=payload.microchip_number,
            medical_history=payload.medical_history,
            behavior_notes=payload.behavior_notes,
            intake_source=payload.intake_source,
            internal_notes=payload.internal_notes,
        )
        try:
            created = await uow.animals.add(animal)
            break
        except ConflictError:
            # Another request took the same number between read and insert
            await uow.rollback()
            logger.warning("Unique id %s taken, retrying (%d)", animal.unique_id, attempt)
    if created is None:
        raise ConflictError("Could not allocate a unique animal id, please retry")

    await uow.audit_logs.add(
        AuditLog.record(
            entity_type=AuditEntityType.ANIMAL,
            entity_id=created.unique_id,
            action="created",
            actor_user_id=actor_id,
            to_value={"status": created.status.value, "volunteer_id": str(owner_id)},
        )
    )
    await uow.commit()
    return created
