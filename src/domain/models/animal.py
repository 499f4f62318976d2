from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from uuid import UUID, uuid4

from src.domain.value_objects.animal_status import AnimalSize, AnimalStatus, Sex

UNIQUE_ID_PREFIX = "SFP-"
UNIQUE_ID_PATTERN = re.compile(r"^SFP-(\d+)$")


def parse_unique_number(unique_id: str) -> int | None:
    match = UNIQUE_ID_PATTERN.match(unique_id or "")
    return int(match.group(1)) if match else None


def format_unique_id(number: int) -> str:
    return f"{UNIQUE_ID_PREFIX}{str(number).zfill(3)}"


@dataclass(slots=True)
class Animal:
    id: UUID
    unique_id: str
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
    posted_date: date
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
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        *,
        unique_id: str,
        name: str,
        species: str,
        breed: str,
        age: str,
        sex: Sex,
        color: str,
        description: str,
        location: str,
        adoption_fee: float,
        intake_date: date,
        posted_date: date | None = None,
        volunteer_id: UUID | None = None,
        size: AnimalSize = AnimalSize.MEDIUM,
        personality: list[str] | None = None,
        vaccinated: bool = False,
        neutered: bool = False,
        good_with_children: bool = False,
        good_with_dogs: bool = False,
        good_with_cats: bool = False,
        status: AnimalStatus = AnimalStatus.DRAFT,
        microchip_number: str | None = None,
        medical_history: str | None = None,
        behavior_notes: str | None = None,
        intake_source: str | None = None,
        internal_notes: str | None = None,
    ) -> Animal:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            unique_id=unique_id,
            name=name,
            species=species,
            breed=breed,
            age=age,
            sex=sex,
            color=color,
            description=description,
            location=location,
            adoption_fee=adoption_fee,
            intake_date=intake_date,
            posted_date=posted_date or now.date(),
            volunteer_id=volunteer_id,
            size=size,
            personality=list(personality or []),
            vaccinated=vaccinated,
            neutered=neutered,
            good_with_children=good_with_children,
            good_with_dogs=good_with_dogs,
            good_with_cats=good_with_cats,
            status=status,
            microchip_number=microchip_number,
            medical_history=medical_history,
            behavior_notes=behavior_notes,
            intake_source=intake_source,
            internal_notes=internal_notes,
            created_at=now,
            updated_at=now,
        )

    def is_owned_by(self, volunteer_id: UUID) -> bool:
        return self.volunteer_id is not None and self.volunteer_id == volunteer_id
