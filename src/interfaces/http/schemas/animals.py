from __future__ import annotations

import re
from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.domain.value_objects.animal_status import AnimalSize, AnimalStatus, Sex


def _normalize_personality(v: list[str] | None) -> list[str] | None:
    if v is None:
        return v
    # Trim, drop blanks and case-insensitive duplicates while preserving order
    seen = set()
    unique = []
    for trait in v:
        clean = re.sub(r"\s+", " ", trait).strip()
        if not clean or clean.lower() in seen:
            continue
        if len(clean) > 50:
            raise ValueError("Each personality trait must be 50 characters or less")
        seen.add(clean.lower())
        unique.append(clean)
    return unique


class AnimalCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    species: str = Field(min_length=1, max_length=100)
    breed: str = Field(min_length=1, max_length=255)
    age: str = Field(min_length=1, max_length=50)
    sex: Sex
    size: AnimalSize = AnimalSize.MEDIUM
    color: str = Field(min_length=1, max_length=100)
    description: str = Field(min_length=1)
    personality: list[str] = Field(default_factory=list, max_length=20)
    vaccinated: bool = False
    neutered: bool = False
    good_with_children: bool = False
    good_with_dogs: bool = False
    good_with_cats: bool = False
    location: str = Field(min_length=1, max_length=255)
    adoption_fee: float = Field(ge=0)
    intake_date: date
    posted_date: date | None = None
    status: AnimalStatus = AnimalStatus.DRAFT
    volunteer_id: UUID | None = None
    microchip_number: str | None = Field(default=None, max_length=50)
    medical_history: str | None = None
    behavior_notes: str | None = None
    intake_source: str | None = Field(default=None, max_length=100)
    internal_notes: str | None = None

    @field_validator("personality")
    @classmethod
    def validate_personality(cls, v: list[str]) -> list[str]:
        return _normalize_personality(v)


class AnimalUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    species: str | None = Field(default=None, min_length=1, max_length=100)
    breed: str | None = Field(default=None, min_length=1, max_length=255)
    age: str | None = Field(default=None, min_length=1, max_length=50)
    sex: Sex | None = None
    size: AnimalSize | None = None
    color: str | None = Field(default=None, min_length=1, max_length=100)
    description: str | None = Field(default=None, min_length=1)
    personality: list[str] | None = Field(default=None, max_length=20)
    vaccinated: bool | None = None
    neutered: bool | None = None
    good_with_children: bool | None = None
    good_with_dogs: bool | None = None
    good_with_cats: bool | None = None
    location: str | None = Field(default=None, min_length=1, max_length=255)
    adoption_fee: float | None = Field(default=None, ge=0)
    intake_date: date | None = None
    posted_date: date | None = None
    volunteer_id: UUID | None = None
    microchip_number: str | None = Field(default=None, max_length=50)
    medical_history: str | None = None
    behavior_notes: str | None = None
    intake_source: str | None = Field(default=None, max_length=100)
    internal_notes: str | None = None

    @field_validator("personality")
    @classmethod
    def validate_personality(cls, v: list[str] | None) -> list[str] | None:
        return _normalize_personality(v)


class AnimalStateUpdate(BaseModel):
    status: AnimalStatus


class PublicAnimalResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    unique_id: str
    name: str
    species: str
    breed: str
    age: str
    sex: Sex
    size: AnimalSize
    color: str
    description: str
    personality: list[str]
    vaccinated: bool
    neutered: bool
    good_with_children: bool
    good_with_dogs: bool
    good_with_cats: bool
    location: str
    adoption_fee: float
    intake_date: date
    posted_date: date
    status: AnimalStatus
    volunteer_id: UUID | None = None
    microchip_number: str | None = None
    medical_history: str | None = None
    behavior_notes: str | None = None
    intake_source: str | None = None
    created_at: datetime
    updated_at: datetime
    # Derived from photos, primary first
    image_urls: list[str] = Field(default_factory=list)


class AnimalResponse(PublicAnimalResponse):
    internal_notes: str | None = None


class AnimalsListResponse(BaseModel):
    items: list[AnimalResponse]
    total: int
    limit: int
    offset: int


class AnimalSummary(BaseModel):
    unique_id: str
    name: str
    species: str
    status: AnimalStatus
    image_urls: list[str] = Field(default_factory=list)


class PhotoResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    url: str
    mime_type: str
    size_bytes: int | None = None
    is_primary: bool
    position: int
    created_at: datetime


class PhotoUploadResponse(BaseModel):
    message: str
    url: str
    photo: PhotoResponse
