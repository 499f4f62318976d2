from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from src.domain.value_objects.application_status import ApplicationStatus
from src.interfaces.http.schemas.animals import AnimalSummary


class ApplicationCreate(BaseModel):
    animal_id: str = Field(min_length=1, max_length=32, description="Animal unique id, e.g. SFP-002")
    full_name: str = Field(min_length=1, max_length=100)
    email: EmailStr
    phone: str = Field(min_length=1, max_length=20)
    address: str = Field(min_length=1, max_length=200)
    city: str = Field(min_length=1, max_length=100)
    state: str = Field(min_length=1, max_length=100)
    zip_code: str = Field(min_length=1, max_length=20)
    household_type: str = Field(min_length=1, max_length=50)
    has_children: bool = False
    children_ages: str | None = Field(default=None, max_length=100)
    has_other_pets: bool = False
    other_pets_details: str | None = None
    experience_with_pets: str = Field(min_length=1, max_length=50)
    hours_away: str = Field(min_length=1, max_length=20)
    reason_for_adoption: str = Field(min_length=1)
    emergency_contact_name: str = Field(min_length=1, max_length=100)
    emergency_contact_phone: str = Field(min_length=1, max_length=20)
    agreed_to_terms: bool


class ApplicationStatusUpdate(BaseModel):
    status: ApplicationStatus


class ApplicationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    animal_id: str
    status: ApplicationStatus
    full_name: str
    email: EmailStr
    phone: str
    address: str
    city: str
    state: str
    zip_code: str
    household_type: str
    has_children: bool
    children_ages: str | None = None
    has_other_pets: bool
    other_pets_details: str | None = None
    experience_with_pets: str
    hours_away: str
    reason_for_adoption: str
    emergency_contact_name: str
    emergency_contact_phone: str
    agreed_to_terms: bool
    created_at: datetime
    animal: AnimalSummary | None = None


class ApplicationSummary(BaseModel):
    id: UUID
    animal_id: str
    status: ApplicationStatus
    full_name: str
    email: EmailStr
    phone: str
