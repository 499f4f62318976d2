from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from src.domain.value_objects.role import Role
from src.domain.value_objects.volunteer_status import VolunteerStatus


class VolunteerCreate(BaseModel):
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(min_length=8, max_length=128)
    role: Role = Role.FOSTER
    status: VolunteerStatus = VolunteerStatus.ACTIVE

    @field_validator("role", mode="before")
    @classmethod
    def normalize_role(cls, v):
        return v.strip().lower() if isinstance(v, str) else v


class VolunteerUpdate(BaseModel):
    first_name: str | None = Field(default=None, min_length=1, max_length=100)
    last_name: str | None = Field(default=None, min_length=1, max_length=100)
    role: Role | None = None
    status: VolunteerStatus | None = None

    @field_validator("role", mode="before")
    @classmethod
    def normalize_role(cls, v):
        return v.strip().lower() if isinstance(v, str) else v


class VolunteerResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    first_name: str
    last_name: str
    full_name: str
    email: EmailStr
    role: Role
    status: VolunteerStatus
    created_at: date

    @field_validator("created_at", mode="before")
    @classmethod
    def to_date(cls, v):
        return v.date() if isinstance(v, datetime) else v


class VolunteerTotalResponse(BaseModel):
    total: int
