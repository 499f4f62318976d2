from __future__ import annotations

from datetime import date
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from src.domain.value_objects.role import Role
from src.domain.value_objects.volunteer_status import VolunteerStatus


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1)


class VolunteerInfo(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    first_name: str
    last_name: str
    full_name: str
    email: EmailStr
    role: Role
    status: VolunteerStatus


class LoginResponse(BaseModel):
    message: str
    volunteer: VolunteerInfo
    access_token: str
    token_type: str


class MeResponse(VolunteerInfo):
    created_at: date


class VerifyResponse(BaseModel):
    message: str
    user: dict[str, Any]


class MessageResponse(BaseModel):
    message: str


class ChangePasswordRequest(BaseModel):
    current_password: str
    new_password: str = Field(min_length=8, max_length=128)
