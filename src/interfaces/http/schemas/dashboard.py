from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from src.domain.value_objects.role import Role


class AdminSectionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    volunteers: int
    contracts_awaiting_signature: int


class FosterSectionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    my_animals: int
    my_animals_by_status: dict[str, int] = Field(default_factory=dict)


class InterviewerSectionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    my_pending_interviews: int
    my_interviews: int


class DashboardSummaryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    role: Role
    total_animals: int
    available_animals: int
    in_foster_care: int
    pending_applications: int
    interviews_scheduled: int
    recently_adopted: int
    admin: AdminSectionResponse | None = None
    foster: FosterSectionResponse | None = None
    interviewer: InterviewerSectionResponse | None = None
