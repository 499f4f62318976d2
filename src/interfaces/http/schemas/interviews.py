from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from src.domain.value_objects.application_status import FinalDecision
from src.interfaces.http.schemas.applications import ApplicationSummary


class InterviewCreate(BaseModel):
    application_id: UUID
    volunteer_id: UUID | None = None
    interview_time: datetime | None = None


class InterviewUpdate(BaseModel):
    interview_time: datetime | None = None
    interview_result: str | None = None
    final_decision: FinalDecision | None = None


class InterviewResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    application_id: UUID
    volunteer_id: UUID
    volunteer_name: str
    interview_time: datetime | None = None
    interview_result: str | None = None
    final_decision: FinalDecision
    application: ApplicationSummary | None = None
