from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from src.interfaces.http.schemas.animals import AnimalSummary
from src.interfaces.http.schemas.applications import ApplicationSummary


class ContractCreate(BaseModel):
    application_id: UUID
    payment_proof: str = Field(min_length=1)
    signature: str | None = Field(default=None, min_length=1)
    adoption_fee: Decimal | None = Field(default=None, ge=0, max_digits=10, decimal_places=2)


class ContractUpdate(BaseModel):
    payment_proof: str | None = Field(default=None, min_length=1)
    signature: str | None = Field(default=None, min_length=1)
    adoption_fee: Decimal | None = Field(default=None, ge=0, max_digits=10, decimal_places=2)


class ContractSubmit(BaseModel):
    payment_proof: str = Field(min_length=1)
    signature: str = Field(min_length=1)


class ContractResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    application_id: UUID
    animal_id: str
    adoption_fee: Decimal | None = None
    payment_proof: str | None = None
    signature: str | None = None
    token_expires_at: datetime | None = None
    token_used: bool
    signed_at: datetime | None = None
    created_at: datetime
    application: ApplicationSummary | None = None
    animal: AnimalSummary | None = None


class ContractTokenResponse(BaseModel):
    token: str
    expires_at: datetime
    url: str
