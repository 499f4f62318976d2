from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from uuid import UUID, uuid4


@dataclass(slots=True)
class Contract:
    """
    Adoption paperwork for an approved application.
    The adopter may sign it through a one-time token link; the token is
    invalidated on first submission or once it expires.
    """

    id: UUID
    application_id: UUID
    animal_id: UUID
    adoption_fee: Decimal | None = None
    payment_proof: str | None = None
    signature: str | None = None
    contract_token: str | None = None
    token_expires_at: datetime | None = None
    token_used: bool = False
    signed_at: datetime | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        *,
        application_id: UUID,
        animal_id: UUID,
        adoption_fee: Decimal | None = None,
        payment_proof: str | None = None,
        signature: str | None = None,
    ) -> Contract:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            application_id=application_id,
            animal_id=animal_id,
            adoption_fee=adoption_fee,
            payment_proof=payment_proof,
            signature=signature,
            signed_at=now if signature else None,
            created_at=now,
        )

    def issue_token(self, token: str, *, expires_in_hours: int) -> None:
        self.contract_token = token
        self.token_expires_at = datetime.now(timezone.utc) + timedelta(hours=expires_in_hours)
        self.token_used = False

    def is_token_expired(self) -> bool:
        if self.token_expires_at is None:
            return False
        return datetime.now(timezone.utc) > self.token_expires_at
