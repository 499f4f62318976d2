from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4

from src.domain.value_objects.application_status import ApplicationStatus


@dataclass(slots=True)
class Application:
    """An adopter's interest form for one animal."""

    id: UUID
    animal_id: UUID
    full_name: str
    email: str
    phone: str
    address: str
    city: str
    state: str
    zip_code: str
    household_type: str
    experience_with_pets: str
    hours_away: str
    reason_for_adoption: str
    emergency_contact_name: str
    emergency_contact_phone: str
    status: ApplicationStatus = ApplicationStatus.SUBMITTED
    has_children: bool = False
    children_ages: str | None = None
    has_other_pets: bool = False
    other_pets_details: str | None = None
    agreed_to_terms: bool = False
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def submit(cls, *, animal_id: UUID, **fields) -> Application:
        return cls(
            id=uuid4(),
            animal_id=animal_id,
            status=ApplicationStatus.SUBMITTED,
            created_at=datetime.now(timezone.utc),
            **fields,
        )
