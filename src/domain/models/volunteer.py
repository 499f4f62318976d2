from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4

from src.domain.value_objects.role import Role
from src.domain.value_objects.volunteer_status import VolunteerStatus


@dataclass(slots=True)
class Volunteer:
    id: UUID
    first_name: str
    last_name: str
    email: str
    hashed_password: str
    role: Role = Role.FOSTER
    status: VolunteerStatus = VolunteerStatus.ACTIVE
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        *,
        first_name: str,
        last_name: str,
        email: str,
        hashed_password: str,
        role: Role = Role.FOSTER,
        status: VolunteerStatus = VolunteerStatus.ACTIVE,
    ) -> Volunteer:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            first_name=first_name.strip(),
            last_name=last_name.strip(),
            email=email.strip().lower(),
            hashed_password=hashed_password,
            role=role,
            status=status,
            created_at=now,
            updated_at=now,
        )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def is_active(self) -> bool:
        return self.status is VolunteerStatus.ACTIVE
