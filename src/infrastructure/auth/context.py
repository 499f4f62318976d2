from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import PermissionDenied
from src.domain.value_objects.role import Role
from src.domain.value_objects.volunteer_status import VolunteerStatus
from src.infrastructure.db.orm.volunteer import VolunteerORM


@dataclass(slots=True)
class AuthContext:
    volunteer_id: UUID
    email: str
    name: str
    role: Role
    claims: dict[str, Any] = field(default_factory=dict)

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMIN

    def require_roles(self, allowed: Iterable[Role]) -> None:
        # Admins act as superusers for every role-restricted action
        if self.is_admin:
            return
        allowed = tuple(allowed)
        if self.role not in allowed:
            raise PermissionDenied(
                "Insufficient permissions",
                details={"required": [role.value for role in allowed], "role": self.role.value},
            )


async def fetch_volunteer(session: AsyncSession, volunteer_id: UUID) -> VolunteerORM | None:
    stmt = select(VolunteerORM).where(VolunteerORM.id == volunteer_id)
    result = await session.execute(stmt)
    return result.scalar_one_or_none()


def build_context(volunteer: VolunteerORM, claims: dict[str, Any]) -> AuthContext | None:
    if VolunteerStatus(volunteer.status) is not VolunteerStatus.ACTIVE:
        return None
    return AuthContext(
        volunteer_id=volunteer.id,
        email=volunteer.email,
        name=f"{volunteer.first_name} {volunteer.last_name}".strip(),
        role=Role(volunteer.role),
        claims=claims,
    )
