from __future__ import annotations

from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import ConflictError
from src.application.interfaces.repositories.volunteers import VolunteerRepository
from src.domain.models.volunteer import Volunteer
from src.domain.value_objects.role import Role
from src.domain.value_objects.volunteer_status import VolunteerStatus
from src.infrastructure.db.orm.volunteer import VolunteerORM
from src.utils.datetime_tz import ensure_utc


class VolunteersSQLAlchemyRepository(VolunteerRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: VolunteerORM) -> Volunteer:
        return Volunteer(
            id=orm.id,
            first_name=orm.first_name,
            last_name=orm.last_name,
            email=orm.email,
            hashed_password=orm.hashed_password,
            role=Role(orm.role),
            status=VolunteerStatus(orm.status),
            created_at=ensure_utc(orm.created_at),
            updated_at=ensure_utc(orm.updated_at),
        )

    async def add(self, volunteer: Volunteer) -> Volunteer:
        orm = VolunteerORM(
            id=volunteer.id,
            first_name=volunteer.first_name,
            last_name=volunteer.last_name,
            email=volunteer.email,
            hashed_password=volunteer.hashed_password,
            role=volunteer.role,
            status=volunteer.status,
            created_at=volunteer.created_at,
            updated_at=volunteer.updated_at,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("Volunteer with this email already exists") from exc
        return self._to_domain(orm)

    async def get(self, volunteer_id: UUID) -> Volunteer | None:
        stmt = select(VolunteerORM).where(VolunteerORM.id == volunteer_id)
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def get_by_email(self, email: str) -> Volunteer | None:
        stmt = select(VolunteerORM).where(VolunteerORM.email == email.strip().lower())
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def list(self) -> list[Volunteer]:
        stmt = select(VolunteerORM).order_by(VolunteerORM.created_at.desc())
        result = await self.session.execute(stmt)
        return [self._to_domain(row) for row in result.scalars().all()]

    async def list_active_by_roles(self, roles: list[Role]) -> list[Volunteer]:
        stmt = (
            select(VolunteerORM)
            .where(VolunteerORM.role.in_(roles))
            .where(VolunteerORM.status == VolunteerStatus.ACTIVE)
            .order_by(VolunteerORM.email)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(row) for row in result.scalars().all()]

    async def count(self) -> int:
        result = await self.session.execute(select(func.count(VolunteerORM.id)))
        return result.scalar() or 0

    async def update(self, volunteer_id: UUID, data: dict) -> Volunteer | None:
        values = {**data, "updated_at": datetime.now(timezone.utc)}
        stmt = (
            update(VolunteerORM)
            .where(VolunteerORM.id == volunteer_id)
            .values(**values)
            .returning(VolunteerORM)
        )
        try:
            result = await self.session.execute(stmt)
        except IntegrityError as exc:
            raise ConflictError("Volunteer with this email already exists") from exc
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def delete(self, volunteer_id: UUID) -> bool:
        stmt = delete(VolunteerORM).where(VolunteerORM.id == volunteer_id)
        result = await self.session.execute(stmt)
        return result.rowcount > 0
