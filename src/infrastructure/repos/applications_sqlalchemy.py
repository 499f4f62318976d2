from __future__ import annotations

from uuid import UUID

from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import ConflictError
from src.application.interfaces.repositories.applications import ApplicationRepository
from src.domain.models.application import Application
from src.domain.value_objects.application_status import ApplicationStatus
from src.infrastructure.db.orm.application import ApplicationORM
from src.utils.datetime_tz import ensure_utc

_FORM_FIELDS = (
    "full_name",
    "email",
    "phone",
    "address",
    "city",
    "state",
    "zip_code",
    "household_type",
    "has_children",
    "children_ages",
    "has_other_pets",
    "other_pets_details",
    "experience_with_pets",
    "hours_away",
    "reason_for_adoption",
    "emergency_contact_name",
    "emergency_contact_phone",
    "agreed_to_terms",
)


class ApplicationsSQLAlchemyRepository(ApplicationRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: ApplicationORM) -> Application:
        return Application(
            id=orm.id,
            animal_id=orm.animal_id,
            status=ApplicationStatus(orm.status),
            created_at=ensure_utc(orm.created_at),
            **{name: getattr(orm, name) for name in _FORM_FIELDS},
        )

    async def add(self, application: Application) -> Application:
        orm = ApplicationORM(
            id=application.id,
            animal_id=application.animal_id,
            status=application.status,
            created_at=application.created_at,
            **{name: getattr(application, name) for name in _FORM_FIELDS},
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("Application references an unknown animal") from exc
        return self._to_domain(orm)

    async def get(self, application_id: UUID) -> Application | None:
        stmt = select(ApplicationORM).where(ApplicationORM.id == application_id)
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    def _apply_filters(self, stmt, *, animal_id, statuses):
        if animal_id is not None:
            stmt = stmt.where(ApplicationORM.animal_id == animal_id)
        if statuses:
            stmt = stmt.where(ApplicationORM.status.in_(statuses))
        return stmt

    async def list(
        self,
        *,
        animal_id: UUID | None = None,
        statuses: list[ApplicationStatus] | None = None,
    ) -> list[Application]:
        stmt = self._apply_filters(
            select(ApplicationORM), animal_id=animal_id, statuses=statuses
        ).order_by(ApplicationORM.created_at.desc())
        result = await self.session.execute(stmt)
        return [self._to_domain(row) for row in result.scalars().all()]

    async def count(
        self,
        *,
        animal_id: UUID | None = None,
        statuses: list[ApplicationStatus] | None = None,
    ) -> int:
        stmt = self._apply_filters(
            select(func.count(ApplicationORM.id)), animal_id=animal_id, statuses=statuses
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def update_status(
        self, application_id: UUID, status: ApplicationStatus
    ) -> Application | None:
        stmt = (
            update(ApplicationORM)
            .where(ApplicationORM.id == application_id)
            .values(status=status)
            .returning(ApplicationORM)
        )
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def delete(self, application_id: UUID) -> bool:
        result = await self.session.execute(
            delete(ApplicationORM).where(ApplicationORM.id == application_id)
        )
        return result.rowcount > 0
