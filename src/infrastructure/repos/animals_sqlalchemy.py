from __future__ import annotations

from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy import delete, func, or_, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import ConflictError, InfrastructureError
from src.application.interfaces.repositories.animals import AnimalRepository
from src.domain.models.animal import Animal
from src.domain.value_objects.animal_status import AnimalSize, AnimalStatus, Sex
from src.infrastructure.db.orm.animal import AnimalORM
from src.utils.datetime_tz import ensure_utc


class AnimalsSQLAlchemyRepository(AnimalRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: AnimalORM) -> Animal:
        return Animal(
            id=orm.id,
            unique_id=orm.unique_id,
            name=orm.name,
            species=orm.species,
            breed=orm.breed,
            age=orm.age,
            sex=Sex(orm.sex),
            color=orm.color,
            description=orm.description,
            location=orm.location,
            adoption_fee=float(orm.adoption_fee),
            intake_date=orm.intake_date,
            posted_date=orm.posted_date,
            volunteer_id=orm.volunteer_id,
            size=AnimalSize(orm.size),
            personality=list(orm.personality or []),
            vaccinated=orm.vaccinated,
            neutered=orm.neutered,
            good_with_children=orm.good_with_children,
            good_with_dogs=orm.good_with_dogs,
            good_with_cats=orm.good_with_cats,
            status=AnimalStatus(orm.status),
            microchip_number=orm.microchip_number,
            medical_history=orm.medical_history,
            behavior_notes=orm.behavior_notes,
            intake_source=orm.intake_source,
            internal_notes=orm.internal_notes,
            created_at=ensure_utc(orm.created_at),
            updated_at=ensure_utc(orm.updated_at),
        )

    async def add(self, animal: Animal) -> Animal:
        orm = AnimalORM(
            id=animal.id,
            unique_id=animal.unique_id,
            volunteer_id=animal.volunteer_id,
            name=animal.name,
            species=animal.species,
            breed=animal.breed,
            age=animal.age,
            sex=animal.sex,
            size=animal.size,
            color=animal.color,
            description=animal.description,
            personality=list(animal.personality),
            vaccinated=animal.vaccinated,
            neutered=animal.neutered,
            good_with_children=animal.good_with_children,
            good_with_dogs=animal.good_with_dogs,
            good_with_cats=animal.good_with_cats,
            location=animal.location,
            adoption_fee=animal.adoption_fee,
            intake_date=animal.intake_date,
            posted_date=animal.posted_date,
            status=animal.status,
            microchip_number=animal.microchip_number,
            medical_history=animal.medical_history,
            behavior_notes=animal.behavior_notes,
            intake_source=animal.intake_source,
            internal_notes=animal.internal_notes,
            created_at=animal.created_at,
            updated_at=animal.updated_at,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("Animal unique id already exists") from exc
        return self._to_domain(orm)

    async def get(self, animal_id: UUID) -> Animal | None:
        stmt = select(AnimalORM).where(AnimalORM.id == animal_id)
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def get_by_unique_id(self, unique_id: str) -> Animal | None:
        stmt = select(AnimalORM).where(AnimalORM.unique_id == unique_id)
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def get_many(self, animal_ids: list[UUID]) -> dict[UUID, Animal]:
        if not animal_ids:
            return {}
        stmt = select(AnimalORM).where(AnimalORM.id.in_(set(animal_ids)))
        result = await self.session.execute(stmt)
        return {row.id: self._to_domain(row) for row in result.scalars().all()}

    def _apply_filters(self, stmt, *, statuses, volunteer_id, search=None, updated_since=None):
        if statuses:
            stmt = stmt.where(AnimalORM.status.in_(statuses))
        if volunteer_id is not None:
            stmt = stmt.where(AnimalORM.volunteer_id == volunteer_id)
        if search:
            pattern = f"%{search.lower()}%"
            stmt = stmt.where(
                or_(
                    func.lower(AnimalORM.name).like(pattern),
                    func.lower(AnimalORM.breed).like(pattern),
                    func.lower(AnimalORM.species).like(pattern),
                    func.lower(AnimalORM.unique_id).like(pattern),
                )
            )
        if updated_since is not None:
            stmt = stmt.where(AnimalORM.updated_at >= updated_since)
        return stmt

    async def list(
        self,
        *,
        statuses: list[AnimalStatus] | None = None,
        volunteer_id: UUID | None = None,
        search: str | None = None,
        limit: int | None = None,
        offset: int | None = None,
    ) -> list[Animal]:
        stmt = self._apply_filters(
            select(AnimalORM), statuses=statuses, volunteer_id=volunteer_id, search=search
        )
        stmt = stmt.order_by(AnimalORM.created_at.desc(), AnimalORM.unique_id)
        if offset is not None:
            stmt = stmt.offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self.session.execute(stmt)
        return [self._to_domain(row) for row in result.scalars().all()]

    async def count(
        self,
        *,
        statuses: list[AnimalStatus] | None = None,
        volunteer_id: UUID | None = None,
        search: str | None = None,
        updated_since: datetime | None = None,
    ) -> int:
        stmt = self._apply_filters(
            select(func.count(AnimalORM.id)),
            statuses=statuses,
            volunteer_id=volunteer_id,
            search=search,
            updated_since=updated_since,
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def count_by_status(self, *, volunteer_id: UUID | None = None) -> dict[str, int]:
        stmt = select(AnimalORM.status, func.count(AnimalORM.id)).group_by(AnimalORM.status)
        if volunteer_id is not None:
            stmt = stmt.where(AnimalORM.volunteer_id == volunteer_id)
        result = await self.session.execute(stmt)
        return {AnimalStatus(status).value: total for status, total in result.all()}

    async def list_unique_ids(self) -> list[str]:
        result = await self.session.execute(select(AnimalORM.unique_id))
        return [row[0] for row in result.all()]

    async def update(self, animal_id: UUID, data: dict) -> Animal | None:
        values = {**data, "updated_at": datetime.now(timezone.utc)}
        stmt = (
            update(AnimalORM)
            .where(AnimalORM.id == animal_id)
            .values(**values)
            .returning(AnimalORM)
        )
        try:
            result = await self.session.execute(stmt)
        except IntegrityError as exc:
            raise ConflictError("Failed to update animal due to constraint violation") from exc
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def delete(self, animal_id: UUID) -> bool:
        stmt = delete(AnimalORM).where(AnimalORM.id == animal_id)
        try:
            result = await self.session.execute(stmt)
        except IntegrityError as exc:
            raise InfrastructureError("Failed to delete animal") from exc
        return result.rowcount > 0
