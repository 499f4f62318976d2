from __future__ import annotations

from collections import defaultdict
from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy import delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.interfaces.repositories.animal_photos import AnimalPhotoRepository
from src.domain.models.animal_photo import AnimalPhoto
from src.infrastructure.db.orm.animal_photo import AnimalPhotoORM
from src.utils.datetime_tz import ensure_utc


class AnimalPhotosSQLAlchemyRepository(AnimalPhotoRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: AnimalPhotoORM) -> AnimalPhoto:
        return AnimalPhoto(
            id=orm.id,
            animal_id=orm.animal_id,
            url=orm.url,
            storage_key=orm.storage_key,
            mime_type=orm.mime_type,
            size_bytes=orm.size_bytes,
            is_primary=orm.is_primary,
            position=orm.position,
            created_at=ensure_utc(orm.created_at),
            updated_at=ensure_utc(orm.updated_at),
        )

    def _ordered(self, stmt):
        # Primary photo first, then upload order
        return stmt.order_by(
            AnimalPhotoORM.is_primary.desc(),
            AnimalPhotoORM.position,
            AnimalPhotoORM.created_at,
        )

    async def add(self, photo: AnimalPhoto) -> AnimalPhoto:
        orm = AnimalPhotoORM(
            id=photo.id,
            animal_id=photo.animal_id,
            url=photo.url,
            storage_key=photo.storage_key,
            mime_type=photo.mime_type,
            size_bytes=photo.size_bytes,
            is_primary=photo.is_primary,
            position=photo.position,
            created_at=photo.created_at,
            updated_at=photo.updated_at,
        )
        self.session.add(orm)
        await self.session.flush()
        return self._to_domain(orm)

    async def get(self, photo_id: UUID) -> AnimalPhoto | None:
        stmt = select(AnimalPhotoORM).where(AnimalPhotoORM.id == photo_id)
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def list_for_animal(self, animal_id: UUID) -> list[AnimalPhoto]:
        stmt = self._ordered(
            select(AnimalPhotoORM).where(AnimalPhotoORM.animal_id == animal_id)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(row) for row in result.scalars().all()]

    async def list_for_animals(self, animal_ids: list[UUID]) -> dict[UUID, list[AnimalPhoto]]:
        if not animal_ids:
            return {}
        stmt = self._ordered(
            select(AnimalPhotoORM).where(AnimalPhotoORM.animal_id.in_(set(animal_ids)))
        )
        result = await self.session.execute(stmt)
        grouped: dict[UUID, list[AnimalPhoto]] = defaultdict(list)
        for row in result.scalars().all():
            grouped[row.animal_id].append(self._to_domain(row))
        return dict(grouped)

    async def count_for_animal(self, animal_id: UUID) -> int:
        stmt = select(func.count(AnimalPhotoORM.id)).where(AnimalPhotoORM.animal_id == animal_id)
        result = await self.session.execute(stmt)
        return int(result.scalar_one())

    async def next_position(self, animal_id: UUID) -> int:
        stmt = select(func.max(AnimalPhotoORM.position)).where(
            AnimalPhotoORM.animal_id == animal_id
        )
        current = (await self.session.execute(stmt)).scalar_one_or_none()
        return 0 if current is None else current + 1

    async def set_primary(self, animal_id: UUID, photo_id: UUID) -> None:
        now = datetime.now(timezone.utc)
        # Unset existing primaries
        await self.session.execute(
            update(AnimalPhotoORM)
            .where(
                AnimalPhotoORM.animal_id == animal_id,
                AnimalPhotoORM.is_primary.is_(True),
            )
            .values(is_primary=False, updated_at=now)
        )
        # Set new primary
        await self.session.execute(
            update(AnimalPhotoORM)
            .where(AnimalPhotoORM.animal_id == animal_id, AnimalPhotoORM.id == photo_id)
            .values(is_primary=True, updated_at=now)
        )

    async def delete(self, photo_id: UUID) -> bool:
        result = await self.session.execute(
            delete(AnimalPhotoORM).where(AnimalPhotoORM.id == photo_id)
        )
        return result.rowcount > 0

    async def delete_for_animal(self, animal_id: UUID) -> list[str]:
        stmt = select(AnimalPhotoORM.storage_key).where(AnimalPhotoORM.animal_id == animal_id)
        keys = [row[0] for row in (await self.session.execute(stmt)).all()]
        await self.session.execute(
            delete(AnimalPhotoORM).where(AnimalPhotoORM.animal_id == animal_id)
        )
        return keys
