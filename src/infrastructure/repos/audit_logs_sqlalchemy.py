from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.interfaces.repositories.audit_logs import AuditLogRepository
from src.domain.models.audit_log import AuditLog
from src.domain.value_objects.audit import AuditEntityType
from src.infrastructure.db.orm.audit_log import AuditLogORM
from src.utils.datetime_tz import ensure_utc


class AuditLogsSQLAlchemyRepository(AuditLogRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: AuditLogORM) -> AuditLog:
        return AuditLog(
            id=orm.id,
            entity_type=AuditEntityType(orm.entity_type),
            entity_id=orm.entity_id,
            action=orm.action,
            actor_user_id=orm.actor_user_id,
            from_value=orm.from_value,
            to_value=orm.to_value,
            created_at=ensure_utc(orm.created_at),
        )

    async def add(self, entry: AuditLog) -> AuditLog:
        orm = AuditLogORM(
            id=entry.id,
            entity_type=entry.entity_type,
            entity_id=entry.entity_id,
            actor_user_id=entry.actor_user_id,
            action=entry.action,
            from_value=entry.from_value,
            to_value=entry.to_value,
            created_at=entry.created_at,
        )
        self.session.add(orm)
        await self.session.flush()
        return self._to_domain(orm)

    async def list(
        self,
        *,
        entity_type: AuditEntityType | None = None,
        entity_id: str | None = None,
        limit: int = 100,
    ) -> list[AuditLog]:
        stmt = select(AuditLogORM)
        if entity_type is not None:
            stmt = stmt.where(AuditLogORM.entity_type == entity_type)
        if entity_id is not None:
            stmt = stmt.where(AuditLogORM.entity_id == entity_id)
        stmt = stmt.order_by(AuditLogORM.created_at.desc()).limit(limit)
        result = await self.session.execute(stmt)
        return [self._to_domain(row) for row in result.scalars().all()]
