from __future__ import annotations

from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.interfaces.repositories.email_logs import EmailLogRepository
from src.domain.models.email_log import EmailLog
from src.domain.value_objects.audit import EmailStatus
from src.infrastructure.db.orm.email_log import EmailLogORM
from src.utils.datetime_tz import ensure_utc


class EmailLogsSQLAlchemyRepository(EmailLogRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: EmailLogORM) -> EmailLog:
        return EmailLog(
            id=orm.id,
            to=orm.to,
            subject=orm.subject,
            template=orm.template,
            payload=orm.payload,
            status=EmailStatus(orm.status),
            error_message=orm.error_message,
            created_at=ensure_utc(orm.created_at),
        )

    async def add(self, entry: EmailLog) -> EmailLog:
        orm = EmailLogORM(
            id=entry.id,
            to=entry.to,
            subject=entry.subject,
            template=entry.template,
            payload=entry.payload,
            status=entry.status,
            error_message=entry.error_message,
            created_at=entry.created_at,
        )
        self.session.add(orm)
        await self.session.flush()
        return self._to_domain(orm)

    async def set_status(
        self, entry_id: UUID, status: EmailStatus, *, error_message: str | None = None
    ) -> None:
        await self.session.execute(
            update(EmailLogORM)
            .where(EmailLogORM.id == entry_id)
            .values(status=status, error_message=error_message)
        )

    async def list(self, *, limit: int = 100) -> list[EmailLog]:
        stmt = select(EmailLogORM).order_by(EmailLogORM.created_at.desc()).limit(limit)
        result = await self.session.execute(stmt)
        return [self._to_domain(row) for row in result.scalars().all()]
