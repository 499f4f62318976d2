from __future__ import annotations

from uuid import UUID

from sqlalchemy import delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.interfaces.repositories.interviews import InterviewRepository
from src.domain.models.interview import Interview
from src.domain.value_objects.application_status import FinalDecision
from src.infrastructure.db.orm.interview import InterviewORM
from src.utils.datetime_tz import ensure_utc


class InterviewsSQLAlchemyRepository(InterviewRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: InterviewORM) -> Interview:
        return Interview(
            id=orm.id,
            application_id=orm.application_id,
            volunteer_id=orm.volunteer_id,
            volunteer_name=orm.volunteer_name,
            interview_time=ensure_utc(orm.interview_time),
            interview_result=orm.interview_result,
            final_decision=FinalDecision(orm.final_decision),
        )

    async def add(self, interview: Interview) -> Interview:
        orm = InterviewORM(
            id=interview.id,
            application_id=interview.application_id,
            volunteer_id=interview.volunteer_id,
            volunteer_name=interview.volunteer_name,
            interview_time=interview.interview_time,
            interview_result=interview.interview_result,
            final_decision=interview.final_decision,
        )
        self.session.add(orm)
        await self.session.flush()
        return self._to_domain(orm)

    async def get(self, interview_id: UUID) -> Interview | None:
        stmt = select(InterviewORM).where(InterviewORM.id == interview_id)
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def list(
        self,
        *,
        volunteer_id: UUID | None = None,
        application_id: UUID | None = None,
    ) -> list[Interview]:
        stmt = select(InterviewORM)
        if volunteer_id is not None:
            stmt = stmt.where(InterviewORM.volunteer_id == volunteer_id)
        if application_id is not None:
            stmt = stmt.where(InterviewORM.application_id == application_id)
        stmt = stmt.order_by(InterviewORM.interview_time.desc().nulls_last())
        result = await self.session.execute(stmt)
        return [self._to_domain(row) for row in result.scalars().all()]

    async def count(
        self,
        *,
        volunteer_id: UUID | None = None,
        final_decision: FinalDecision | None = None,
        scheduled_only: bool = False,
    ) -> int:
        stmt = select(func.count(InterviewORM.id))
        if volunteer_id is not None:
            stmt = stmt.where(InterviewORM.volunteer_id == volunteer_id)
        if final_decision is not None:
            stmt = stmt.where(InterviewORM.final_decision == final_decision)
        if scheduled_only:
            stmt = stmt.where(InterviewORM.interview_time.is_not(None))
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def update(self, interview_id: UUID, data: dict) -> Interview | None:
        stmt = (
            update(InterviewORM)
            .where(InterviewORM.id == interview_id)
            .values(**data)
            .returning(InterviewORM)
        )
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def delete(self, interview_id: UUID) -> bool:
        result = await self.session.execute(
            delete(InterviewORM).where(InterviewORM.id == interview_id)
        )
        return result.rowcount > 0

    async def delete_for_application(self, application_id: UUID) -> int:
        result = await self.session.execute(
            delete(InterviewORM).where(InterviewORM.application_id == application_id)
        )
        return result.rowcount or 0
