from __future__ import annotations

from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, Enum, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from src.domain.value_objects.application_status import FinalDecision
from src.infrastructure.db.base import Base, enum_values


class InterviewORM(Base):
    __tablename__ = "interviews"

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    application_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("applications.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    volunteer_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("volunteers.id"), nullable=False, index=True
    )
    volunteer_name: Mapped[str] = mapped_column(String(255), nullable=False)
    interview_time: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    interview_result: Mapped[str | None] = mapped_column(Text, nullable=True)
    final_decision: Mapped[FinalDecision] = mapped_column(
        Enum(FinalDecision, native_enum=False, values_callable=enum_values),
        nullable=False,
        default=FinalDecision.PENDING,
    )
