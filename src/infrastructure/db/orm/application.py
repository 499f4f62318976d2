from __future__ import annotations

from datetime import datetime
from uuid import UUID

from sqlalchemy import Boolean, DateTime, Enum, ForeignKey, String, Text, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from src.domain.value_objects.application_status import ApplicationStatus
from src.infrastructure.db.base import Base, enum_values


class ApplicationORM(Base):
    __tablename__ = "applications"

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    animal_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("animals.id"), nullable=False, index=True
    )
    status: Mapped[ApplicationStatus] = mapped_column(
        Enum(ApplicationStatus, native_enum=False, values_callable=enum_values),
        nullable=False,
        default=ApplicationStatus.SUBMITTED,
        index=True,
    )
    # Personal information
    full_name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(100), nullable=False)
    phone: Mapped[str] = mapped_column(String(20), nullable=False)
    address: Mapped[str] = mapped_column(String(200), nullable=False)
    city: Mapped[str] = mapped_column(String(100), nullable=False)
    state: Mapped[str] = mapped_column(String(100), nullable=False)
    zip_code: Mapped[str] = mapped_column(String(20), nullable=False)
    # Home environment
    household_type: Mapped[str] = mapped_column(String(50), nullable=False)
    has_children: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    children_ages: Mapped[str | None] = mapped_column(String(100), nullable=True)
    has_other_pets: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    other_pets_details: Mapped[str | None] = mapped_column(Text, nullable=True)
    # Pet experience
    experience_with_pets: Mapped[str] = mapped_column(String(50), nullable=False)
    hours_away: Mapped[str] = mapped_column(String(20), nullable=False)
    reason_for_adoption: Mapped[str] = mapped_column(Text, nullable=False)
    # Emergency contact
    emergency_contact_name: Mapped[str] = mapped_column(String(100), nullable=False)
    emergency_contact_phone: Mapped[str] = mapped_column(String(20), nullable=False)
    agreed_to_terms: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
