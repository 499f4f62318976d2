from __future__ import annotations

import json
from datetime import date, datetime
from uuid import UUID

from sqlalchemy import (
    Boolean,
    Date,
    DateTime,
    Enum,
    Float,
    ForeignKey,
    String,
    Text,
    TypeDecorator,
    UniqueConstraint,
    Uuid,
    func,
)
from sqlalchemy.dialects.postgresql import ARRAY
from sqlalchemy.orm import Mapped, mapped_column

from src.domain.value_objects.animal_status import AnimalSize, AnimalStatus, Sex
from src.infrastructure.db.base import Base, enum_values


class StringList(TypeDecorator):
    """Stores a list of strings as ARRAY in PostgreSQL, JSON in SQLite."""

    impl = Text
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name == "postgresql":
            return dialect.type_descriptor(ARRAY(String))
        return dialect.type_descriptor(Text)

    def process_bind_param(self, value, dialect):
        if value is None:
            value = []
        if dialect.name == "postgresql":
            return value
        return json.dumps(value)

    def process_result_value(self, value, dialect):
        if dialect.name == "postgresql":
            return value if value is not None else []
        return json.loads(value) if value else []


class AnimalORM(Base):
    __tablename__ = "animals"
    __table_args__ = (UniqueConstraint("unique_id", name="ux_animals_unique_id"),)

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    unique_id: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    volunteer_id: Mapped[UUID | None] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("volunteers.id", ondelete="SET NULL"), nullable=True
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    species: Mapped[str] = mapped_column(String(100), nullable=False)
    breed: Mapped[str] = mapped_column(String(255), nullable=False)
    age: Mapped[str] = mapped_column(String(50), nullable=False)
    sex: Mapped[Sex] = mapped_column(
        Enum(Sex, native_enum=False, values_callable=enum_values), nullable=False
    )
    size: Mapped[AnimalSize] = mapped_column(
        Enum(AnimalSize, native_enum=False, values_callable=enum_values),
        nullable=False,
        default=AnimalSize.MEDIUM,
    )
    color: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    personality: Mapped[list[str]] = mapped_column(StringList, nullable=False, default=list)
    vaccinated: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    neutered: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    good_with_children: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    good_with_dogs: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    good_with_cats: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    location: Mapped[str] = mapped_column(String(255), nullable=False)
    adoption_fee: Mapped[float] = mapped_column(Float, nullable=False)
    intake_date: Mapped[date] = mapped_column(Date, nullable=False)
    posted_date: Mapped[date] = mapped_column(Date, nullable=False)
    status: Mapped[AnimalStatus] = mapped_column(
        Enum(AnimalStatus, native_enum=False, values_callable=enum_values),
        nullable=False,
        default=AnimalStatus.DRAFT,
        index=True,
    )
    microchip_number: Mapped[str | None] = mapped_column(String(50), nullable=True)
    medical_history: Mapped[str | None] = mapped_column(Text, nullable=True)
    behavior_notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    intake_source: Mapped[str | None] = mapped_column(String(100), nullable=True)
    internal_notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )
