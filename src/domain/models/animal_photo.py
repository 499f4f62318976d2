from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4


@dataclass(slots=True)
class AnimalPhoto:
    id: UUID
    animal_id: UUID
    url: str
    storage_key: str
    mime_type: str = ""
    size_bytes: int | None = None
    is_primary: bool = False
    position: int = 0
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        *,
        animal_id: UUID,
        url: str,
        storage_key: str,
        mime_type: str,
        size_bytes: int | None = None,
        is_primary: bool = False,
        position: int = 0,
    ) -> AnimalPhoto:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            animal_id=animal_id,
            url=url,
            storage_key=storage_key,
            mime_type=mime_type,
            size_bytes=size_bytes,
            is_primary=is_primary,
            position=position,
            created_at=now,
            updated_at=now,
        )
