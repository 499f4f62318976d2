from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any
from uuid import UUID, uuid4

from src.domain.value_objects.audit import AuditEntityType


@dataclass(slots=True)
class AuditLog:
    id: UUID
    entity_type: AuditEntityType
    entity_id: str
    action: str
    actor_user_id: UUID | None = None
    from_value: dict[str, Any] | None = None
    to_value: dict[str, Any] | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def record(
        cls,
        *,
        entity_type: AuditEntityType,
        entity_id: str | UUID,
        action: str,
        actor_user_id: UUID | None = None,
        from_value: dict[str, Any] | None = None,
        to_value: dict[str, Any] | None = None,
    ) -> AuditLog:
        return cls(
            id=uuid4(),
            entity_type=entity_type,
            entity_id=str(entity_id),
            action=action,
            actor_user_id=actor_user_id,
            from_value=from_value,
            to_value=to_value,
            created_at=datetime.now(timezone.utc),
        )
