from __future__ import annotations

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from src.domain.value_objects.audit import AuditEntityType


class AuditLogResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    entity_type: AuditEntityType
    entity_id: str
    actor_user_id: UUID | None = None
    action: str
    from_value: dict[str, Any] | None = None
    to_value: dict[str, Any] | None = None
    created_at: datetime
