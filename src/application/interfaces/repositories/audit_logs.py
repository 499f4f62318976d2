from __future__ import annotations

from typing import Protocol

from src.domain.models.audit_log import AuditLog
from src.domain.value_objects.audit import AuditEntityType


class AuditLogRepository(Protocol):
    async def add(self, entry: AuditLog) -> AuditLog: ...

    async def list(
        self,
        *,
        entity_type: AuditEntityType | None = None,
        entity_id: str | None = None,
        limit: int = 100,
    ) -> list[AuditLog]: ...
