from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.models.email_log import EmailLog
from src.domain.value_objects.audit import EmailStatus


class EmailLogRepository(Protocol):
    async def add(self, entry: EmailLog) -> EmailLog: ...

    async def set_status(
        self, entry_id: UUID, status: EmailStatus, *, error_message: str | None = None
    ) -> None: ...

    async def list(self, *, limit: int = 100) -> list[EmailLog]: ...
