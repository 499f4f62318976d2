from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any
from uuid import UUID, uuid4

from src.domain.value_objects.audit import EmailStatus


@dataclass(slots=True)
class EmailLog:
    id: UUID
    to: str
    subject: str
    template: str
    payload: dict[str, Any] | None = None
    status: EmailStatus = EmailStatus.QUEUED
    error_message: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def queue(
        cls, *, to: str, subject: str, template: str, payload: dict[str, Any] | None = None
    ) -> EmailLog:
        return cls(
            id=uuid4(),
            to=to,
            subject=subject,
            template=template,
            payload=payload,
            status=EmailStatus.QUEUED,
            created_at=datetime.now(timezone.utc),
        )
