from __future__ import annotations

import logging

from src.infrastructure.email.models import EmailMessage, EmailService

logger = logging.getLogger(__name__)


class LoggingEmailService(EmailService):
    """Development provider: writes the envelope to the log instead of sending."""

    async def send(self, message: EmailMessage) -> None:
        logger.info(
            "Email not sent (logging provider): subject=%s to=%s from=%s <%s> "
            "text_len=%s html_len=%s",
            message.subject,
            ",".join(message.to),
            message.from_name or "",
            message.from_email or "",
            len(message.text or ""),
            len(message.html or ""),
        )
