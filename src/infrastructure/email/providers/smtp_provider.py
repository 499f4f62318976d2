from __future__ import annotations

import asyncio
import smtplib
import ssl
from email.message import EmailMessage as MIMEMessage
from email.utils import formataddr

from src.infrastructure.email.models import EmailDeliveryError, EmailMessage, EmailService


def _build_mime(message: EmailMessage) -> MIMEMessage:
    mime = MIMEMessage()
    mime["Subject"] = message.subject
    if message.from_email:
        mime["From"] = formataddr((message.from_name or "", message.from_email))
    mime["To"] = ", ".join(message.to)
    if message.reply_to:
        mime["Reply-To"] = message.reply_to
    mime.set_content(message.text or "")
    if message.html:
        mime.add_alternative(message.html, subtype="html")
    return mime


class SMTPEmailService(EmailService):
    def __init__(
        self,
        *,
        host: str,
        port: int = 587,
        username: str | None = None,
        password: str | None = None,
        use_tls: bool = True,
        timeout: float = 30.0,
    ) -> None:
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.use_tls = use_tls
        self.timeout = timeout

    def _send_sync(self, message: EmailMessage) -> None:
        mime = _build_mime(message)
        with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as server:
            server.ehlo()
            if self.use_tls:
                server.starttls(context=ssl.create_default_context())
                server.ehlo()
            if self.username and self.password:
                server.login(self.username, self.password)
            server.send_message(mime, to_addrs=list(message.to))

    async def send(self, message: EmailMessage) -> None:
        if not message.to:
            raise EmailDeliveryError("Email has no recipients")
        try:
            await asyncio.to_thread(self._send_sync, message)
        except (smtplib.SMTPException, OSError) as exc:
            raise EmailDeliveryError(str(exc)) from exc
