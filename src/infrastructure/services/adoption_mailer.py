from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from datetime import datetime
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from src.config.settings import Settings
from src.domain.models.animal import Animal
from src.domain.models.application import Application
from src.domain.models.email_log import EmailLog
from src.domain.models.volunteer import Volunteer
from src.domain.value_objects.application_status import ApplicationStatus
from src.domain.value_objects.audit import EmailStatus
from src.infrastructure.db.session import SQLAlchemyUnitOfWork
from src.infrastructure.email.models import EmailService
from src.infrastructure.email.renderer.engine import (
    APPLICATION_RECEIVED,
    APPLICATION_STATUS,
    CONTRACT_LINK,
    NEW_APPLICATION,
    EmailTemplateRenderer,
)
from src.utils.datetime_tz import format_display_date

logger = logging.getLogger(__name__)

# (message, accent color) shown to the applicant per status
STATUS_MESSAGES: dict[ApplicationStatus, tuple[str, str]] = {
    ApplicationStatus.APPROVED: (
        "Your application has been approved! We will contact you soon with the next steps.",
        "#10b981",
    ),
    ApplicationStatus.REJECTED: (
        "Unfortunately, your application was not approved at this time. "
        "Thank you for your interest.",
        "#ef4444",
    ),
    ApplicationStatus.INTERVIEW: (
        "Your application has moved to the interview stage. "
        "We will contact you to schedule a time.",
        "#f59e0b",
    ),
    ApplicationStatus.REVIEW: (
        "Your application is being reviewed by our team.",
        "#4C51A4",
    ),
}


class AdoptionMailer:
    """
    Renders and sends the adoption workflow emails.

    Runs after the response is sent (FastAPI background task) with its own
    database session. Every message is written to `email_logs` as QUEUED and
    then flipped to SENT or FAILED. Delivery problems are logged and never
    propagate to the caller.
    """

    def __init__(
        self,
        *,
        settings: Settings,
        email_service: EmailService,
        renderer: EmailTemplateRenderer,
        session_factory: Callable[[], AsyncSession],
    ) -> None:
        self.settings = settings
        self.email_service = email_service
        self.renderer = renderer
        self.session_factory = session_factory

    async def send_template(
        self,
        *,
        template_key: str,
        to: str,
        context: dict[str, Any],
    ) -> bool:
        try:
            message = self.renderer.render(template_key, to=to, context=context)
        except Exception:
            logger.exception("Failed to render email template %s", template_key)
            return False

        entry = EmailLog.queue(
            to=to,
            subject=message.subject,
            template=template_key,
            payload={key: _jsonable(value) for key, value in context.items()},
        )
        async with SQLAlchemyUnitOfWork(self.session_factory) as uow:
            await uow.email_logs.add(entry)
            await uow.commit()

        status, error = EmailStatus.SENT, None
        try:
            await self.email_service.send(message)
        except Exception as exc:
            logger.error("Email %s to %s failed: %s", template_key, to, exc)
            status, error = EmailStatus.FAILED, str(exc)[:1000]
        else:
            logger.info("Email %s sent to %s", template_key, to)

        async with SQLAlchemyUnitOfWork(self.session_factory) as uow:
            await uow.email_logs.set_status(entry.id, status, error_message=error)
            await uow.commit()
        return status is EmailStatus.SENT

    async def application_received(self, application: Application, animal: Animal) -> None:
        await self.send_template(
            template_key=APPLICATION_RECEIVED,
            to=application.email,
            context={
                "heading": "Application Received!",
                "full_name": application.full_name,
                "animal_name": animal.name,
                "animal_unique_id": animal.unique_id,
                "application_id": str(application.id),
            },
        )

    async def new_application(
        self, application: Application, animal: Animal, recipients: Sequence[Volunteer]
    ) -> None:
        for volunteer in recipients:
            await self.send_template(
                template_key=NEW_APPLICATION,
                to=volunteer.email,
                context={
                    "heading": "New Adoption Application",
                    "recipient_name": volunteer.first_name,
                    "full_name": application.full_name,
                    "email": application.email,
                    "phone": application.phone,
                    "animal_name": animal.name,
                    "animal_unique_id": animal.unique_id,
                    "application_id": str(application.id),
                    "submitted_at": format_display_date(application.created_at, include_time=True),
                    "review_url": f"{self.settings.frontend_url.rstrip('/')}/applications",
                },
            )

    async def application_status(self, application: Application, animal: Animal) -> None:
        status = ApplicationStatus(application.status)
        status_message, status_color = STATUS_MESSAGES.get(
            status,
            (f"Your application status has been updated to: {status.value}", "#4C51A4"),
        )
        await self.send_template(
            template_key=APPLICATION_STATUS,
            to=application.email,
            context={
                "heading": "Application Update",
                "header_color": status_color,
                "full_name": application.full_name,
                "animal_name": animal.name,
                "animal_unique_id": animal.unique_id,
                "application_id": str(application.id),
                "status": status.value,
                "status_message": status_message,
                "status_color": status_color,
            },
        )

    async def contract_link(
        self,
        application: Application,
        animal: Animal,
        *,
        contract_url: str,
        expires_at: datetime,
    ) -> None:
        await self.send_template(
            template_key=CONTRACT_LINK,
            to=application.email,
            context={
                "heading": "Your Adoption Contract",
                "full_name": application.full_name,
                "animal_name": animal.name,
                "animal_unique_id": animal.unique_id,
                "contract_url": contract_url,
                "expires_at": format_display_date(expires_at, include_time=True),
            },
        )


def _jsonable(value: Any) -> Any:
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    return str(value)
