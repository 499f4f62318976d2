from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape

from src.config.settings import Settings
from src.infrastructure.email.models import EmailMessage

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

APPLICATION_RECEIVED = "application_received"
NEW_APPLICATION = "new_application"
APPLICATION_STATUS = "application_status"
CONTRACT_LINK = "contract_link"

TEMPLATE_KEYS = (APPLICATION_RECEIVED, NEW_APPLICATION, APPLICATION_STATUS, CONTRACT_LINK)


class EmailTemplateRenderer:
    """Renders `<key>/subject.txt.j2`, `body.txt.j2` and `body.html.j2` into a message.

    The html body is wrapped in `_layout.html.j2`. Every template gets an `app`
    mapping with the shelter name, brand color and portal url.
    """

    def __init__(self, settings: Settings, templates_dir: Path = TEMPLATES_DIR) -> None:
        self.settings = settings
        self.env = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            autoescape=select_autoescape(["html", "html.j2"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def _common(self) -> dict[str, Any]:
        return {
            "app": {
                "name": self.settings.email_from_name,
                "primary_color": self.settings.email_primary_color,
                "frontend_url": self.settings.frontend_url.rstrip("/"),
            }
        }

    def render(self, template_key: str, *, to: str, context: dict[str, Any]) -> EmailMessage:
        if template_key not in TEMPLATE_KEYS:
            raise ValueError(f"Unknown email template: {template_key}")
        ctx = {**self._common(), **context}
        subject = self.env.get_template(f"{template_key}/subject.txt.j2").render(ctx).strip()
        text = self.env.get_template(f"{template_key}/body.txt.j2").render(ctx).strip()
        inner = self.env.get_template(f"{template_key}/body.html.j2").render(ctx)
        html = self.env.get_template("_layout.html.j2").render(
            {**ctx, "content": inner, "title": subject}
        )
        return EmailMessage(
            subject=subject,
            to=[to],
            text=text,
            html=html,
            from_email=self.settings.email_from_address,
            from_name=self.settings.email_from_name,
        )
