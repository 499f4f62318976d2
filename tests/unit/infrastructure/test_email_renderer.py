from __future__ import annotations

import pytest

from src.config.settings import Settings
from src.infrastructure.email.renderer.engine import CONTRACT_LINK, EmailTemplateRenderer


@pytest.fixture()
def renderer() -> EmailTemplateRenderer:
    settings = Settings.model_validate(
        {
            "database_url": "sqlite+aiosqlite:///unused.db",
            "jwt_secret_key": "unit-secret",
            "email_from_name": "Shelter Team",
            "email_from_address": "hello@shelter.test",
        }
    )
    return EmailTemplateRenderer(settings)


def test_contract_link_message(renderer):
    message = renderer.render(
        CONTRACT_LINK,
        to="jamie@example.com",
        context={
            "heading": "Your Adoption Contract",
            "full_name": "Jamie <Adopter>",
            "animal_name": "Biscuit",
            "animal_unique_id": "SFP-001",
            "contract_url": "http://frontend.test/contract/sign?token=abc",
            "expires_at": "Mon, Jan 12 2026 10:00 UTC",
        },
    )
    assert message.to == ["jamie@example.com"]
    assert message.subject == "Your adoption contract for Biscuit"
    assert message.from_email == "hello@shelter.test"
    assert "http://frontend.test/contract/sign?token=abc" in message.text
    assert message.text.endswith("Shelter Team")
    assert "Jamie &lt;Adopter&gt;" in message.html
    assert "Jamie <Adopter>" in message.text


def test_unknown_template_is_rejected(renderer):
    with pytest.raises(ValueError):
        renderer.render("password_reset", to="a@example.com", context={})
