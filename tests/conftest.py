from __future__ import annotations

import os
import sys
from collections.abc import AsyncIterator, Callable
from pathlib import Path
from uuid import UUID

import pytest
from httpx import ASGITransport, AsyncClient

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///default.db")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret")

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(PROJECT_ROOT))

# ruff: noqa: E402
from src.config.settings import Settings
from src.domain.models.volunteer import Volunteer
from src.domain.value_objects.role import Role
from src.infrastructure.auth.password import PasswordHasher
from src.infrastructure.db.base import Base
from src.infrastructure.db.orm import (  # noqa: F401
    animal,
    animal_photo,
    application,
    audit_log,
    contract,
    email_log,
    interview,
    volunteer,
)
from src.infrastructure.db.session import SQLAlchemyUnitOfWork
from src.infrastructure.email.models import EmailMessage, EmailService
from src.interfaces.http.main import create_app

DEFAULT_PASSWORD = "password123"


class FakeStorage:
    def __init__(self) -> None:
        self.objects: dict[str, bytes] = {}
        self.deleted: list[str] = []

    async def put_object(
        self, key: str, data: bytes, content_type: str, *, public: bool = True
    ) -> str:
        self.objects[key] = data
        return key

    async def delete_object(self, key: str) -> None:
        self.deleted.append(key)
        self.objects.pop(key, None)

    async def get_public_url(self, key: str) -> str:
        return f"https://cdn.test/{key}"


class RecordingEmailService(EmailService):
    def __init__(self) -> None:
        self.sent: list[EmailMessage] = []

    async def send(self, message: EmailMessage) -> None:
        self.sent.append(message)

    def recipients(self) -> list[str]:
        return [to for message in self.sent for to in message.to]


@pytest.fixture()
def test_settings(tmp_path) -> Settings:
    db_path = tmp_path / "test.db"
    return Settings.model_validate(
        {
            "database_url": f"sqlite+aiosqlite:///{db_path}",
            "jwt_secret_key": "test-secret",
            "log_level": "INFO",
            "environment": "test",
            "frontend_url": "http://frontend.test",
            "max_photo_bytes": 1024,
        }
    )


@pytest.fixture()
def password_hasher() -> PasswordHasher:
    # Minimum bcrypt cost keeps the suite fast
    return PasswordHasher(rounds=4)


@pytest.fixture()
def storage() -> FakeStorage:
    return FakeStorage()


@pytest.fixture()
def email_service() -> RecordingEmailService:
    return RecordingEmailService()


@pytest.fixture()
def app(test_settings, password_hasher, storage, email_service):
    return create_app(
        settings=test_settings,
        password_hasher=password_hasher,
        storage_service=storage,
        email_service=email_service,
    )


@pytest.fixture()
async def client(app) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        engine = app.state.engine
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
            await conn.run_sync(Base.metadata.create_all)
        yield client
    await app.state.engine.dispose()


@pytest.fixture()
async def seeded_volunteers(app, client, password_hasher) -> dict[str, Volunteer]:
    hashed = password_hasher.hash(DEFAULT_PASSWORD)
    volunteers = {
        "admin": Volunteer.create(
            first_name="Ada", last_name="Admin", email="admin@example.com",
            hashed_password=hashed, role=Role.ADMIN,
        ),
        "foster": Volunteer.create(
            first_name="Fay", last_name="Foster", email="foster@example.com",
            hashed_password=hashed, role=Role.FOSTER,
        ),
        "foster2": Volunteer.create(
            first_name="Finn", last_name="Foster", email="foster2@example.com",
            hashed_password=hashed, role=Role.FOSTER,
        ),
        "interviewer": Volunteer.create(
            first_name="Ivy", last_name="Interviewer", email="interviewer@example.com",
            hashed_password=hashed, role=Role.INTERVIEWER,
        ),
    }
    async with SQLAlchemyUnitOfWork(app.state.session_factory) as uow:
        for item in volunteers.values():
            await uow.volunteers.add(item)
        await uow.commit()
    return volunteers


@pytest.fixture()
def token_factory(app) -> Callable[[UUID], str]:
    def _make(volunteer_id: UUID) -> str:
        return app.state.jwt_service.create_access_token(subject=volunteer_id)

    return _make


@pytest.fixture()
def auth_headers(seeded_volunteers, token_factory) -> Callable[[str], dict[str, str]]:
    """Bearer headers for one of the seeded volunteers, by key."""

    def _headers(key: str) -> dict[str, str]:
        token = token_factory(seeded_volunteers[key].id)
        return {"Authorization": f"Bearer {token}"}

    return _headers


def _animal_payload(**overrides) -> dict:
    payload = {
        "name": "Biscuit",
        "species": "Dog",
        "breed": "Beagle",
        "age": "2 years",
        "sex": "Male",
        "size": "Medium",
        "color": "Tricolor",
        "description": "Friendly and curious.",
        "personality": ["playful", "gentle"],
        "vaccinated": True,
        "location": "Springfield",
        "adoption_fee": 150.0,
        "intake_date": "2026-01-10",
        "internal_notes": "Needs a fenced yard",
    }
    payload.update(overrides)
    return payload


def _application_payload(animal_unique_id: str, **overrides) -> dict:
    payload = {
        "animal_id": animal_unique_id,
        "full_name": "Jamie Adopter",
        "email": "Jamie@Example.com",
        "phone": "555-0100",
        "address": "1 Main St",
        "city": "Springfield",
        "state": "IL",
        "zip_code": "62701",
        "household_type": "House",
        "has_children": False,
        "has_other_pets": False,
        "experience_with_pets": "Some",
        "hours_away": "4-6",
        "reason_for_adoption": "Looking for a companion",
        "emergency_contact_name": "Sam Adopter",
        "emergency_contact_phone": "555-0101",
        "agreed_to_terms": True,
    }
    payload.update(overrides)
    return payload


@pytest.fixture()
def animal_payload() -> Callable[..., dict]:
    return _animal_payload


@pytest.fixture()
def application_payload() -> Callable[..., dict]:
    return _application_payload


@pytest.fixture()
def create_animal(client, auth_headers):
    """Creates an animal through the API and returns the response body."""

    async def _create(as_role: str = "admin", **overrides) -> dict:
        response = await client.post(
            "/api/animals/", json=_animal_payload(**overrides), headers=auth_headers(as_role)
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest.fixture()
def submit_application(client):
    async def _submit(animal_unique_id: str, **overrides) -> dict:
        response = await client.post(
            "/api/applications/", json=_application_payload(animal_unique_id, **overrides)
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _submit
