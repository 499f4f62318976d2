from __future__ import annotations

from dataclasses import dataclass

from src.application.errors import AuthError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.volunteer import Volunteer
from src.infrastructure.auth.jwt_service import JWTService
from src.infrastructure.auth.password import PasswordHasher


@dataclass(slots=True)
class LoginInput:
    email: str
    password: str


@dataclass(slots=True)
class LoginResult:
    access_token: str
    token_type: str
    volunteer: Volunteer


async def execute(
    *,
    uow: UnitOfWork,
    payload: LoginInput,
    password_hasher: PasswordHasher,
    jwt_service: JWTService,
) -> LoginResult:
    volunteer = await uow.volunteers.get_by_email(payload.email.strip().lower())
    # Same message for unknown email, inactive account and wrong password
    if not volunteer or not volunteer.is_active:
        raise AuthError("Invalid credentials")
    if not password_hasher.verify(payload.password, volunteer.hashed_password):
        raise AuthError("Invalid credentials")

    token = jwt_service.create_access_token(
        subject=volunteer.id,
        extra_claims={
            "role": volunteer.role.value,
            "email": volunteer.email,
            "name": volunteer.full_name,
        },
    )
    return LoginResult(access_token=token, token_type="bearer", volunteer=volunteer)
