from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from src.application.errors import AuthError, NotFound, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.infrastructure.auth.password import PasswordHasher

MIN_PASSWORD_LENGTH = 8


@dataclass(slots=True)
class ChangePasswordInput:
    current_password: str
    new_password: str


async def execute(
    *,
    uow: UnitOfWork,
    volunteer_id: UUID,
    payload: ChangePasswordInput,
    password_hasher: PasswordHasher,
) -> None:
    volunteer = await uow.volunteers.get(volunteer_id)
    if not volunteer:
        raise NotFound("Volunteer not found")
    if not password_hasher.verify(payload.current_password, volunteer.hashed_password):
        raise AuthError("Incorrect current password")
    if len(payload.new_password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(f"New password must be at least {MIN_PASSWORD_LENGTH} characters")
    if payload.new_password == payload.current_password:
        raise ValidationError("New password must be different from the current one")
    await uow.volunteers.update(
        volunteer_id, {"hashed_password": password_hasher.hash(payload.new_password)}
    )
    await uow.commit()
