from __future__ import annotations

from collections.abc import AsyncIterator

from fastapi import Request

from src.application.errors import AuthError
from src.config.settings import Settings, get_settings
from src.infrastructure.auth.context import AuthContext
from src.infrastructure.auth.jwt_service import JWTService
from src.infrastructure.auth.password import PasswordHasher
from src.infrastructure.db.session import SQLAlchemyUnitOfWork
from src.infrastructure.services.adoption_mailer import AdoptionMailer
from src.infrastructure.storage.ports import StorageService


async def get_auth_context(request: Request) -> AuthContext:
    context = getattr(request.state, "auth_context", None)
    if context is None:
        error = getattr(request.state, "auth_error", None)
        if error is not None:
            raise error
        raise AuthError("Authentication required")
    return context


async def get_optional_auth_context(request: Request) -> AuthContext | None:
    return getattr(request.state, "auth_context", None)


async def get_uow(request: Request) -> AsyncIterator[SQLAlchemyUnitOfWork]:
    session_factory = getattr(request.app.state, "session_factory", None)
    if session_factory is None:
        raise RuntimeError("Session factory not configured")
    uow = SQLAlchemyUnitOfWork(session_factory)
    async with uow:
        yield uow


def get_app_settings(request: Request) -> Settings:
    settings = getattr(request.app.state, "settings", None)
    return settings or get_settings()


def get_password_hasher(request: Request) -> PasswordHasher:
    hasher = getattr(request.app.state, "password_hasher", None)
    if hasher is None:
        raise RuntimeError("Password hasher not configured")
    return hasher


def get_jwt_service(request: Request) -> JWTService:
    service = getattr(request.app.state, "jwt_service", None)
    if service is None:
        raise RuntimeError("JWT service not configured")
    return service


def get_storage_service(request: Request) -> StorageService | None:
    # None when no bucket is configured; photo uploads then fail with 500
    return getattr(request.app.state, "storage_service", None)


def get_mailer(request: Request) -> AdoptionMailer:
    mailer = getattr(request.app.state, "mailer", None)
    if mailer is None:
        raise RuntimeError("Mailer not configured")
    return mailer
