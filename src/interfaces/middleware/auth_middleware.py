from __future__ import annotations

import logging
from typing import Iterable
from uuid import UUID

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from src.application.errors import AuthError
from src.config.settings import Settings
from src.infrastructure.auth.context import build_context, fetch_volunteer

logger = logging.getLogger(__name__)

AUTH_COOKIE_NAME = "auth_token"
USER_INFO_COOKIE_NAME = "user_info"

# Paths that never need a volunteer lookup
PUBLIC_PATHS: Iterable[str] = (
    "/api/health",
    "/api/auth/login",
    "/api/auth/logout",
    "/docs",
    "/openapi.json",
    "/redoc",
)


def extract_token(request: Request) -> str | None:
    """Cookie first, then `Authorization: Bearer <token>`."""
    token = request.cookies.get(AUTH_COOKIE_NAME)
    if token:
        return token
    authorization = request.headers.get("Authorization")
    if not authorization:
        return None
    scheme, _, value = authorization.partition(" ")
    if scheme.lower() != "bearer" or not value:
        return None
    return value.strip()


class AuthMiddleware(BaseHTTPMiddleware):
    """
    Resolves the calling volunteer when a token is present.

    Public and protected routes share prefixes (e.g. `/api/animals/available`
    vs `POST /api/animals`), so the middleware never rejects a request itself.
    It stores either `request.state.auth_context` or `request.state.auth_error`
    and the `get_auth_context` dependency enforces authentication per route.
    """

    def __init__(self, app, *, settings: Settings) -> None:
        super().__init__(app)
        self.settings = settings

    async def dispatch(self, request: Request, call_next) -> Response:
        request.state.auth_context = None
        request.state.auth_error = None
        if request.method == "OPTIONS":
            return await call_next(request)
        if any(request.url.path.startswith(path) for path in PUBLIC_PATHS):
            return await call_next(request)

        token = extract_token(request)
        if token:
            try:
                request.state.auth_context = await self._resolve(request, token)
            except AuthError as exc:
                logger.debug("Ignoring invalid credentials on %s: %s", request.url.path, exc)
                request.state.auth_error = exc
        return await call_next(request)

    async def _resolve(self, request: Request, token: str):
        jwt_service = getattr(request.app.state, "jwt_service", None)
        if jwt_service is None:
            raise RuntimeError("JWT service not configured")
        claims = jwt_service.decode(token)

        subject = claims.get("sub")
        if not subject:
            raise AuthError("Token missing subject")
        try:
            volunteer_id = UUID(str(subject))
        except ValueError as exc:
            raise AuthError("Token subject is not a valid UUID") from exc

        session_factory = getattr(request.app.state, "session_factory", None)
        if session_factory is None:
            raise RuntimeError("Session factory not configured")
        async with session_factory() as session:
            volunteer = await fetch_volunteer(session, volunteer_id)
            context = build_context(volunteer, claims) if volunteer else None
        if context is None:
            raise AuthError("Inactive or missing volunteer")
        return context
