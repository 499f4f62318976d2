from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.config.settings import Settings, get_settings
from src.infrastructure.auth.jwt_service import JWTService
from src.infrastructure.auth.password import PasswordHasher
from src.infrastructure.db.session import create_engine, create_session_factory
from src.infrastructure.email.models import EmailService
from src.infrastructure.email.providers.logging_provider import LoggingEmailService
from src.infrastructure.email.renderer.engine import EmailTemplateRenderer
from src.infrastructure.services.adoption_mailer import AdoptionMailer
from src.infrastructure.storage.ports import StorageService
from src.interfaces.http.routers import (
    animals,
    applications,
    audit_logs,
    contracts,
    dashboard,
    health,
    interviews,
    volunteers,
)
from src.interfaces.http.routers import auth as auth_router
from src.interfaces.middleware.auth_middleware import AuthMiddleware
from src.interfaces.middleware.error_handler import register_error_handlers
from src.interfaces.middleware.request_logging import RequestLoggingMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    try:
        yield
    finally:
        engine = getattr(app.state, "engine", None)
        if engine is not None:
            await engine.dispose()


def _configure_logging(level_name: str) -> None:
    level = getattr(logging, level_name.upper(), logging.INFO)
    root = logging.getLogger()
    # Avoid adding duplicate handlers on reload
    if not any(isinstance(h, logging.StreamHandler) for h in root.handlers):
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        )
        handler.setFormatter(formatter)
        root.addHandler(handler)
    root.setLevel(level)
    # Align common libraries
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access", "sqlalchemy.engine", "httpx"):
        logging.getLogger(name).setLevel(level)


def _build_email_service(settings: Settings) -> EmailService:
    if settings.email_provider.lower() == "smtp" and settings.smtp_host:
        from src.infrastructure.email.providers.smtp_provider import SMTPEmailService

        return SMTPEmailService(
            host=settings.smtp_host,
            port=settings.smtp_port,
            username=settings.smtp_username,
            password=(
                settings.smtp_password.get_secret_value() if settings.smtp_password else None
            ),
            use_tls=settings.smtp_use_tls,
        )
    if settings.email_provider.lower() == "smtp":
        logger.warning("EMAIL_PROVIDER=smtp but SMTP_HOST is empty, falling back to logging")
    return LoggingEmailService()


def _build_storage_service(settings: Settings) -> StorageService | None:
    if not settings.s3_bucket:
        logger.warning("S3_BUCKET not configured, photo uploads are disabled")
        return None
    from src.infrastructure.storage.s3 import S3StorageService

    return S3StorageService(
        bucket=settings.s3_bucket,
        region=settings.s3_region,
        endpoint_url=settings.s3_endpoint_url,
        access_key_id=(
            settings.s3_access_key_id.get_secret_value() if settings.s3_access_key_id else None
        ),
        secret_access_key=(
            settings.s3_secret_access_key.get_secret_value()
            if settings.s3_secret_access_key
            else None
        ),
        prefix=settings.s3_prefix,
        public_url_base=settings.s3_public_url_base,
    )


def create_app(
    *,
    settings: Settings | None = None,
    password_hasher: PasswordHasher | None = None,
    jwt_service: JWTService | None = None,
    storage_service: StorageService | None = None,
    email_service: EmailService | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    _configure_logging(settings.log_level)
    app = FastAPI(
        title="SFP Portal API",
        version=settings.app_version,
        description="Pet adoption management API for the SFP volunteer portal",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.engine = create_engine(settings.database_url)
    app.state.session_factory = create_session_factory(app.state.engine)
    app.state.password_hasher = password_hasher or PasswordHasher()
    app.state.jwt_service = jwt_service or JWTService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        algorithm=settings.jwt_algorithm,
        access_token_expires_minutes=settings.jwt_access_token_expires_minutes,
        issuer=settings.jwt_issuer,
        audience=settings.jwt_audience,
    )
    app.state.email_service = email_service or _build_email_service(settings)
    app.state.email_renderer = EmailTemplateRenderer(settings)
    app.state.mailer = AdoptionMailer(
        settings=settings,
        email_service=app.state.email_service,
        renderer=app.state.email_renderer,
        session_factory=app.state.session_factory,
    )
    app.state.storage_service = storage_service or _build_storage_service(settings)
    register_error_handlers(app)

    api = APIRouter(prefix="/api")
    api.include_router(health.router)
    api.include_router(auth_router.router)
    api.include_router(volunteers.router)
    api.include_router(animals.router)
    api.include_router(applications.router)
    api.include_router(interviews.router)
    api.include_router(contracts.router)
    api.include_router(dashboard.router)
    api.include_router(audit_logs.router)
    app.include_router(api)

    # Auth innermost, then request logging, CORS last so it runs outermost for preflight
    app.add_middleware(AuthMiddleware, settings=settings)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    return app


app = create_app()
