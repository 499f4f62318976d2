from __future__ import annotations

from functools import lru_cache

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    database_url: str
    log_level: str = "INFO"
    environment: str = "dev"
    app_version: str = "1.0.0"
    jwt_secret_key: SecretStr
    jwt_algorithm: str = "HS256"
    jwt_access_token_expires_minutes: int = 60 * 24
    jwt_issuer: str | None = None
    jwt_audience: str | None = None
    # Auth cookies
    cookie_samesite: str = "lax"  # options: 'lax', 'none', 'strict'
    cookie_secure: bool = False  # set True when served over HTTPS
    # CORS
    cors_allow_origins: str = "http://localhost:5173"
    frontend_url: str = "http://localhost:5173"
    # S3-compatible photo storage (AWS S3 or DigitalOcean Spaces)
    s3_bucket: str | None = None
    s3_region: str = "us-east-1"
    s3_endpoint_url: str | None = None  # e.g. https://nyc3.digitaloceanspaces.com
    s3_access_key_id: SecretStr | None = None
    s3_secret_access_key: SecretStr | None = None
    s3_prefix: str = ""  # e.g. "dev/" or "prod/"
    s3_public_url_base: str | None = None
    max_photo_bytes: int = 10 * 1024 * 1024
    # Email
    email_provider: str = "logging"  # logging | smtp
    email_from_name: str = "The SFP Portal Team"
    email_from_address: str = "noreply@sfp-portal.com"
    email_primary_color: str = "#4C51A4"
    smtp_host: str | None = None
    smtp_port: int = 587
    smtp_username: str | None = None
    smtp_password: SecretStr | None = None
    smtp_use_tls: bool = True
    # Contracts
    contract_token_expires_hours: int = 72

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @field_validator("database_url")
    @classmethod
    def ensure_asyncpg_scheme(cls, value: str) -> str:
        if value.startswith("postgres://"):
            return value.replace("postgres://", "postgresql+asyncpg://", 1)
        if value.startswith("postgresql://") and "+" not in value.split("://", 1)[0]:
            return value.replace("postgresql://", "postgresql+asyncpg://", 1)
        return value

    @property
    def cors_allow_origins_list(self) -> list[str]:
        """Convert cors_allow_origins string to list"""
        return [v.strip() for v in self.cors_allow_origins.split(",") if v.strip()]

    @property
    def is_production(self) -> bool:
        return self.environment.lower() in {"prod", "production"}

    def contract_link(self, token: str) -> str:
        return f"{self.frontend_url.rstrip('/')}/contract/sign?token={token}"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
