from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Request
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from src.config.settings import Settings
from src.interfaces.http.deps import get_app_settings

router = APIRouter(tags=["health"])
logger = logging.getLogger(__name__)


async def _database_status(request: Request) -> str:
    session_factory = getattr(request.app.state, "session_factory", None)
    if session_factory is None:
        return "disconnected"
    try:
        async with session_factory() as session:
            await session.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError) as exc:
        logger.warning("Health check could not reach the database: %s", exc)
        return "disconnected"
    return "connected"


@router.get("/health")
async def health(
    request: Request, settings: Settings = Depends(get_app_settings)
) -> dict[str, str]:
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": settings.app_version,
        "database": await _database_status(request),
    }
