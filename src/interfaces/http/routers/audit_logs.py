from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from src.application.use_cases.audit import list_audit_logs
from src.domain.value_objects.audit import AuditEntityType
from src.infrastructure.auth.context import AuthContext
from src.interfaces.http.deps import get_auth_context, get_uow
from src.interfaces.http.schemas.audit_logs import AuditLogResponse

router = APIRouter(prefix="/audit-logs", tags=["audit"])


@router.get("/", response_model=list[AuditLogResponse])
async def list_entries(
    entity_type: AuditEntityType | None = Query(default=None),
    entity_id: str | None = Query(default=None),
    limit: int = Query(default=100, ge=1, le=500),
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> list[AuditLogResponse]:
    entries = await list_audit_logs.execute(
        uow, context.role, entity_type=entity_type, entity_id=entity_id, limit=limit
    )
    return [AuditLogResponse.model_validate(e) for e in entries]
