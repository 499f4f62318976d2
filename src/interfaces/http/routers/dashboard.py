from __future__ import annotations

from fastapi import APIRouter, Depends

from src.application.use_cases.dashboard import get_summary
from src.infrastructure.auth.context import AuthContext
from src.interfaces.http.deps import get_auth_context, get_uow
from src.interfaces.http.schemas.dashboard import DashboardSummaryResponse

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/summary", response_model=DashboardSummaryResponse)
async def read_summary(
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> DashboardSummaryResponse:
    summary = await get_summary.execute(uow, context.role, context.volunteer_id)
    return DashboardSummaryResponse.model_validate(summary)
