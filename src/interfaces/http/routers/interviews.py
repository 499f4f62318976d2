from __future__ import annotations

from dataclasses import asdict
from typing import Sequence
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from src.application.use_cases.interviews import (
    create_interview,
    delete_interview,
    list_interviews,
    update_interview,
)
from src.domain.models.interview import Interview
from src.infrastructure.auth.context import AuthContext
from src.interfaces.http.deps import get_auth_context, get_uow
from src.interfaces.http.routers.applications import present_applications, summarize
from src.interfaces.http.schemas.interviews import (
    InterviewCreate,
    InterviewResponse,
    InterviewUpdate,
)

router = APIRouter(prefix="/interviews", tags=["interviews"])


async def _present(uow, interviews: Sequence[Interview]) -> list[InterviewResponse]:
    applications = []
    for application_id in {i.application_id for i in interviews}:
        application = await uow.applications.get(application_id)
        if application:
            applications.append(application)
    summaries = {a.id: summarize(a) for a in await present_applications(uow, applications)}
    results = []
    for interview in interviews:
        data = asdict(interview)
        data["application"] = summaries.get(interview.application_id)
        results.append(InterviewResponse.model_validate(data))
    return results


@router.get("/", response_model=list[InterviewResponse])
async def list_all(
    context: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)
) -> list[InterviewResponse]:
    interviews = await list_interviews.execute(uow, context.role, context.volunteer_id)
    return await _present(uow, interviews)


@router.get("/application/{application_id}", response_model=list[InterviewResponse])
async def list_for_application(
    application_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> list[InterviewResponse]:
    interviews = await list_interviews.list_for_application(uow, context.role, application_id)
    return await _present(uow, interviews)


@router.post("/", response_model=InterviewResponse, status_code=status.HTTP_201_CREATED)
async def create(
    payload: InterviewCreate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> InterviewResponse:
    interview = await create_interview.execute(
        uow,
        context.role,
        context.volunteer_id,
        create_interview.CreateInterviewInput(**payload.model_dump()),
    )
    (response,) = await _present(uow, [interview])
    return response


@router.get("/{interview_id}", response_model=InterviewResponse)
async def get_one(
    interview_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> InterviewResponse:
    interview = await list_interviews.get(uow, context.role, context.volunteer_id, interview_id)
    (response,) = await _present(uow, [interview])
    return response


@router.put("/{interview_id}", response_model=InterviewResponse)
async def update(
    interview_id: UUID,
    payload: InterviewUpdate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> InterviewResponse:
    interview = await update_interview.execute(
        uow,
        context.role,
        context.volunteer_id,
        interview_id,
        update_interview.UpdateInterviewInput(**payload.model_dump(exclude_unset=True)),
    )
    (response,) = await _present(uow, [interview])
    return response


@router.delete("/{interview_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete(
    interview_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> Response:
    await delete_interview.execute(uow, context.role, interview_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
