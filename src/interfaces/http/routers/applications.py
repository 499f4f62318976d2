from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Sequence
from uuid import UUID

from fastapi import APIRouter, BackgroundTasks, Depends, Query, Response, status

from src.application.use_cases.applications import (
    delete_application,
    get_application,
    list_applications,
    submit_application,
    update_application_status,
)
from src.domain.models.application import Application
from src.domain.value_objects.application_status import ApplicationStatus
from src.infrastructure.auth.context import AuthContext
from src.infrastructure.services.adoption_mailer import AdoptionMailer
from src.interfaces.http.deps import get_auth_context, get_mailer, get_uow
from src.interfaces.http.routers.animals import build_summary, load_image_urls
from src.interfaces.http.schemas.applications import (
    ApplicationCreate,
    ApplicationResponse,
    ApplicationStatusUpdate,
    ApplicationSummary,
)

router = APIRouter(prefix="/applications", tags=["applications"])
logger = logging.getLogger(__name__)


async def present_applications(
    uow, applications: Sequence[Application]
) -> list[ApplicationResponse]:
    animals = await uow.animals.get_many(list({a.animal_id for a in applications}))
    urls = await load_image_urls(uow, list(animals.values()))
    results = []
    for application in applications:
        data = asdict(application)
        animal = animals.get(application.animal_id)
        # Applications reference animals by their public id
        data["animal_id"] = animal.unique_id if animal else str(application.animal_id)
        data["animal"] = build_summary(animal, urls.get(animal.id)) if animal else None
        results.append(ApplicationResponse.model_validate(data))
    return results


def summarize(application: ApplicationResponse) -> ApplicationSummary:
    return ApplicationSummary(
        id=application.id,
        animal_id=application.animal_id,
        status=application.status,
        full_name=application.full_name,
        email=application.email,
        phone=application.phone,
    )


@router.post("/", response_model=ApplicationResponse, status_code=status.HTTP_201_CREATED)
async def submit(
    payload: ApplicationCreate,
    background_tasks: BackgroundTasks,
    uow=Depends(get_uow),
    mailer: AdoptionMailer = Depends(get_mailer),
) -> ApplicationResponse:
    result = await submit_application.execute(
        uow, submit_application.SubmitApplicationInput(**payload.model_dump())
    )
    logger.info(
        "Application %s submitted for animal %s", result.application.id, result.animal.unique_id
    )
    background_tasks.add_task(mailer.application_received, result.application, result.animal)
    if result.reviewers:
        background_tasks.add_task(
            mailer.new_application, result.application, result.animal, result.reviewers
        )
    (response,) = await present_applications(uow, [result.application])
    return response


@router.get("/", response_model=list[ApplicationResponse])
async def list_all(
    status_filter: ApplicationStatus | None = Query(default=None, alias="status"),
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> list[ApplicationResponse]:
    applications = await list_applications.execute(uow, context.role, status=status_filter)
    return await present_applications(uow, applications)


@router.get("/animal/{unique_id}", response_model=list[ApplicationResponse])
async def list_for_animal(
    unique_id: str,
    _: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> list[ApplicationResponse]:
    applications = await list_applications.list_for_animal(uow, unique_id)
    return await present_applications(uow, applications)


@router.get("/{application_id}", response_model=ApplicationResponse)
async def get_one(
    application_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> ApplicationResponse:
    application = await get_application.execute(uow, context.role, application_id)
    (response,) = await present_applications(uow, [application])
    return response


@router.patch("/{application_id}/status", response_model=ApplicationResponse)
async def change_status(
    application_id: UUID,
    payload: ApplicationStatusUpdate,
    background_tasks: BackgroundTasks,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    mailer: AdoptionMailer = Depends(get_mailer),
) -> ApplicationResponse:
    result = await update_application_status.execute(
        uow, context.role, context.volunteer_id, application_id, payload.status
    )
    if result.changed and result.animal is not None:
        background_tasks.add_task(mailer.application_status, result.application, result.animal)
    (response,) = await present_applications(uow, [result.application])
    return response


@router.delete("/{application_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete(
    application_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> Response:
    await delete_application.execute(uow, context.role, context.volunteer_id, application_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
