from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from src.application.use_cases.volunteers import (
    create_volunteer,
    delete_volunteer,
    get_volunteer,
    list_volunteers,
    update_volunteer,
)
from src.infrastructure.auth.context import AuthContext
from src.infrastructure.auth.password import PasswordHasher
from src.interfaces.http.deps import get_auth_context, get_password_hasher, get_uow
from src.interfaces.http.schemas.volunteers import (
    VolunteerCreate,
    VolunteerResponse,
    VolunteerTotalResponse,
    VolunteerUpdate,
)

router = APIRouter(prefix="/volunteers", tags=["volunteers"])


@router.get("/stats/total", response_model=VolunteerTotalResponse)
async def total_volunteers(uow=Depends(get_uow)) -> VolunteerTotalResponse:
    return VolunteerTotalResponse(total=await list_volunteers.count_total(uow))


@router.get("/", response_model=list[VolunteerResponse])
async def list_all(
    context: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)
) -> list[VolunteerResponse]:
    volunteers = await list_volunteers.execute(uow, context.role)
    return [VolunteerResponse.model_validate(v) for v in volunteers]


@router.post("/", response_model=VolunteerResponse, status_code=status.HTTP_201_CREATED)
async def create(
    payload: VolunteerCreate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
) -> VolunteerResponse:
    volunteer = await create_volunteer.execute(
        uow,
        context.role,
        context.volunteer_id,
        create_volunteer.CreateVolunteerInput(**payload.model_dump()),
        password_hasher=password_hasher,
    )
    return VolunteerResponse.model_validate(volunteer)


@router.get("/{volunteer_id}", response_model=VolunteerResponse)
async def get_one(
    volunteer_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> VolunteerResponse:
    volunteer = await get_volunteer.execute(uow, context.role, volunteer_id)
    return VolunteerResponse.model_validate(volunteer)


@router.put("/{volunteer_id}", response_model=VolunteerResponse)
async def update(
    volunteer_id: UUID,
    payload: VolunteerUpdate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> VolunteerResponse:
    volunteer = await update_volunteer.execute(
        uow,
        context.role,
        context.volunteer_id,
        volunteer_id,
        update_volunteer.UpdateVolunteerInput(**payload.model_dump(exclude_unset=True)),
    )
    return VolunteerResponse.model_validate(volunteer)


@router.delete("/{volunteer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete(
    volunteer_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> Response:
    await delete_volunteer.execute(uow, context.role, context.volunteer_id, volunteer_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
