from __future__ import annotations

import json
import logging
from urllib.parse import quote

from fastapi import APIRouter, Depends, Response

from src.application.use_cases.auth import change_password, get_me, login_user
from src.config.settings import Settings
from src.domain.models.volunteer import Volunteer
from src.infrastructure.auth.context import AuthContext
from src.infrastructure.auth.jwt_service import JWTService
from src.infrastructure.auth.password import PasswordHasher
from src.interfaces.http.deps import (
    get_app_settings,
    get_auth_context,
    get_jwt_service,
    get_password_hasher,
    get_uow,
)
from src.interfaces.http.schemas.auth import (
    ChangePasswordRequest,
    LoginRequest,
    LoginResponse,
    MeResponse,
    MessageResponse,
    VerifyResponse,
    VolunteerInfo,
)
from src.interfaces.middleware.auth_middleware import AUTH_COOKIE_NAME, USER_INFO_COOKIE_NAME

router = APIRouter(prefix="/auth", tags=["auth"])
logger = logging.getLogger(__name__)


def _user_info_cookie(volunteer: Volunteer) -> str:
    # Readable by the SPA; the token itself stays in the httpOnly cookie
    info = {
        "id": str(volunteer.id),
        "name": volunteer.full_name,
        "email": volunteer.email,
        "role": [volunteer.role.value],
        "isAuthenticated": True,
    }
    return quote(json.dumps(info))


@router.post("/login", response_model=LoginResponse)
async def login(
    payload: LoginRequest,
    response: Response,
    uow=Depends(get_uow),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
    jwt_service: JWTService = Depends(get_jwt_service),
    settings: Settings = Depends(get_app_settings),
) -> LoginResponse:
    result = await login_user.execute(
        uow=uow,
        payload=login_user.LoginInput(email=payload.email, password=payload.password),
        password_hasher=password_hasher,
        jwt_service=jwt_service,
    )
    response.set_cookie(
        key=AUTH_COOKIE_NAME,
        value=result.access_token,
        max_age=jwt_service.max_age_seconds,
        httponly=True,
        samesite=settings.cookie_samesite,
        secure=settings.cookie_secure,
        path="/",
    )
    response.set_cookie(
        key=USER_INFO_COOKIE_NAME,
        value=_user_info_cookie(result.volunteer),
        max_age=jwt_service.max_age_seconds,
        httponly=False,
        samesite=settings.cookie_samesite,
        secure=settings.cookie_secure,
        path="/",
    )
    logger.info("Volunteer %s logged in", result.volunteer.id)
    return LoginResponse(
        message="Login successful",
        volunteer=VolunteerInfo.model_validate(result.volunteer),
        access_token=result.access_token,
        token_type=result.token_type,
    )


@router.post("/logout", response_model=MessageResponse)
async def logout(
    response: Response, settings: Settings = Depends(get_app_settings)
) -> MessageResponse:
    for name in (AUTH_COOKIE_NAME, USER_INFO_COOKIE_NAME):
        response.delete_cookie(
            key=name,
            path="/",
            samesite=settings.cookie_samesite,
            secure=settings.cookie_secure,
        )
    return MessageResponse(message="Logged out successfully")


@router.get("/verify", response_model=VerifyResponse)
async def verify(context: AuthContext = Depends(get_auth_context)) -> VerifyResponse:
    return VerifyResponse(message="Token is valid", user=context.claims)


@router.get("/me", response_model=MeResponse)
async def read_me(
    context: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)
) -> MeResponse:
    volunteer = await get_me.execute(uow, context.volunteer_id)
    data = VolunteerInfo.model_validate(volunteer).model_dump()
    data["created_at"] = volunteer.created_at.date()
    return MeResponse.model_validate(data)


@router.post("/change-password", response_model=MessageResponse)
async def change_password_endpoint(
    payload: ChangePasswordRequest,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
) -> MessageResponse:
    await change_password.execute(
        uow=uow,
        volunteer_id=context.volunteer_id,
        payload=change_password.ChangePasswordInput(
            current_password=payload.current_password,
            new_password=payload.new_password,
        ),
        password_hasher=password_hasher,
    )
    return MessageResponse(message="Password updated successfully")
