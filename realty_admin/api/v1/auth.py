# ==============================================================================
# AUTH ENDPOINTS - Admin Accounts
# ==============================================================================
# Registration and token issue for the admins who maintain master data
# ==============================================================================

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.security import OAuth2PasswordRequestForm

from realty_admin.api.dependencies import CurrentUserID, UserServiceDep
from realty_admin.core.constants import SuccessMessages
from realty_admin.schemas.base import APIResponse
from realty_admin.schemas.user import (
    LoginResponse,
    TokenResponse,
    UserCreate,
    UserLogin,
    UserResponse,
)

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post(
    "/register",
    response_model=APIResponse[UserResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Create an admin account",
)
async def register(schema: UserCreate, service: UserServiceDep):
    user = await service.register(schema)
    return APIResponse.ok(data=user, message=SuccessMessages.USER_REGISTERED)


@router.post(
    "/login",
    response_model=TokenResponse,
    summary="OAuth2 password login",
    description="Form login used by the docs UI; ``username`` holds the email.",
)
async def login_form(
    form: Annotated[OAuth2PasswordRequestForm, Depends()],
    service: UserServiceDep,
):
    session = await service.authenticate(form.username, form.password)
    return session.tokens


@router.post(
    "/login/json",
    response_model=APIResponse[LoginResponse],
    summary="JSON login",
)
async def login_json(credentials: UserLogin, service: UserServiceDep):
    session = await service.authenticate(credentials.email, credentials.password)
    return APIResponse.ok(data=session, message=SuccessMessages.LOGIN_SUCCESS)


@router.get("/me", response_model=APIResponse[UserResponse], summary="Signed-in admin")
async def me(user_id: CurrentUserID, service: UserServiceDep):
    return APIResponse.ok(data=await service.get_by_id(user_id))
