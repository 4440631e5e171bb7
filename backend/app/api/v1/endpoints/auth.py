"""
AssetTrack — Auth endpoints
POST /auth/login, /auth/forgot-password, /auth/reset-password,
/auth/reset-password-with-token, /auth/change-password, GET /auth/me
"""
from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.deps import AuthUser, get_auth_service
from app.core.responses import handle_result
from app.schemas.common import Result
from app.schemas.user import (
    ChangePasswordRequest,
    ForgotPasswordRequest,
    LoginRequest,
    LoginResponse,
    ResetPasswordRequest,
    ResetPasswordWithTokenRequest,
    UserDto,
)
from app.services.auth_service import AuthService

router = APIRouter()

Service = Annotated[AuthService, Depends(get_auth_service)]


@router.post("/login", response_model=Result[LoginResponse])
async def login(body: LoginRequest, svc: Service):
    """Authenticate with email/password. Returns a bearer token."""
    return handle_result(await svc.login(body))


@router.post("/forgot-password", response_model=Result[None])
async def forgot_password(body: ForgotPasswordRequest, svc: Service):
    """Mail a six-digit reset code. Unknown addresses get the same success reply."""
    return handle_result(await svc.forgot_password(body.email))


@router.post("/reset-password", response_model=Result[None])
async def reset_password(body: ResetPasswordRequest, user: AuthUser, svc: Service):
    return handle_result(await svc.reset_password(user.id, body))


@router.post("/reset-password-with-token", response_model=Result[None])
async def reset_password_with_token(body: ResetPasswordWithTokenRequest, svc: Service):
    """Set a new password using the mailed reset code."""
    return handle_result(await svc.reset_password_with_token(body))


@router.get("/me", response_model=Result[UserDto])
async def me(user: AuthUser, svc: Service):
    return handle_result(await svc.get_user(user.id))


@router.post("/change-password", response_model=Result[None])
async def change_password(body: ChangePasswordRequest, user: AuthUser, svc: Service):
    return handle_result(await svc.change_password(user.id, body))
