"""AssetTrack — User and authentication schemas."""
from datetime import datetime

from pydantic import EmailStr, Field

from app.schemas.common import CamelModel


class UserRead(CamelModel):
    user_id: int
    full_name: str | None = None
    email: str
    role_id: str | None = None
    is_active: bool


class UserDto(CamelModel):
    """Public identity of the signed-in user."""

    user_id: int
    email: str
    full_name: str | None = None
    role_id: str | None = None


class LoginRequest(CamelModel):
    email: EmailStr
    password: str = Field(min_length=1)


class LoginResponse(CamelModel):
    token: str
    expires_at: datetime
    user: UserDto


class ForgotPasswordRequest(CamelModel):
    email: EmailStr


class ResetPasswordRequest(CamelModel):
    current_password: str = Field(min_length=1)
    new_password: str = Field(min_length=6, max_length=100)


class ResetPasswordWithTokenRequest(CamelModel):
    email: EmailStr
    reset_token: str = Field(min_length=6, max_length=6)
    new_password: str = Field(min_length=6, max_length=100)


class ChangePasswordRequest(CamelModel):
    old_password: str = Field(min_length=1)
    new_password: str = Field(min_length=6, max_length=100)
