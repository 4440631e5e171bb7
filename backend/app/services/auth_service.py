"""AssetTrack — AuthService: login, password reset and password change."""
import logging
from datetime import datetime, timedelta, timezone
from typing import Callable

from app.config import get_settings
from app.core.security import (
    access_token_expiry,
    create_access_token,
    generate_reset_code,
    get_password_hash,
    verify_password,
)
from app.repositories.user_repository import UserRepository
from app.schemas.common import Result
from app.schemas.user import (
    ChangePasswordRequest,
    LoginRequest,
    LoginResponse,
    ResetPasswordRequest,
    ResetPasswordWithTokenRequest,
    UserDto,
)
from app.services.base import as_result

logger = logging.getLogger(__name__)

ResetEmailSender = Callable[[str, str, str | None], None]

FORGOT_PASSWORD_NEUTRAL_MESSAGE = "If your email is registered, you will receive a password reset link"


def queue_reset_email(email: str, reset_code: str, full_name: str | None) -> None:
    """Hand the reset email to the Celery worker."""
    from app.tasks.email_tasks import send_password_reset_email

    send_password_reset_email.delay(email, reset_code, full_name)


def _user_dto(row: dict) -> UserDto:
    return UserDto(
        user_id=row["user_id"],
        email=row["email"],
        full_name=row["full_name"],
        role_id=row["role_id"],
    )


class AuthService:
    """Credential checks against the users table.

    Internal errors come back as generic failure messages; the detail is
    only logged.
    """

    def __init__(self, repo: UserRepository, send_reset_email: ResetEmailSender = queue_reset_email):
        self.repo = repo
        self.send_reset_email = send_reset_email

    @as_result("log in", message="Login failed. Please try again.")
    async def login(self, body: LoginRequest) -> Result[LoginResponse]:
        user = await self.repo.get_by_email(body.email)
        if user is None or not verify_password(body.password, user["password_hash"]):
            return Result.fail("Invalid email or password")
        if not user["is_active"]:
            return Result.fail("Account is inactive")

        now = datetime.now(timezone.utc)
        await self.repo.update_last_login(user["user_id"], now)

        expires_at = access_token_expiry(now)
        token = create_access_token(
            subject=user["user_id"],
            email=user["email"],
            expires_at=expires_at,
            extra_claims={"name": user["full_name"], "role": user["role_id"] or "User"},
        )
        logger.info("User %s logged in", user["email"])
        response = LoginResponse(token=token, expires_at=expires_at, user=_user_dto(user))
        return Result.ok(response, "Login successful")

    @as_result("process forgot password", message="Failed to process request. Please try again.")
    async def forgot_password(self, email: str) -> Result[None]:
        user = await self.repo.get_by_email(email)
        if user is None or not user["is_active"]:
            return Result.ok(message=FORGOT_PASSWORD_NEUTRAL_MESSAGE)

        reset_code = generate_reset_code()
        ttl = get_settings().PASSWORD_RESET_TOKEN_TTL_MINUTES
        expiry = datetime.now(timezone.utc) + timedelta(minutes=ttl)

        if await self.repo.update_reset_token(user["user_id"], reset_code, expiry) <= 0:
            return Result.fail("Failed to process password reset request")

        self.send_reset_email(user["email"], reset_code, user["full_name"])
        return Result.ok(message="Password reset email sent")

    @as_result("reset password", message="Failed to reset password. Please try again.")
    async def reset_password(self, user_id: int, body: ResetPasswordRequest) -> Result[None]:
        user = await self.repo.get_active_by_id(user_id)
        if user is None:
            return Result.fail("User not found")
        if not verify_password(body.current_password, user["password_hash"]):
            return Result.fail("Current password is incorrect")

        if await self.repo.update_password(user_id, get_password_hash(body.new_password)) <= 0:
            return Result.fail("Failed to reset password")
        return Result.ok(message="Password reset successfully")

    @as_result("reset password with token", message="Failed to reset password. Please try again.")
    async def reset_password_with_token(self, body: ResetPasswordWithTokenRequest) -> Result[None]:
        now = datetime.now(timezone.utc)
        user = await self.repo.get_by_reset_token(body.email, body.reset_token, now)
        if user is None:
            return Result.fail("Invalid or expired reset token")

        if await self.repo.update_password(user["user_id"], get_password_hash(body.new_password)) <= 0:
            return Result.fail("Failed to reset password")
        await self.repo.clear_reset_token(user["user_id"])
        return Result.ok(message="Password reset successfully")

    @as_result("get user", message="Failed to get user information")
    async def get_user(self, user_id: int) -> Result[UserDto]:
        user = await self.repo.get_active_by_id(user_id)
        if user is None:
            return Result.fail("User not found")
        return Result.ok(_user_dto(user))

    @as_result("change password", message="Failed to change password. Please try again.")
    async def change_password(self, user_id: int, body: ChangePasswordRequest) -> Result[None]:
        user = await self.repo.get_active_by_id(user_id)
        if user is None:
            return Result.fail("User not found")
        if not verify_password(body.old_password, user["password_hash"]):
            return Result.fail("Old password is incorrect")

        if await self.repo.update_password(user_id, get_password_hash(body.new_password)) <= 0:
            return Result.fail("Failed to change password")
        return Result.ok(message="Password changed successfully")
