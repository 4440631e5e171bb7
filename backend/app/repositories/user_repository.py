"""AssetTrack — User repository: directory listing plus the queries login needs."""
from datetime import datetime

from app.repositories.base import BaseRepository

USER_COLUMNS = """
    user_id, email, full_name, password_hash, role_id, is_active,
    reset_token, reset_token_expiry, last_login, last_password_change
"""


class UserRepository(BaseRepository):

    async def list_all(self) -> list[dict]:
        return await self.fetch_all(
            "SELECT user_id, full_name, email, role_id, is_active FROM users ORDER BY user_id"
        )

    async def get_by_email(self, email: str) -> dict | None:
        """Active or not; the caller decides what an inactive account means."""
        return await self.fetch_one(
            f"SELECT {USER_COLUMNS} FROM users WHERE lower(email) = lower(:email)",
            {"email": email},
        )

    async def get_active_by_id(self, user_id: int) -> dict | None:
        return await self.fetch_one(
            f"SELECT {USER_COLUMNS} FROM users WHERE user_id = :user_id AND is_active = TRUE",
            {"user_id": user_id},
        )

    async def get_by_reset_token(self, email: str, reset_token: str, now: datetime) -> dict | None:
        return await self.fetch_one(
            f"""
            SELECT {USER_COLUMNS} FROM users
            WHERE lower(email) = lower(:email)
              AND reset_token = :reset_token
              AND reset_token_expiry > :now
              AND is_active = TRUE
            """,
            {"email": email, "reset_token": reset_token, "now": now},
        )

    async def update_last_login(self, user_id: int, now: datetime) -> int:
        return await self.execute(
            "UPDATE users SET last_login = :now WHERE user_id = :user_id",
            {"user_id": user_id, "now": now},
        )

    async def update_reset_token(self, user_id: int, reset_token: str, expiry: datetime) -> int:
        return await self.execute(
            """
            UPDATE users SET reset_token = :reset_token,
                             reset_token_expiry = :expiry,
                             modified_date = now()
            WHERE user_id = :user_id AND is_active = TRUE
            """,
            {"user_id": user_id, "reset_token": reset_token, "expiry": expiry},
        )

    async def update_password(self, user_id: int, password_hash: str) -> int:
        """Store a new hash. Any outstanding reset code is invalidated."""
        return await self.execute(
            """
            UPDATE users SET password_hash = :password_hash,
                             reset_token = NULL,
                             reset_token_expiry = NULL,
                             last_password_change = now(),
                             modified_date = now()
            WHERE user_id = :user_id AND is_active = TRUE
            """,
            {"user_id": user_id, "password_hash": password_hash},
        )

    async def clear_reset_token(self, user_id: int) -> int:
        return await self.execute(
            """
            UPDATE users SET reset_token = NULL,
                             reset_token_expiry = NULL,
                             modified_date = now()
            WHERE user_id = :user_id
            """,
            {"user_id": user_id},
        )

    async def insert(self, values: dict) -> int:
        return await self.fetch_scalar(
            """
            INSERT INTO users (email, full_name, password_hash, role_id, is_active, created_date)
            VALUES (:email, :full_name, :password_hash, :role_id, TRUE, now())
            RETURNING user_id
            """,
            values,
        )
