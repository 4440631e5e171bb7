from contextlib import asynccontextmanager
from unittest.mock import AsyncMock, MagicMock, Mock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from app.db import session as db_session
from app.repositories.asset_transaction_repository import AssetTransactionRepository
from app.repositories.user_repository import UserRepository
from app.schemas.asset_transaction import AssetTransactionCreate
from app.schemas.user import ResetPasswordWithTokenRequest
from app.services.asset_transaction_service import AssetTransactionService
from app.services.auth_service import AuthService

USER = {
    "user_id": 7,
    "email": "ann@company.com",
    "full_name": "Ann Lee",
    "password_hash": "x",
    "role_id": "Admin",
    "is_active": True,
}


@pytest.fixture
def session(monkeypatch):
    fake = MagicMock(spec=AsyncSession)
    fake.info = {}
    fake.commit = AsyncMock()
    fake.rollback = AsyncMock()

    @asynccontextmanager
    async def maker():
        yield fake

    monkeypatch.setattr(db_session, "async_session_maker", maker)
    return fake


async def _finish(gen) -> None:
    with pytest.raises(StopAsyncIteration):
        await gen.__anext__()


def _reset_body() -> ResetPasswordWithTokenRequest:
    return ResetPasswordWithTokenRequest(email="ann@company.com", reset_token="123456", new_password="n3w-pass")


async def test_failed_reset_rolls_back_password_change(session) -> None:
    gen = db_session.get_db()
    db = await gen.__anext__()
    repo = UserRepository(db)
    repo.get_by_reset_token = AsyncMock(return_value=USER)
    repo.update_password = AsyncMock(return_value=1)
    repo.clear_reset_token = AsyncMock(side_effect=RuntimeError("deadlock detected"))

    result = await AuthService(repo).reset_password_with_token(_reset_body())
    await _finish(gen)

    assert not result.success
    repo.update_password.assert_awaited_once()
    session.commit.assert_not_awaited()
    session.rollback.assert_awaited_once()


async def test_successful_reset_commits(session) -> None:
    gen = db_session.get_db()
    db = await gen.__anext__()
    repo = UserRepository(db)
    repo.get_by_reset_token = AsyncMock(return_value=USER)
    repo.update_password = AsyncMock(return_value=1)
    repo.clear_reset_token = AsyncMock(return_value=1)

    result = await AuthService(repo).reset_password_with_token(_reset_body())
    await _finish(gen)

    assert result.success
    session.commit.assert_awaited_once()
    session.rollback.assert_not_awaited()


async def test_expected_failure_result_still_commits(session) -> None:
    gen = db_session.get_db()
    db = await gen.__anext__()
    repo = UserRepository(db)
    repo.get_by_reset_token = AsyncMock(return_value=None)

    result = await AuthService(repo).reset_password_with_token(_reset_body())
    await _finish(gen)

    assert result.message == "Invalid or expired reset token"
    session.commit.assert_awaited_once()


async def test_forgot_password_send_failure_discards_stored_code(session) -> None:
    gen = db_session.get_db()
    db = await gen.__anext__()
    repo = UserRepository(db)
    repo.get_by_email = AsyncMock(return_value=USER)
    repo.update_reset_token = AsyncMock(return_value=1)
    sender = Mock(side_effect=ConnectionError("broker down"))

    result = await AuthService(repo, send_reset_email=sender).forgot_password("ann@company.com")
    await _finish(gen)

    assert not result.success
    repo.update_reset_token.assert_awaited_once()
    session.commit.assert_not_awaited()
    session.rollback.assert_awaited_once()


async def test_transaction_insert_rolled_back_when_reread_fails(session) -> None:
    gen = db_session.get_db()
    db = await gen.__anext__()
    repo = AssetTransactionRepository(db)
    repo.insert = AsyncMock(return_value=12)
    repo.get_by_id = AsyncMock(side_effect=RuntimeError("connection reset"))

    result = await AssetTransactionService(repo).create(AssetTransactionCreate(asset_id=3), created_by="a@company.com")
    await _finish(gen)

    assert not result.success
    assert result.message == "Failed to create transaction"
    repo.insert.assert_awaited_once()
    session.commit.assert_not_awaited()
    session.rollback.assert_awaited_once()


async def test_unhandled_error_rolls_back_and_propagates(session) -> None:
    gen = db_session.get_db()
    await gen.__anext__()

    with pytest.raises(RuntimeError):
        await gen.athrow(RuntimeError("boom"))

    session.commit.assert_not_awaited()
    session.rollback.assert_awaited_once()
