"""Pytest configuration for the AssetTrack test suite."""
import os


def _ensure_test_env() -> None:
    """Seed settings before app.config is imported."""
    os.environ.setdefault("ENVIRONMENT", "test")
    os.environ.setdefault("DEBUG", "false")
    os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-for-assettrack")
    os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
    os.environ.setdefault("SMTP_HOST", "")
    os.environ.setdefault("SMTP_USER", "")


_ensure_test_env()

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from app.core.security import access_token_expiry, create_access_token  # noqa: E402
from app.main import app  # noqa: E402

TEST_USER_ID = 7
TEST_USER_EMAIL = "tester@company.com"


@pytest.fixture
def client():
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers() -> dict[str, str]:
    token = create_access_token(
        subject=TEST_USER_ID,
        email=TEST_USER_EMAIL,
        expires_at=access_token_expiry(),
        extra_claims={"name": "Test User", "role": "Admin"},
    )
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def override():
    """Replace a dependency for the duration of one test."""

    def _override(dependency, value):
        app.dependency_overrides[dependency] = lambda: value
        return value

    return _override
