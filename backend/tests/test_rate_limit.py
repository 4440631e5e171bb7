from unittest.mock import AsyncMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from starlette.requests import Request

from app.core import rate_limit
from app.core.rate_limit import RateLimitMiddleware, caller_id

LIMIT = 5
TOKEN = "header.payload.signature-0123456789abcdef"


@pytest.fixture
def redis(monkeypatch):
    fake = AsyncMock()
    fake.incr.return_value = 1
    fake.ttl.return_value = 60
    monkeypatch.setattr(rate_limit, "get_redis", AsyncMock(return_value=fake))
    return fake


@pytest.fixture
def limited_client():
    app = FastAPI()
    app.add_middleware(RateLimitMiddleware, limit=LIMIT)

    @app.get("/ping")
    async def ping():
        return {"pong": True}

    return TestClient(app)


def _request(headers: dict[str, str] | None = None, client=("10.0.0.8", 51000)) -> Request:
    return Request(
        {
            "type": "http",
            "method": "GET",
            "path": "/",
            "headers": [(k.lower().encode(), v.encode()) for k, v in (headers or {}).items()],
            "client": client,
        }
    )


def test_over_limit_returns_429_envelope(redis, limited_client) -> None:
    redis.incr.return_value = LIMIT + 1

    resp = limited_client.get("/ping")

    assert resp.status_code == 429
    assert resp.json() == {
        "success": False,
        "message": "Too many requests. Please slow down.",
        "data": None,
        "errors": [],
    }
    assert resp.headers["Retry-After"] == "60"


def test_under_limit_passes_with_headers(redis, limited_client) -> None:
    redis.incr.return_value = 2
    redis.ttl.return_value = 30

    resp = limited_client.get("/ping")

    assert resp.status_code == 200
    assert resp.json() == {"pong": True}
    assert resp.headers["X-RateLimit-Limit"] == "5"
    assert resp.headers["X-RateLimit-Remaining"] == "3"
    assert int(resp.headers["X-RateLimit-Reset"]) > 0
    redis.expire.assert_not_awaited()


def test_first_request_starts_window(redis, limited_client) -> None:
    resp = limited_client.get("/ping", headers={"Authorization": f"Bearer {TOKEN}"})

    assert resp.headers["X-RateLimit-Remaining"] == "4"
    redis.expire.assert_awaited_once_with(f"rl:tok:{TOKEN[-20:]}", 60)


def test_last_allowed_request_is_not_blocked(redis, limited_client) -> None:
    redis.incr.return_value = LIMIT

    resp = limited_client.get("/ping")

    assert resp.status_code == 200
    assert resp.headers["X-RateLimit-Remaining"] == "0"


def test_caller_id_uses_token_tail() -> None:
    assert caller_id(_request({"Authorization": f"Bearer {TOKEN}"})) == f"tok:{TOKEN[-20:]}"


def test_caller_id_falls_back_to_client_ip() -> None:
    assert caller_id(_request()) == "ip:10.0.0.8"
    assert caller_id(_request({"Authorization": "Basic abc"})) == "ip:10.0.0.8"


def test_caller_id_without_client() -> None:
    assert caller_id(_request(client=None)) == "ip:unknown"
