"""AssetTrack — Rate limiting (Redis fixed window)."""
import logging
import time
from typing import Callable

from fastapi import Request, Response, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from app.config import get_settings
from app.core.redis import get_redis, rate_limit_key
from app.core.responses import envelope
from app.schemas.common import Result

logger = logging.getLogger(__name__)

WINDOW = 60


def caller_id(request: Request) -> str:
    """Bearer-token prefix for signed-in callers, client IP otherwise."""
    auth_header = request.headers.get("Authorization", "")
    if auth_header.startswith("Bearer "):
        return "tok:" + auth_header[7:].strip()[-20:]
    return "ip:" + (request.client.host if request.client else "unknown")


class RateLimitMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, limit: int | None = None):
        super().__init__(app)
        self.limit = limit or get_settings().RATE_LIMIT_PER_MINUTE

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        r = await get_redis()
        key = rate_limit_key(caller_id(request))

        count = await r.incr(key)
        if count == 1:
            await r.expire(key, WINDOW)

        if count > self.limit:
            logger.warning("Rate limit exceeded for %s", key)
            return JSONResponse(
                status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                content=envelope(Result.fail("Too many requests. Please slow down.")),
                headers={"Retry-After": str(WINDOW)},
            )

        response = await call_next(request)

        response.headers["X-RateLimit-Limit"] = str(self.limit)
        response.headers["X-RateLimit-Remaining"] = str(max(0, self.limit - count))
        ttl = await r.ttl(key)
        response.headers["X-RateLimit-Reset"] = str(int(time.time()) + (ttl if ttl > 0 else WINDOW))
        return response
