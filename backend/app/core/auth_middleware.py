"""AssetTrack — JWT auth middleware: extracts the bearer token, sets request.state.user."""
import logging
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from app.api.deps import CurrentUser
from app.core.security import decode_token

logger = logging.getLogger(__name__)


class JWTAuthMiddleware(BaseHTTPMiddleware):
    """Decode ``Authorization: Bearer`` and populate request.state.user.

    Requests without a valid token pass through with ``user = None``;
    ``require_auth`` rejects them on protected routes.
    """

    PUBLIC_PATHS = {
        "/api/v1/auth/login",
        "/api/v1/auth/forgot-password",
        "/api/v1/auth/reset-password-with-token",
        "/health",
        "/api/v1/docs",
        "/api/v1/redoc",
        "/api/v1/openapi.json",
    }

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request.state.user = None

        path = request.url.path
        if (
            path in self.PUBLIC_PATHS
            or path.startswith("/api/v1/docs")
            or path.startswith("/api/v1/redoc")
        ):
            return await call_next(request)

        auth = request.headers.get("Authorization", "")
        if auth.startswith("Bearer "):
            payload = decode_token(auth[7:].strip())
            if payload is None:
                logger.warning("Rejected bearer token on %s", path)
            elif payload.get("type") == "access" and payload.get("sub"):
                try:
                    request.state.user = CurrentUser(
                        id=int(payload["sub"]),
                        email=payload.get("email") or "unknown",
                        full_name=payload.get("name"),
                        role_id=payload.get("role"),
                    )
                except ValueError:
                    logger.warning("Malformed subject claim on %s", path)

        return await call_next(request)
