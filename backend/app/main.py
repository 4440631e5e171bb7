"""
AssetTrack — FastAPI ASGI Entry Point
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.v1.router import api_router
from app.config import get_settings
from app.core.auth_middleware import JWTAuthMiddleware
from app.core.error_handlers import register_error_handlers
from app.core.rate_limit import RateLimitMiddleware
from app.core.redis import close_redis
from app.db.session import engine

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Dispose the DB pool and Redis client on shutdown."""
    logger.info("AssetTrack API starting (%s)", get_settings().ENVIRONMENT)
    yield
    await close_redis()
    await engine.dispose()


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title="AssetTrack",
        description="Asset tracking: employees, categories, assets and their hand-overs",
        version="0.1.0",
        docs_url="/api/v1/docs",
        redoc_url="/api/v1/redoc",
        openapi_url="/api/v1/openapi.json",
        lifespan=lifespan,
    )
    register_error_handlers(app)

    if settings.RATE_LIMIT_ENABLED:
        app.add_middleware(RateLimitMiddleware, limit=settings.RATE_LIMIT_PER_MINUTE)
    app.add_middleware(JWTAuthMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router, prefix="/api/v1")

    @app.get("/health")
    async def health():
        """Health check for load balancers and Docker."""
        return {"status": "ok", "service": "assettrack"}

    return app


app = create_app()
