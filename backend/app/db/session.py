"""AssetTrack — Async SQLAlchemy session and engine."""
from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.config import get_settings

settings = get_settings()

ROLLBACK_ONLY = "rollback_only"

engine = create_async_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,
    pool_size=5,
    max_overflow=10,
    echo=settings.DEBUG,
)

async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


def mark_rollback_only(session: AsyncSession) -> None:
    """Make get_db roll the request's transaction back instead of committing it."""
    session.info[ROLLBACK_ONLY] = True


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Dependency: yield async DB session, commit on success, roll back on error."""
    async with async_session_maker() as session:
        try:
            yield session
            if session.info.get(ROLLBACK_ONLY):
                await session.rollback()
            else:
                await session.commit()
        except Exception:
            await session.rollback()
            raise
