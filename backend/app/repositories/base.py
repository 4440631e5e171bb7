"""AssetTrack — Base repository: literal SQL over an AsyncSession."""
import logging
from typing import Any

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger(__name__)


class BaseRepository:
    """Runs SQL strings and returns plain dict rows.

    Each statement runs in a SAVEPOINT so a failure the service turns into a
    failed Result leaves the request transaction usable.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _execute(self, sql: str, params: dict[str, Any] | None = None):
        try:
            async with self.db.begin_nested():
                return await self.db.execute(text(sql), params or {})
        except Exception:
            logger.error("SQL failed: %s", " ".join(sql.split()), exc_info=True)
            raise

    async def fetch_all(self, sql: str, params: dict[str, Any] | None = None) -> list[dict]:
        result = await self._execute(sql, params)
        return [dict(row) for row in result.mappings().all()]

    async def fetch_one(self, sql: str, params: dict[str, Any] | None = None) -> dict | None:
        result = await self._execute(sql, params)
        row = result.mappings().first()
        return dict(row) if row is not None else None

    async def fetch_scalar(self, sql: str, params: dict[str, Any] | None = None) -> Any:
        result = await self._execute(sql, params)
        return result.scalar_one()

    async def execute(self, sql: str, params: dict[str, Any] | None = None) -> int:
        """Run a write statement and return the affected row count."""
        result = await self._execute(sql, params)
        return result.rowcount


def search_pattern(search: str | None) -> str | None:
    """ILIKE pattern for a free-text search box, or None when the box is empty."""
    if search is None or not search.strip():
        return None
    escaped = search.strip().replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"
