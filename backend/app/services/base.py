"""AssetTrack — Service boundary helpers."""
import functools
import logging
import uuid
from datetime import datetime

from sqlalchemy.ext.asyncio import AsyncSession

from app.config import get_settings
from app.db.session import mark_rollback_only
from app.schemas.common import Result

logger = logging.getLogger(__name__)


def _abandon_writes(service) -> None:
    db = getattr(getattr(service, "repo", None), "db", None)
    if isinstance(db, AsyncSession):
        mark_rollback_only(db)


def as_result(action: str, result_cls: type[Result] = Result, message: str | None = None):
    """Decorator: turn any exception raised by a service method into a failed result.

    Writes the method made before raising are rolled back with the request's
    transaction. The failure message is ``"Failed to <action>"`` (with the
    exception text appended when ``DEBUG`` is on) unless a fixed ``message``
    is given.
    """

    def decorator(func):
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except Exception as exc:
                logger.error("Failed to %s: %s", action, exc, exc_info=True)
                if args:
                    _abandon_writes(args[0])
                if message:
                    return result_cls.fail(message)
                if get_settings().DEBUG:
                    return result_cls.fail(f"Failed to {action}: {exc}")
                return result_cls.fail(f"Failed to {action}")

        return wrapper

    return decorator


def generate_code(prefix: str, length: int) -> str:
    """Human-readable record code, e.g. ``AST-20260118-3F9A1C2B``."""
    return f"{prefix}-{datetime.now():%Y%m%d}-{uuid.uuid4().hex[:length].upper()}"


def page_offset(page: int, page_size: int) -> int:
    return (page - 1) * page_size
