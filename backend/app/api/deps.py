"""AssetTrack — FastAPI dependencies (auth, DB, paging, services)."""
from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, HTTPException, Query, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import get_settings
from app.db.session import get_db
from app.repositories.asset_repository import AssetRepository
from app.repositories.asset_transaction_repository import AssetTransactionRepository
from app.repositories.category_repository import CategoryRepository
from app.repositories.employee_repository import EmployeeRepository
from app.repositories.fund_repository import FundRepository
from app.repositories.report_repository import ReportRepository
from app.repositories.user_repository import UserRepository
from app.services.asset_service import AssetService
from app.services.asset_transaction_service import AssetTransactionService
from app.services.auth_service import AuthService
from app.services.category_service import CategoryService
from app.services.employee_service import EmployeeService
from app.services.fund_service import FundService
from app.services.report_service import ReportService
from app.services.user_service import UserService

DbSession = Annotated[AsyncSession, Depends(get_db)]


class CurrentUser:
    """User identity from the JWT, set on request.state by the auth middleware."""

    def __init__(
        self,
        id: int,
        email: str,
        full_name: str | None = None,
        role_id: str | None = None,
    ):
        self.id = id
        self.email = email
        self.full_name = full_name
        self.role_id = role_id


async def require_auth(request: Request) -> CurrentUser:
    """Require authenticated user. Raise 401 if not logged in."""
    user = getattr(request.state, "user", None)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    return user


AuthUser = Annotated[CurrentUser, Depends(require_auth)]


# ── Paging ──────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Paging:
    page: int
    page_size: int


def clamp_paging(page: int, page_size: int) -> Paging:
    """Out-of-range values fall back to defaults instead of failing the request."""
    settings = get_settings()
    if page < 1:
        page = 1
    if page_size < 1 or page_size > settings.MAX_PAGE_SIZE:
        page_size = settings.DEFAULT_PAGE_SIZE
    return Paging(page=page, page_size=page_size)


async def get_paging(
    page: int = Query(1),
    page_size: int = Query(10, alias="pageSize"),
) -> Paging:
    return clamp_paging(page, page_size)


PageParams = Annotated[Paging, Depends(get_paging)]


# ── Services ────────────────────────────────────────────────────────────────

async def get_employee_service(db: DbSession) -> EmployeeService:
    return EmployeeService(EmployeeRepository(db))


async def get_category_service(db: DbSession) -> CategoryService:
    return CategoryService(CategoryRepository(db))


async def get_asset_service(db: DbSession) -> AssetService:
    return AssetService(AssetRepository(db))


async def get_asset_transaction_service(db: DbSession) -> AssetTransactionService:
    return AssetTransactionService(AssetTransactionRepository(db))


async def get_fund_service(db: DbSession) -> FundService:
    return FundService(FundRepository(db))


async def get_user_service(db: DbSession) -> UserService:
    return UserService(UserRepository(db))


async def get_report_service(db: DbSession) -> ReportService:
    return ReportService(ReportRepository(db))


async def get_auth_service(db: DbSession) -> AuthService:
    return AuthService(UserRepository(db))
