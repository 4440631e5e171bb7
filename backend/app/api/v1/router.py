"""AssetTrack — API v1 router aggregation."""
from fastapi import APIRouter

from app.api.v1.endpoints import (
    asset_transactions,
    assets,
    auth,
    categories,
    employees,
    funds,
    reports,
    users,
)

api_router = APIRouter()

api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(employees.router, prefix="/employees", tags=["employees"])
api_router.include_router(categories.router, prefix="/categories", tags=["categories"])
api_router.include_router(assets.router, prefix="/assets", tags=["assets"])
api_router.include_router(asset_transactions.router, prefix="/asset-transactions", tags=["asset-transactions"])
api_router.include_router(funds.router, prefix="/funds", tags=["funds"])
api_router.include_router(reports.router, prefix="/reports", tags=["reports"])
