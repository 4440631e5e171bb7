"""AssetTrack — Asset endpoints."""
from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from app.api.deps import AuthUser, PageParams, get_asset_service
from app.core.responses import handle_result
from app.schemas.asset import AssetCreate, AssetDetail, AssetListItem, AssetUpdate
from app.schemas.common import PaginatedResult, Result
from app.services.asset_service import AssetService

router = APIRouter()

Service = Annotated[AssetService, Depends(get_asset_service)]


@router.get("/grid", response_model=PaginatedResult[AssetListItem])
async def asset_grid(
    user: AuthUser,
    svc: Service,
    paging: PageParams,
    search: str | None = Query(None),
):
    """One page of active assets, filtered by name, code or serial number."""
    return handle_result(await svc.get_grid(paging.page, paging.page_size, search))


@router.get("/{asset_id}", response_model=Result[AssetDetail])
async def get_asset(asset_id: int, user: AuthUser, svc: Service):
    return handle_result(await svc.get_by_id(asset_id))


@router.get("", response_model=Result[list[AssetListItem]])
async def list_assets(user: AuthUser, svc: Service):
    """Active assets with category and current holder names."""
    return handle_result(await svc.get_all())


@router.post("", response_model=Result[AssetDetail], status_code=status.HTTP_201_CREATED)
async def create_asset(body: AssetCreate, user: AuthUser, svc: Service):
    """Register an asset. New assets start out Available with no holder."""
    return handle_result(await svc.create(body, created_by=user.email), status.HTTP_201_CREATED)


@router.put("/{asset_id}", response_model=Result[AssetDetail])
async def update_asset(asset_id: int, body: AssetUpdate, user: AuthUser, svc: Service):
    return handle_result(await svc.update(asset_id, body))


@router.delete("/{asset_id}", response_model=Result[None])
async def delete_asset(asset_id: int, user: AuthUser, svc: Service):
    return handle_result(await svc.delete(asset_id))
