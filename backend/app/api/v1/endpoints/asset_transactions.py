"""AssetTrack — Asset transaction endpoints."""
from typing import Annotated

from fastapi import APIRouter, Depends, status

from app.api.deps import AuthUser, PageParams, get_asset_transaction_service
from app.core.responses import handle_result
from app.schemas.asset_transaction import (
    AssetTransactionCreate,
    AssetTransactionRead,
    AssetTransactionUpdate,
)
from app.schemas.common import PaginatedResult, Result
from app.services.asset_transaction_service import AssetTransactionService

router = APIRouter()

Service = Annotated[AssetTransactionService, Depends(get_asset_transaction_service)]


@router.get("/asset/{asset_id}", response_model=PaginatedResult[AssetTransactionRead])
async def list_transactions_for_asset(asset_id: int, user: AuthUser, svc: Service, paging: PageParams):
    """Transaction history of one asset, newest first."""
    return handle_result(await svc.get_by_asset(asset_id, paging.page, paging.page_size))


@router.get("/{transaction_id}", response_model=Result[AssetTransactionRead])
async def get_transaction(transaction_id: int, user: AuthUser, svc: Service):
    return handle_result(await svc.get_by_id(transaction_id))


@router.get("", response_model=Result[list[AssetTransactionRead]])
async def list_transactions(user: AuthUser, svc: Service):
    return handle_result(await svc.get_all())


@router.post("", response_model=Result[AssetTransactionRead], status_code=status.HTTP_201_CREATED)
async def create_transaction(body: AssetTransactionCreate, user: AuthUser, svc: Service):
    return handle_result(await svc.create(body, created_by=user.email), status.HTTP_201_CREATED)


@router.put("/{transaction_id}", response_model=Result[AssetTransactionRead])
async def update_transaction(
    transaction_id: int,
    body: AssetTransactionUpdate,
    user: AuthUser,
    svc: Service,
):
    return handle_result(await svc.update(transaction_id, body))


@router.delete("/{transaction_id}", response_model=Result[None])
async def delete_transaction(transaction_id: int, user: AuthUser, svc: Service):
    return handle_result(await svc.delete(transaction_id))
