"""AssetTrack — Category endpoints."""
from typing import Annotated

from fastapi import APIRouter, Depends, status

from app.api.deps import AuthUser, get_category_service
from app.core.responses import handle_result
from app.schemas.category import CategoryCreate, CategoryDetail, CategoryListItem, CategoryUpdate
from app.schemas.common import Result
from app.services.category_service import CategoryService

router = APIRouter()

Service = Annotated[CategoryService, Depends(get_category_service)]


@router.get("/active", response_model=Result[list[CategoryListItem]])
async def list_active_categories(user: AuthUser, svc: Service):
    return handle_result(await svc.get_active())


@router.get("/{category_id}", response_model=Result[CategoryDetail])
async def get_category(category_id: int, user: AuthUser, svc: Service):
    return handle_result(await svc.get_by_id(category_id))


@router.get("", response_model=Result[list[CategoryListItem]])
async def list_categories(user: AuthUser, svc: Service):
    return handle_result(await svc.get_all())


@router.post("", response_model=Result[CategoryDetail], status_code=status.HTTP_201_CREATED)
async def create_category(body: CategoryCreate, user: AuthUser, svc: Service):
    return handle_result(await svc.create(body, created_by=user.email), status.HTTP_201_CREATED)


@router.put("/{category_id}", response_model=Result[CategoryDetail])
async def update_category(category_id: int, body: CategoryUpdate, user: AuthUser, svc: Service):
    return handle_result(await svc.update(category_id, body))


@router.delete("/{category_id}", response_model=Result[None])
async def delete_category(category_id: int, user: AuthUser, svc: Service):
    """Hard delete; refused while any active asset uses the category."""
    return handle_result(await svc.delete(category_id))
