"""AssetTrack — User endpoints."""
from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.deps import AuthUser, get_user_service
from app.core.responses import handle_result
from app.schemas.common import Result
from app.schemas.user import UserRead
from app.services.user_service import UserService

router = APIRouter()


@router.get("", response_model=Result[list[UserRead]])
async def list_users(
    user: AuthUser,
    svc: Annotated[UserService, Depends(get_user_service)],
):
    """All application users."""
    return handle_result(await svc.get_all())
