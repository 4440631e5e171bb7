"""AssetTrack — Fund endpoints."""
from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.deps import AuthUser, get_fund_service
from app.core.responses import handle_result
from app.schemas.common import Result
from app.schemas.fund import FundRead
from app.services.fund_service import FundService

router = APIRouter()


@router.get("", response_model=Result[list[FundRead]])
async def list_funds(
    user: AuthUser,
    svc: Annotated[FundService, Depends(get_fund_service)],
):
    return handle_result(await svc.get_all())
