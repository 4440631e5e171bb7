"""AssetTrack — FundService."""
from app.repositories.fund_repository import FundRepository
from app.schemas.common import Result
from app.schemas.fund import FundRead
from app.services.base import as_result


class FundService:

    def __init__(self, repo: FundRepository):
        self.repo = repo

    @as_result("get funds")
    async def get_all(self) -> Result[list[FundRead]]:
        rows = await self.repo.list_all()
        return Result.ok([FundRead.model_validate(r) for r in rows])
