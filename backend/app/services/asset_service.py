"""AssetTrack — AssetService: register, update, retire and page through assets."""
from datetime import datetime, timezone

from app.repositories.asset_repository import AssetRepository
from app.schemas.asset import AssetCreate, AssetDetail, AssetListItem, AssetUpdate
from app.schemas.common import PaginatedResult, Result
from app.services.base import as_result, generate_code, page_offset

STATUS_AVAILABLE = "Available"


class AssetService:
    """Asset CRUD. Only active assets are visible; delete is a soft delete."""

    def __init__(self, repo: AssetRepository):
        self.repo = repo

    @as_result("get asset")
    async def get_by_id(self, asset_id: int) -> Result[AssetDetail]:
        row = await self.repo.get_by_id(asset_id)
        if row is None or not row["is_active"]:
            return Result.fail("Asset not found or inactive")
        return Result.ok(AssetDetail.model_validate(row))

    @as_result("get assets")
    async def get_all(self) -> Result[list[AssetListItem]]:
        rows = await self.repo.list_active()
        return Result.ok([AssetListItem.model_validate(r) for r in rows])

    @as_result("get grid data", result_cls=PaginatedResult)
    async def get_grid(
        self,
        page: int,
        page_size: int,
        search: str | None = None,
    ) -> PaginatedResult[AssetListItem]:
        total = await self.repo.count_grid(search)
        rows = await self.repo.list_grid(page_offset(page, page_size), page_size, search)
        items = [AssetListItem.model_validate(r) for r in rows]
        return PaginatedResult.ok(items, total_count=total, page=page, page_size=page_size)

    @as_result("create asset")
    async def create(self, body: AssetCreate, created_by: str) -> Result[AssetDetail]:
        values = body.model_dump()
        if not values["asset_code"]:
            values["asset_code"] = generate_code("AST", 8)
        values["status"] = STATUS_AVAILABLE
        values["current_holder_id"] = None
        values["is_active"] = True
        values["created_by"] = created_by
        values["created_date"] = datetime.now(timezone.utc)

        asset_id = await self.repo.insert(values)
        row = await self.repo.get_by_id(asset_id)
        if row is None:
            return Result.fail("Failed to retrieve created asset")
        return Result.ok(AssetDetail.model_validate(row), "Asset created successfully")

    @as_result("update asset")
    async def update(self, asset_id: int, body: AssetUpdate) -> Result[AssetDetail]:
        if await self.repo.get_by_id(asset_id) is None:
            return Result.fail("Asset not found")

        affected = await self.repo.update(asset_id, body.model_dump())
        if affected <= 0:
            return Result.fail("Failed to update asset")

        row = await self.repo.get_by_id(asset_id)
        return Result.ok(AssetDetail.model_validate(row), "Asset updated successfully")

    @as_result("delete asset")
    async def delete(self, asset_id: int) -> Result[None]:
        if await self.repo.get_by_id(asset_id) is None:
            return Result.fail("Asset not found")

        await self.repo.deactivate(asset_id)
        return Result.ok(message="Asset deleted successfully")
