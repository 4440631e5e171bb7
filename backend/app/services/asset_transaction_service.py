"""AssetTrack — AssetTransactionService."""
from datetime import datetime, timezone

from app.repositories.asset_transaction_repository import AssetTransactionRepository
from app.schemas.asset_transaction import (
    AssetTransactionCreate,
    AssetTransactionRead,
    AssetTransactionUpdate,
)
from app.schemas.common import PaginatedResult, Result
from app.services.base import as_result, page_offset


class AssetTransactionService:
    """Records of assets moving between employees."""

    def __init__(self, repo: AssetTransactionRepository):
        self.repo = repo

    @as_result("get transaction")
    async def get_by_id(self, transaction_id: int) -> Result[AssetTransactionRead]:
        row = await self.repo.get_by_id(transaction_id)
        if row is None:
            return Result.fail("Transaction not found")
        return Result.ok(AssetTransactionRead.model_validate(row))

    @as_result("get transactions")
    async def get_all(self) -> Result[list[AssetTransactionRead]]:
        rows = await self.repo.list_all()
        return Result.ok([AssetTransactionRead.model_validate(r) for r in rows])

    @as_result("get transactions by asset ID", result_cls=PaginatedResult)
    async def get_by_asset(
        self,
        asset_id: int,
        page: int,
        page_size: int,
    ) -> PaginatedResult[AssetTransactionRead]:
        """History of one asset, newest first."""
        total = await self.repo.count_for_asset(asset_id)
        rows = await self.repo.list_for_asset(asset_id, page_offset(page, page_size), page_size)
        items = [AssetTransactionRead.model_validate(r) for r in rows]
        return PaginatedResult.ok(items, total_count=total, page=page, page_size=page_size)

    @as_result("create transaction")
    async def create(self, body: AssetTransactionCreate, created_by: str) -> Result[AssetTransactionRead]:
        now = datetime.now(timezone.utc)
        values = body.model_dump()
        if values["transaction_date"] is None:
            values["transaction_date"] = now
        values["created_by"] = created_by
        values["created_date"] = now

        transaction_id = await self.repo.insert(values)
        row = await self.repo.get_by_id(transaction_id)
        if row is None:
            return Result.fail("Failed to retrieve created transaction")
        return Result.ok(AssetTransactionRead.model_validate(row), "Transaction created successfully")

    @as_result("update transaction")
    async def update(self, transaction_id: int, body: AssetTransactionUpdate) -> Result[AssetTransactionRead]:
        if await self.repo.get_by_id(transaction_id) is None:
            return Result.fail("Transaction not found")

        affected = await self.repo.update(transaction_id, body.model_dump())
        if affected <= 0:
            return Result.fail("Failed to update transaction")

        row = await self.repo.get_by_id(transaction_id)
        return Result.ok(AssetTransactionRead.model_validate(row), "Transaction updated successfully")

    @as_result("delete transaction")
    async def delete(self, transaction_id: int) -> Result[None]:
        if await self.repo.get_by_id(transaction_id) is None:
            return Result.fail("Transaction not found")

        affected = await self.repo.delete(transaction_id)
        if affected <= 0:
            return Result.fail("Failed to delete transaction")
        return Result.ok(message="Transaction deleted successfully")
