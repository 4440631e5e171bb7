"""AssetTrack — CategoryService."""
from datetime import datetime, timezone

from app.repositories.category_repository import CategoryRepository
from app.schemas.category import CategoryCreate, CategoryDetail, CategoryListItem, CategoryUpdate
from app.schemas.common import Result
from app.services.base import as_result


class CategoryService:
    """Asset categories: CRUD with an in-use guard on delete."""

    def __init__(self, repo: CategoryRepository):
        self.repo = repo

    @as_result("get category")
    async def get_by_id(self, category_id: int) -> Result[CategoryDetail]:
        row = await self.repo.get_by_id(category_id)
        if row is None:
            return Result.fail("Category not found")
        return Result.ok(CategoryDetail.model_validate(row))

    @as_result("get categories")
    async def get_all(self) -> Result[list[CategoryListItem]]:
        rows = await self.repo.list_all()
        return Result.ok([CategoryListItem.model_validate(r) for r in rows])

    @as_result("get active categories")
    async def get_active(self) -> Result[list[CategoryListItem]]:
        rows = await self.repo.list_active()
        return Result.ok([CategoryListItem.model_validate(r) for r in rows])

    @as_result("create category")
    async def create(self, body: CategoryCreate, created_by: str) -> Result[CategoryDetail]:
        values = body.model_dump()
        values["is_active"] = True
        values["created_by"] = created_by
        values["created_date"] = datetime.now(timezone.utc)

        row = await self.repo.insert(values)
        if row is None:
            return Result.fail("Failed to retrieve created category")
        return Result.ok(CategoryDetail.model_validate(row), "Category created successfully")

    @as_result("update category")
    async def update(self, category_id: int, body: CategoryUpdate) -> Result[CategoryDetail]:
        if await self.repo.get_by_id(category_id) is None:
            return Result.fail("Category not found")

        row = await self.repo.update(category_id, body.model_dump())
        if row is None:
            return Result.fail("Failed to update category")
        return Result.ok(CategoryDetail.model_validate(row), "Category updated successfully")

    @as_result("delete category")
    async def delete(self, category_id: int) -> Result[None]:
        if await self.repo.get_by_id(category_id) is None:
            return Result.fail("Category not found")
        if await self.repo.count_assets(category_id) > 0:
            return Result.fail("Category is in use and cannot be deleted")

        affected = await self.repo.delete(category_id)
        if affected <= 0:
            return Result.fail("Failed to delete category")
        return Result.ok(message="Category deleted successfully")
