from unittest.mock import AsyncMock

from app.schemas.category import CategoryCreate, CategoryUpdate
from app.services.category_service import CategoryService


def _row(**overrides) -> dict:
    row = {"category_id": 3, "category_name": "Laptops", "description": "Portable", "is_active": True}
    row.update(overrides)
    return row


async def test_get_active() -> None:
    repo = AsyncMock()
    repo.list_active.return_value = [_row(), _row(category_id=4, category_name="Phones")]

    result = await CategoryService(repo).get_active()

    assert [c.category_name for c in result.data] == ["Laptops", "Phones"]


async def test_create() -> None:
    repo = AsyncMock()
    repo.insert.return_value = _row()

    result = await CategoryService(repo).create(CategoryCreate(category_name="Laptops"), created_by="a@company.com")

    assert result.success
    assert result.message == "Category created successfully"
    assert repo.insert.await_args.args[0]["created_by"] == "a@company.com"


async def test_update_missing() -> None:
    repo = AsyncMock()
    repo.get_by_id.return_value = None

    result = await CategoryService(repo).update(3, CategoryUpdate(category_name="X"))

    assert result.message == "Category not found"


async def test_delete_in_use() -> None:
    repo = AsyncMock()
    repo.get_by_id.return_value = _row()
    repo.count_assets.return_value = 1

    result = await CategoryService(repo).delete(3)

    assert result.message == "Category is in use and cannot be deleted"
    repo.delete.assert_not_awaited()


async def test_delete_nothing_affected() -> None:
    repo = AsyncMock()
    repo.get_by_id.return_value = _row()
    repo.count_assets.return_value = 0
    repo.delete.return_value = 0

    result = await CategoryService(repo).delete(3)

    assert result.message == "Failed to delete category"


async def test_delete() -> None:
    repo = AsyncMock()
    repo.get_by_id.return_value = _row()
    repo.count_assets.return_value = 0
    repo.delete.return_value = 1

    result = await CategoryService(repo).delete(3)

    assert result.success
    assert result.message == "Category deleted successfully"
