from datetime import datetime, timezone
from unittest.mock import AsyncMock

from app.schemas.asset_transaction import AssetTransactionCreate, AssetTransactionUpdate
from app.services.asset_transaction_service import AssetTransactionService


def _row(**overrides) -> dict:
    row = {
        "asset_transaction_id": 100,
        "asset_id": 10,
        "asset_code": "AST-1",
        "asset_name": "ThinkPad X1",
        "from_employee_id": 1,
        "from_employee_name": "Ann Lee",
        "to_employee_id": 2,
        "to_employee_name": "Bob Kim",
        "transaction_date": datetime(2026, 3, 1, 9, 30, tzinfo=timezone.utc),
        "notes": None,
        "status": "Pending",
    }
    row.update(overrides)
    return row


async def test_get_by_id_names_both_employees() -> None:
    repo = AsyncMock()
    repo.get_by_id.return_value = _row()

    result = await AssetTransactionService(repo).get_by_id(100)

    assert result.data.from_employee_name == "Ann Lee"
    assert result.data.to_employee_name == "Bob Kim"


async def test_get_by_id_missing() -> None:
    repo = AsyncMock()
    repo.get_by_id.return_value = None

    result = await AssetTransactionService(repo).get_by_id(1)

    assert result.message == "Transaction not found"


async def test_history_for_asset_is_paged() -> None:
    repo = AsyncMock()
    repo.count_for_asset.return_value = 3
    repo.list_for_asset.return_value = [_row(asset_transaction_id=i) for i in (103, 102)]

    result = await AssetTransactionService(repo).get_by_asset(10, page=1, page_size=2)

    assert result.success
    assert result.total_pages == 2
    assert result.has_next
    repo.list_for_asset.assert_awaited_once_with(10, 0, 2)


async def test_create_defaults_date_and_status() -> None:
    repo = AsyncMock()
    repo.insert.return_value = 100
    repo.get_by_id.return_value = _row()

    result = await AssetTransactionService(repo).create(
        AssetTransactionCreate(asset_id=10, to_employee_id=2), created_by="a@company.com"
    )

    assert result.success
    values = repo.insert.await_args.args[0]
    assert values["status"] == "Pending"
    assert values["transaction_date"].tzinfo is not None
    assert values["created_by"] == "a@company.com"


async def test_update_missing() -> None:
    repo = AsyncMock()
    repo.get_by_id.return_value = None

    body = AssetTransactionUpdate(
        asset_id=10, transaction_date=datetime(2026, 3, 1, tzinfo=timezone.utc), status="Done"
    )
    result = await AssetTransactionService(repo).update(100, body)

    assert result.message == "Transaction not found"


async def test_delete_is_hard() -> None:
    repo = AsyncMock()
    repo.get_by_id.return_value = _row()
    repo.delete.return_value = 1

    result = await AssetTransactionService(repo).delete(100)

    assert result.message == "Transaction deleted successfully"
    repo.delete.assert_awaited_once_with(100)
