import re
from datetime import datetime, timezone
from unittest.mock import AsyncMock

from app.config import get_settings
from app.schemas.common import PaginatedResult
from app.schemas.employee import EmployeeCreate, EmployeeUpdate
from app.services.employee_service import EmployeeService


def _row(**overrides) -> dict:
    row = {
        "employee_id": 1,
        "employee_code": "EMP-20260101-ABC123",
        "full_name": "Ann Lee",
        "department": "IT",
        "position": "Engineer",
        "phone_number": "555-0100",
        "email": "ann@company.com",
        "is_active": True,
        "created_by": "admin@company.com",
        "created_date": datetime(2026, 1, 1, tzinfo=timezone.utc),
    }
    row.update(overrides)
    return row


async def test_get_by_id_found() -> None:
    repo = AsyncMock()
    repo.get_by_id.return_value = _row()

    result = await EmployeeService(repo).get_by_id(1)

    assert result.success
    assert result.data.full_name == "Ann Lee"


async def test_get_by_id_missing() -> None:
    repo = AsyncMock()
    repo.get_by_id.return_value = None

    result = await EmployeeService(repo).get_by_id(99)

    assert not result.success
    assert result.message == "Employee not found"


async def test_repository_error_becomes_failure() -> None:
    repo = AsyncMock()
    repo.list_all.side_effect = RuntimeError("connection refused")

    result = await EmployeeService(repo).get_all()

    assert not result.success
    assert result.message == "Failed to get employees"
    assert result.data is None


async def test_repository_error_detail_only_in_debug(monkeypatch) -> None:
    monkeypatch.setattr(get_settings(), "DEBUG", True)
    repo = AsyncMock()
    repo.list_all.side_effect = RuntimeError("connection refused")

    result = await EmployeeService(repo).get_all()

    assert result.message == "Failed to get employees: connection refused"


async def test_grid_pages_with_total_count() -> None:
    repo = AsyncMock()
    repo.count_grid.return_value = 23
    repo.list_grid.return_value = [_row(employee_id=i) for i in range(11, 21)]

    result = await EmployeeService(repo).get_grid(page=2, page_size=10, search="it")

    assert isinstance(result, PaginatedResult)
    assert result.success
    assert result.total_count == 23
    assert result.total_pages == 3
    assert result.has_previous and result.has_next
    repo.count_grid.assert_awaited_once_with("it")
    repo.list_grid.assert_awaited_once_with(10, 10, "it")


async def test_grid_failure_is_paginated_failure() -> None:
    repo = AsyncMock()
    repo.count_grid.side_effect = RuntimeError("boom")

    result = await EmployeeService(repo).get_grid(page=1, page_size=10)

    assert isinstance(result, PaginatedResult)
    assert not result.success
    assert result.message == "Failed to get grid data"


async def test_create_generates_code_and_audit_fields() -> None:
    repo = AsyncMock()
    repo.insert.return_value = _row()

    result = await EmployeeService(repo).create(EmployeeCreate(full_name="Ann Lee"), created_by="admin@company.com")

    assert result.success
    assert result.message == "Employee created successfully"
    values = repo.insert.await_args.args[0]
    assert re.fullmatch(r"EMP-\d{8}-[0-9A-F]{6}", values["employee_code"])
    assert values["is_active"] is True
    assert values["created_by"] == "admin@company.com"


async def test_create_keeps_given_code() -> None:
    repo = AsyncMock()
    repo.insert.return_value = _row(employee_code="E-1")

    await EmployeeService(repo).create(EmployeeCreate(employee_code="E-1", full_name="Ann"), created_by="x")

    assert repo.insert.await_args.args[0]["employee_code"] == "E-1"


async def test_update_missing_employee() -> None:
    repo = AsyncMock()
    repo.get_by_id.return_value = None

    result = await EmployeeService(repo).update(5, EmployeeUpdate(full_name="Bob"))

    assert result.message == "Employee not found"
    repo.update.assert_not_awaited()


async def test_update_returns_fresh_row() -> None:
    repo = AsyncMock()
    repo.get_by_id.return_value = _row()
    repo.update.return_value = _row(full_name="Bob")

    result = await EmployeeService(repo).update(1, EmployeeUpdate(full_name="Bob"))

    assert result.success
    assert result.data.full_name == "Bob"
    assert result.message == "Employee updated successfully"


async def test_delete_refused_while_holding_assets() -> None:
    repo = AsyncMock()
    repo.get_by_id.return_value = _row()
    repo.count_assets_held.return_value = 2

    result = await EmployeeService(repo).delete(1)

    assert not result.success
    assert result.message == "Employee is in use and cannot be deleted"
    repo.deactivate.assert_not_awaited()


async def test_delete_is_soft() -> None:
    repo = AsyncMock()
    repo.get_by_id.return_value = _row()
    repo.count_assets_held.return_value = 0

    result = await EmployeeService(repo).delete(1)

    assert result.success
    assert result.message == "Employee deleted successfully"
    repo.deactivate.assert_awaited_once_with(1)
