"""AssetTrack — EmployeeService: CRUD, grid paging, soft delete."""
from datetime import datetime, timezone

from app.repositories.employee_repository import EmployeeRepository
from app.schemas.common import PaginatedResult, Result
from app.schemas.employee import EmployeeCreate, EmployeeDetail, EmployeeListItem, EmployeeUpdate
from app.services.base import as_result, generate_code, page_offset


class EmployeeService:
    """Employee management on top of EmployeeRepository."""

    def __init__(self, repo: EmployeeRepository):
        self.repo = repo

    @as_result("get employee")
    async def get_by_id(self, employee_id: int) -> Result[EmployeeDetail]:
        row = await self.repo.get_by_id(employee_id)
        if row is None:
            return Result.fail("Employee not found")
        return Result.ok(EmployeeDetail.model_validate(row))

    @as_result("get employees")
    async def get_all(self) -> Result[list[EmployeeListItem]]:
        rows = await self.repo.list_all()
        return Result.ok([EmployeeListItem.model_validate(r) for r in rows])

    @as_result("get active employees")
    async def get_active(self) -> Result[list[EmployeeListItem]]:
        rows = await self.repo.list_active()
        return Result.ok([EmployeeListItem.model_validate(r) for r in rows])

    @as_result("get grid data", result_cls=PaginatedResult)
    async def get_grid(
        self,
        page: int,
        page_size: int,
        search: str | None = None,
    ) -> PaginatedResult[EmployeeListItem]:
        """Active employees, one page at a time, optionally filtered by name/code/department/position."""
        total = await self.repo.count_grid(search)
        rows = await self.repo.list_grid(page_offset(page, page_size), page_size, search)
        items = [EmployeeListItem.model_validate(r) for r in rows]
        return PaginatedResult.ok(items, total_count=total, page=page, page_size=page_size)

    @as_result("create employee")
    async def create(self, body: EmployeeCreate, created_by: str) -> Result[EmployeeDetail]:
        values = body.model_dump()
        if not values["employee_code"]:
            values["employee_code"] = generate_code("EMP", 6)
        values["is_active"] = True
        values["created_by"] = created_by
        values["created_date"] = datetime.now(timezone.utc)

        row = await self.repo.insert(values)
        if row is None:
            return Result.fail("Failed to retrieve created employee")
        return Result.ok(EmployeeDetail.model_validate(row), "Employee created successfully")

    @as_result("update employee")
    async def update(self, employee_id: int, body: EmployeeUpdate) -> Result[EmployeeDetail]:
        if await self.repo.get_by_id(employee_id) is None:
            return Result.fail("Employee not found")

        row = await self.repo.update(employee_id, body.model_dump())
        if row is None:
            return Result.fail("Failed to update employee")
        return Result.ok(EmployeeDetail.model_validate(row), "Employee updated successfully")

    @as_result("delete employee")
    async def delete(self, employee_id: int) -> Result[None]:
        """Soft delete; refused while the employee still holds an active asset."""
        if await self.repo.get_by_id(employee_id) is None:
            return Result.fail("Employee not found")
        if await self.repo.count_assets_held(employee_id) > 0:
            return Result.fail("Employee is in use and cannot be deleted")

        await self.repo.deactivate(employee_id)
        return Result.ok(message="Employee deleted successfully")
