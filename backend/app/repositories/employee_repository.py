"""AssetTrack — Employee repository."""
from app.repositories.base import BaseRepository, search_pattern

EMPLOYEE_COLUMNS = """
    employee_id, employee_code, full_name, department, position,
    phone_number, email, is_active, created_by, created_date
"""

GRID_FILTER = """
    WHERE is_active = TRUE
      AND (CAST(:pattern AS TEXT) IS NULL
           OR full_name ILIKE :pattern
           OR employee_code ILIKE :pattern
           OR department ILIKE :pattern
           OR position ILIKE :pattern)
"""


class EmployeeRepository(BaseRepository):

    async def get_by_id(self, employee_id: int) -> dict | None:
        return await self.fetch_one(
            f"SELECT {EMPLOYEE_COLUMNS} FROM employees WHERE employee_id = :employee_id",
            {"employee_id": employee_id},
        )

    async def list_all(self) -> list[dict]:
        return await self.fetch_all(
            f"SELECT {EMPLOYEE_COLUMNS} FROM employees ORDER BY full_name"
        )

    async def list_active(self) -> list[dict]:
        return await self.fetch_all(
            f"SELECT {EMPLOYEE_COLUMNS} FROM employees WHERE is_active = TRUE ORDER BY full_name"
        )

    async def count_grid(self, search: str | None = None) -> int:
        return await self.fetch_scalar(
            f"SELECT COUNT(*) FROM employees {GRID_FILTER}",
            {"pattern": search_pattern(search)},
        )

    async def list_grid(self, offset: int, limit: int, search: str | None = None) -> list[dict]:
        return await self.fetch_all(
            f"""
            SELECT {EMPLOYEE_COLUMNS} FROM employees
            {GRID_FILTER}
            ORDER BY full_name, employee_id
            LIMIT :limit OFFSET :offset
            """,
            {"pattern": search_pattern(search), "limit": limit, "offset": offset},
        )

    async def insert(self, values: dict) -> dict | None:
        return await self.fetch_one(
            f"""
            INSERT INTO employees (
                employee_code, full_name, department, position, phone_number,
                email, is_active, created_by, created_date
            ) VALUES (
                :employee_code, :full_name, :department, :position, :phone_number,
                :email, :is_active, :created_by, :created_date
            )
            RETURNING {EMPLOYEE_COLUMNS}
            """,
            values,
        )

    async def update(self, employee_id: int, values: dict) -> dict | None:
        return await self.fetch_one(
            f"""
            UPDATE employees SET
                full_name = :full_name,
                department = :department,
                position = :position,
                phone_number = :phone_number,
                email = :email,
                is_active = :is_active
            WHERE employee_id = :employee_id
            RETURNING {EMPLOYEE_COLUMNS}
            """,
            {**values, "employee_id": employee_id},
        )

    async def deactivate(self, employee_id: int) -> int:
        return await self.execute(
            "UPDATE employees SET is_active = FALSE WHERE employee_id = :employee_id",
            {"employee_id": employee_id},
        )

    async def count_assets_held(self, employee_id: int) -> int:
        return await self.fetch_scalar(
            """
            SELECT COUNT(*) FROM assets
            WHERE current_holder_id = :employee_id AND is_active = TRUE
            """,
            {"employee_id": employee_id},
        )
