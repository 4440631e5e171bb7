"""AssetTrack — Asset repository."""
from app.repositories.base import BaseRepository, search_pattern

ASSET_DETAIL_SELECT = """
    SELECT a.asset_id, a.asset_code, a.asset_name, a.category_id,
           COALESCE(c.category_name, 'Unknown') AS category_name,
           a.serial_number, a.purchase_date, a.purchase_price, a.condition,
           a.status, a.current_holder_id, e.full_name AS current_holder_name,
           a.is_active, a.created_by, a.created_date
    FROM assets a
    LEFT JOIN categories c ON c.category_id = a.category_id
    LEFT JOIN employees e ON e.employee_id = a.current_holder_id
"""

GRID_FILTER = """
    WHERE a.is_active = TRUE
      AND (CAST(:pattern AS TEXT) IS NULL
           OR a.asset_name ILIKE :pattern
           OR a.asset_code ILIKE :pattern
           OR a.serial_number ILIKE :pattern)
"""


class AssetRepository(BaseRepository):

    async def get_by_id(self, asset_id: int) -> dict | None:
        return await self.fetch_one(
            f"{ASSET_DETAIL_SELECT} WHERE a.asset_id = :asset_id",
            {"asset_id": asset_id},
        )

    async def list_active(self) -> list[dict]:
        return await self.fetch_all(
            f"{ASSET_DETAIL_SELECT} WHERE a.is_active = TRUE ORDER BY a.asset_name"
        )

    async def count_grid(self, search: str | None = None) -> int:
        return await self.fetch_scalar(
            f"SELECT COUNT(*) FROM assets a {GRID_FILTER}",
            {"pattern": search_pattern(search)},
        )

    async def list_grid(self, offset: int, limit: int, search: str | None = None) -> list[dict]:
        return await self.fetch_all(
            f"""
            {ASSET_DETAIL_SELECT}
            {GRID_FILTER}
            ORDER BY a.asset_name, a.asset_id
            LIMIT :limit OFFSET :offset
            """,
            {"pattern": search_pattern(search), "limit": limit, "offset": offset},
        )

    async def insert(self, values: dict) -> int:
        """Insert an asset and return its new id."""
        return await self.fetch_scalar(
            """
            INSERT INTO assets (
                asset_code, asset_name, category_id, serial_number, purchase_date,
                purchase_price, condition, status, current_holder_id, is_active,
                created_by, created_date
            ) VALUES (
                :asset_code, :asset_name, :category_id, :serial_number, :purchase_date,
                :purchase_price, :condition, :status, :current_holder_id, :is_active,
                :created_by, :created_date
            )
            RETURNING asset_id
            """,
            values,
        )

    async def update(self, asset_id: int, values: dict) -> int:
        return await self.execute(
            """
            UPDATE assets SET
                asset_name = :asset_name,
                category_id = :category_id,
                serial_number = :serial_number,
                purchase_date = :purchase_date,
                purchase_price = :purchase_price,
                condition = :condition,
                status = :status,
                current_holder_id = :current_holder_id,
                is_active = :is_active
            WHERE asset_id = :asset_id
            """,
            {**values, "asset_id": asset_id},
        )

    async def deactivate(self, asset_id: int) -> int:
        return await self.execute(
            "UPDATE assets SET is_active = FALSE WHERE asset_id = :asset_id",
            {"asset_id": asset_id},
        )
