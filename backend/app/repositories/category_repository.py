"""AssetTrack — Category repository."""
from app.repositories.base import BaseRepository

CATEGORY_COLUMNS = "category_id, category_name, description, is_active, created_by, created_date"


class CategoryRepository(BaseRepository):

    async def get_by_id(self, category_id: int) -> dict | None:
        return await self.fetch_one(
            f"SELECT {CATEGORY_COLUMNS} FROM categories WHERE category_id = :category_id",
            {"category_id": category_id},
        )

    async def list_all(self) -> list[dict]:
        return await self.fetch_all(
            f"SELECT {CATEGORY_COLUMNS} FROM categories ORDER BY category_name"
        )

    async def list_active(self) -> list[dict]:
        return await self.fetch_all(
            f"SELECT {CATEGORY_COLUMNS} FROM categories WHERE is_active = TRUE ORDER BY category_name"
        )

    async def insert(self, values: dict) -> dict | None:
        return await self.fetch_one(
            f"""
            INSERT INTO categories (category_name, description, is_active, created_by, created_date)
            VALUES (:category_name, :description, :is_active, :created_by, :created_date)
            RETURNING {CATEGORY_COLUMNS}
            """,
            values,
        )

    async def update(self, category_id: int, values: dict) -> dict | None:
        return await self.fetch_one(
            f"""
            UPDATE categories SET
                category_name = :category_name,
                description = :description,
                is_active = :is_active
            WHERE category_id = :category_id
            RETURNING {CATEGORY_COLUMNS}
            """,
            {**values, "category_id": category_id},
        )

    async def delete(self, category_id: int) -> int:
        return await self.execute(
            "DELETE FROM categories WHERE category_id = :category_id",
            {"category_id": category_id},
        )

    async def count_assets(self, category_id: int) -> int:
        return await self.fetch_scalar(
            "SELECT COUNT(*) FROM assets WHERE category_id = :category_id AND is_active = TRUE",
            {"category_id": category_id},
        )
