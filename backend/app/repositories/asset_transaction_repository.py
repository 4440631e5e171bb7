"""AssetTrack — Asset transaction repository (hand-overs between employees)."""
from app.repositories.base import BaseRepository

TRANSACTION_SELECT = """
    SELECT t.asset_transaction_id, t.asset_id, a.asset_code, a.asset_name,
           t.from_employee_id, f.full_name AS from_employee_name,
           t.to_employee_id, r.full_name AS to_employee_name,
           t.transaction_date, t.notes, t.status
    FROM asset_transactions t
    LEFT JOIN assets a ON a.asset_id = t.asset_id
    LEFT JOIN employees f ON f.employee_id = t.from_employee_id
    LEFT JOIN employees r ON r.employee_id = t.to_employee_id
"""


class AssetTransactionRepository(BaseRepository):

    async def get_by_id(self, transaction_id: int) -> dict | None:
        return await self.fetch_one(
            f"{TRANSACTION_SELECT} WHERE t.asset_transaction_id = :transaction_id",
            {"transaction_id": transaction_id},
        )

    async def list_all(self) -> list[dict]:
        return await self.fetch_all(
            f"{TRANSACTION_SELECT} ORDER BY t.transaction_date DESC, t.asset_transaction_id DESC"
        )

    async def count_for_asset(self, asset_id: int) -> int:
        return await self.fetch_scalar(
            "SELECT COUNT(*) FROM asset_transactions WHERE asset_id = :asset_id",
            {"asset_id": asset_id},
        )

    async def list_for_asset(self, asset_id: int, offset: int, limit: int) -> list[dict]:
        return await self.fetch_all(
            f"""
            {TRANSACTION_SELECT}
            WHERE t.asset_id = :asset_id
            ORDER BY t.transaction_date DESC, t.asset_transaction_id DESC
            LIMIT :limit OFFSET :offset
            """,
            {"asset_id": asset_id, "limit": limit, "offset": offset},
        )

    async def insert(self, values: dict) -> int:
        return await self.fetch_scalar(
            """
            INSERT INTO asset_transactions (
                asset_id, from_employee_id, to_employee_id, transaction_date,
                notes, status, created_by, created_date
            ) VALUES (
                :asset_id, :from_employee_id, :to_employee_id, :transaction_date,
                :notes, :status, :created_by, :created_date
            )
            RETURNING asset_transaction_id
            """,
            values,
        )

    async def update(self, transaction_id: int, values: dict) -> int:
        return await self.execute(
            """
            UPDATE asset_transactions SET
                asset_id = :asset_id,
                from_employee_id = :from_employee_id,
                to_employee_id = :to_employee_id,
                transaction_date = :transaction_date,
                notes = :notes,
                status = :status
            WHERE asset_transaction_id = :transaction_id
            """,
            {**values, "transaction_id": transaction_id},
        )

    async def delete(self, transaction_id: int) -> int:
        return await self.execute(
            "DELETE FROM asset_transactions WHERE asset_transaction_id = :transaction_id",
            {"transaction_id": transaction_id},
        )
