"""AssetTrack — Report queries."""
from app.repositories.base import BaseRepository


class ReportRepository(BaseRepository):

    async def asset_transaction_rows(self) -> list[dict]:
        """One row per transaction, joined to the receiving employee, asset and category."""
        return await self.fetch_all(
            """
            SELECT e.employee_code, e.full_name, e.email,
                   c.category_name, a.category_id,
                   a.asset_name, a.asset_code, a.serial_number, a.condition,
                   a.purchase_date, t.transaction_date, a.purchase_price,
                   t.notes
            FROM asset_transactions t
            LEFT JOIN assets a ON a.asset_id = t.asset_id AND a.is_active = TRUE
            LEFT JOIN employees e ON e.employee_id = t.to_employee_id AND e.is_active = TRUE
            LEFT JOIN categories c ON c.category_id = a.category_id AND c.is_active = TRUE
            ORDER BY t.transaction_date, e.employee_id, c.category_id, a.asset_id
            """
        )
