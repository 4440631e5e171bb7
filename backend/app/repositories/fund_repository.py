"""AssetTrack — Fund repository (read-only lookup table)."""
from app.repositories.base import BaseRepository


class FundRepository(BaseRepository):

    async def list_all(self) -> list[dict]:
        return await self.fetch_all(
            """
            SELECT fund_pk, fund_id, name,
                   entry_time AS created_at, update_time AS updated_at,
                   TRUE AS is_active
            FROM funds
            ORDER BY fund_pk
            """
        )
