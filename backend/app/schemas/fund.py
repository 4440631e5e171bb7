"""AssetTrack — Fund schema."""
from datetime import datetime

from app.schemas.common import CamelModel


class FundRead(CamelModel):
    fund_pk: int
    fund_id: str | None = None
    name: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    is_active: bool = True
