"""AssetTrack — Asset schemas."""
from datetime import date, datetime
from decimal import Decimal

from pydantic import Field

from app.schemas.common import CamelModel


class AssetCreate(CamelModel):
    asset_code: str | None = Field(default=None, max_length=30)
    asset_name: str = Field(min_length=1, max_length=100)
    category_id: int = Field(ge=1)
    serial_number: str | None = Field(default=None, max_length=50)
    purchase_date: date | None = None
    purchase_price: Decimal | None = Field(default=None, ge=0)
    condition: str | None = Field(default="Good", max_length=20)


class AssetUpdate(CamelModel):
    asset_name: str = Field(min_length=1, max_length=100)
    category_id: int = Field(ge=1)
    serial_number: str | None = Field(default=None, max_length=50)
    purchase_date: date | None = None
    purchase_price: Decimal | None = Field(default=None, ge=0)
    condition: str | None = Field(default=None, max_length=20)
    status: str = Field(min_length=1, max_length=20)
    current_holder_id: int | None = None
    is_active: bool = True


class AssetListItem(CamelModel):
    asset_id: int
    asset_code: str
    asset_name: str
    category_name: str = "Unknown"
    status: str
    current_holder_name: str | None = None
    condition: str | None = None
    purchase_date: date | None = None
    purchase_price: Decimal | None = None


class AssetDetail(AssetListItem):
    category_id: int
    serial_number: str | None = None
    current_holder_id: int | None = None
    is_active: bool
    created_by: str | None = None
    created_date: datetime | None = None
