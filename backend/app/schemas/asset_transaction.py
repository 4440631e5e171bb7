"""AssetTrack — Asset transaction schemas."""
from datetime import datetime

from pydantic import Field

from app.schemas.common import CamelModel


class AssetTransactionCreate(CamelModel):
    asset_id: int = Field(ge=1)
    from_employee_id: int | None = None
    to_employee_id: int | None = None
    transaction_date: datetime | None = None
    notes: str | None = None
    status: str = Field(default="Pending", max_length=20)


class AssetTransactionUpdate(CamelModel):
    asset_id: int = Field(ge=1)
    from_employee_id: int | None = None
    to_employee_id: int | None = None
    transaction_date: datetime
    notes: str | None = None
    status: str = Field(min_length=1, max_length=20)


class AssetTransactionRead(CamelModel):
    asset_transaction_id: int
    asset_id: int
    asset_code: str | None = None
    asset_name: str | None = None
    from_employee_id: int | None = None
    from_employee_name: str | None = None
    to_employee_id: int | None = None
    to_employee_name: str | None = None
    transaction_date: datetime
    notes: str | None = None
    status: str
