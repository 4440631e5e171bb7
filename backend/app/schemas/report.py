"""AssetTrack — Report schemas. Field titles double as spreadsheet headers."""
from datetime import date, datetime
from decimal import Decimal

from pydantic import Field

from app.schemas.common import CamelModel


class AssetTransactionReportRow(CamelModel):
    employee_code: str | None = Field(default=None, title="Employee Code")
    full_name: str | None = Field(default=None, title="Full Name")
    email: str | None = Field(default=None, title="Email")
    category_name: str | None = Field(default=None, title="Category Name")
    category_id: int | None = Field(default=None, title="Category ID")
    asset_name: str | None = Field(default=None, title="Asset Name")
    asset_code: str | None = Field(default=None, title="Asset Code")
    serial_number: str | None = Field(default=None, title="Serial Number")
    condition: str | None = Field(default=None, title="Condition")
    purchase_date: date | None = Field(default=None, title="Purchase Date")
    transaction_date: datetime = Field(title="Transaction Date")
    purchase_price: Decimal | None = Field(default=None, title="Purchase Price")
    notes: str | None = Field(default=None, title="Notes")
