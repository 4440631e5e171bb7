"""AssetTrack — Employee schemas."""
from datetime import datetime

from pydantic import EmailStr, Field

from app.schemas.common import CamelModel


class EmployeeCreate(CamelModel):
    employee_code: str | None = Field(default=None, max_length=30)
    full_name: str = Field(min_length=1, max_length=100)
    department: str | None = Field(default=None, max_length=50)
    position: str | None = Field(default=None, max_length=50)
    phone_number: str | None = Field(default=None, max_length=20)
    email: EmailStr | None = Field(default=None, max_length=100)


class EmployeeUpdate(CamelModel):
    full_name: str = Field(min_length=1, max_length=100)
    department: str | None = Field(default=None, max_length=50)
    position: str | None = Field(default=None, max_length=50)
    phone_number: str | None = Field(default=None, max_length=20)
    email: EmailStr | None = Field(default=None, max_length=100)
    is_active: bool = True


class EmployeeListItem(CamelModel):
    employee_id: int
    employee_code: str
    full_name: str
    department: str | None = None
    position: str | None = None
    is_active: bool


class EmployeeDetail(EmployeeListItem):
    phone_number: str | None = None
    email: str | None = None
    created_by: str | None = None
    created_date: datetime | None = None
