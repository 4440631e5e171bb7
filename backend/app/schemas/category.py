"""AssetTrack — Category schemas."""
from pydantic import Field

from app.schemas.common import CamelModel


class CategoryCreate(CamelModel):
    category_name: str = Field(min_length=1, max_length=100)
    description: str | None = Field(default=None, max_length=255)


class CategoryUpdate(CategoryCreate):
    is_active: bool = True


class CategoryListItem(CamelModel):
    category_id: int
    category_name: str
    is_active: bool


class CategoryDetail(CategoryListItem):
    description: str | None = None
