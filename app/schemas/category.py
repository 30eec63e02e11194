"""Category group and category schemas."""

from decimal import Decimal

from pydantic import Field

from app.schemas.common import CamelModel


class CategoryGroupCreate(CamelModel):
    restaurant_id: int
    name: str = Field(min_length=1, max_length=255)
    notes: str | None = None


class CategoryGroupUpdate(CamelModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    notes: str | None = None


class CategoryGroupRead(CamelModel):
    id: int
    restaurant_id: int
    name: str
    notes: str | None


class CategoryCreate(CamelModel):
    """Payload for a new category; cogsPercent is a fraction of sales."""

    restaurant_id: int
    name: str = Field(min_length=1, max_length=255)
    cat_group_id: int | None = None
    cogs_percent: Decimal = Field(default=Decimal("0"), ge=0, le=1)
    notes: str | None = None


class CategoryUpdate(CamelModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    cat_group_id: int | None = None
    cogs_percent: Decimal | None = Field(default=None, ge=0, le=1)
    notes: str | None = None


class CategoryRead(CamelModel):
    id: int
    restaurant_id: int
    name: str
    cat_group_id: int | None
    cogs_percent: Decimal
    notes: str | None


class CategoryDetail(CategoryRead):
    restaurant_name: str
    cat_group_name: str | None = None


class CategoryGroupDetail(CategoryGroupRead):
    restaurant_name: str
    categories: list[CategoryRead] = []


class CategoryGroupResponse(CamelModel):
    cat_group: CategoryGroupRead


class CategoryGroupDetailResponse(CamelModel):
    cat_group: CategoryGroupDetail


class CategoryGroupListResponse(CamelModel):
    cat_groups: list[CategoryGroupRead]


class CategoryResponse(CamelModel):
    category: CategoryRead


class CategoryDetailResponse(CamelModel):
    category: CategoryDetail


class CategoryListResponse(CamelModel):
    categories: list[CategoryRead]
