"""Meal period and meal period/category allocation schemas."""

from decimal import Decimal

from pydantic import Field

from app.schemas.common import CamelModel


class MealPeriodCreate(CamelModel):
    restaurant_id: int
    name: str = Field(min_length=1, max_length=255)
    notes: str | None = None


class MealPeriodUpdate(CamelModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    notes: str | None = None


class MealPeriodRead(CamelModel):
    id: int
    restaurant_id: int
    name: str
    notes: str | None


class MealPeriodDetail(MealPeriodRead):
    restaurant_name: str


class MealPeriodCategoryCreate(CamelModel):
    """Allocation payload; the meal period and category come from the path."""

    sales_percent_of_period: Decimal = Field(ge=0, le=1)
    notes: str | None = None


class MealPeriodCategoryUpdate(CamelModel):
    sales_percent_of_period: Decimal | None = Field(default=None, ge=0, le=1)
    notes: str | None = None


class MealPeriodCategoryRead(CamelModel):
    id: int
    restaurant_id: int
    meal_period_id: int
    category_id: int
    sales_percent_of_period: Decimal
    notes: str | None


class MealPeriodResponse(CamelModel):
    meal_period: MealPeriodRead


class MealPeriodDetailResponse(CamelModel):
    meal_period: MealPeriodDetail


class MealPeriodListResponse(CamelModel):
    meal_periods: list[MealPeriodRead]


class MealPeriodCategoryResponse(CamelModel):
    meal_period_cat: MealPeriodCategoryRead


class MealPeriodCategoryListResponse(CamelModel):
    meal_period_cats: list[MealPeriodCategoryRead]
