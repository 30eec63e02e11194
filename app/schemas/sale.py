"""Sale and default sale schemas."""

import datetime
from decimal import Decimal

from pydantic import Field

from app.schemas.common import CamelModel


class SaleCreate(CamelModel):
    restaurant_id: int
    meal_period_cat_id: int
    date: datetime.date
    expected_sales: Decimal | None = Field(default=None, ge=0, max_digits=10, decimal_places=2)
    actual_sales: Decimal | None = Field(default=None, ge=0, max_digits=10, decimal_places=2)
    notes: str | None = None


class SaleUpdate(CamelModel):
    expected_sales: Decimal | None = Field(default=None, ge=0, max_digits=10, decimal_places=2)
    actual_sales: Decimal | None = Field(default=None, ge=0, max_digits=10, decimal_places=2)
    notes: str | None = None


class SaleRead(CamelModel):
    id: int
    restaurant_id: int
    meal_period_cat_id: int
    date: datetime.date
    expected_sales: Decimal | None
    actual_sales: Decimal | None
    notes: str | None


class DefaultSaleCreate(CamelModel):
    restaurant_id: int
    meal_period_id: int
    day_id: int = Field(ge=1, le=7)
    total: Decimal = Field(ge=0, max_digits=10, decimal_places=2)
    notes: str | None = None


class DefaultSaleUpdate(CamelModel):
    total: Decimal | None = Field(default=None, ge=0, max_digits=10, decimal_places=2)
    notes: str | None = None


class DefaultSaleRead(CamelModel):
    id: int
    restaurant_id: int
    meal_period_id: int
    day_id: int
    total: Decimal
    notes: str | None


class SaleResponse(CamelModel):
    sale: SaleRead


class SaleListResponse(CamelModel):
    sales: list[SaleRead]


class DefaultSaleResponse(CamelModel):
    default_sale: DefaultSaleRead


class DefaultSaleListResponse(CamelModel):
    default_sales: list[DefaultSaleRead]
