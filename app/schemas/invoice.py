"""Invoice and expense schemas."""

import datetime
from decimal import Decimal

from pydantic import Field

from app.schemas.common import CamelModel


class InvoiceCreate(CamelModel):
    restaurant_id: int
    date: datetime.date
    invoice: str = Field(min_length=1, max_length=128)
    vendor: str = Field(min_length=1, max_length=255)
    total: Decimal = Field(max_digits=10, decimal_places=2)
    notes: str | None = None


class InvoiceUpdate(CamelModel):
    date: datetime.date | None = None
    invoice: str | None = Field(default=None, min_length=1, max_length=128)
    vendor: str | None = Field(default=None, min_length=1, max_length=255)
    total: Decimal | None = Field(default=None, max_digits=10, decimal_places=2)
    notes: str | None = None


class InvoiceRead(CamelModel):
    id: int
    restaurant_id: int
    date: datetime.date
    invoice: str
    vendor: str
    total: Decimal
    notes: str | None


class ExpenseCreate(CamelModel):
    restaurant_id: int
    category_id: int
    invoice_id: int
    amount: Decimal = Field(max_digits=10, decimal_places=2)
    notes: str | None = None


class ExpenseUpdate(CamelModel):
    category_id: int | None = None
    invoice_id: int | None = None
    amount: Decimal | None = Field(default=None, max_digits=10, decimal_places=2)
    notes: str | None = None


class ExpenseRead(CamelModel):
    id: int
    restaurant_id: int
    category_id: int
    invoice_id: int
    amount: Decimal
    notes: str | None


class ExpenseDetail(ExpenseRead):
    invoice: InvoiceRead


class InvoiceDetail(InvoiceRead):
    restaurant_name: str
    expenses: list[ExpenseRead] = []


class InvoiceResponse(CamelModel):
    invoice: InvoiceRead


class InvoiceDetailResponse(CamelModel):
    invoice: InvoiceDetail


class InvoiceListResponse(CamelModel):
    invoices: list[InvoiceRead]


class ExpenseResponse(CamelModel):
    expense: ExpenseRead


class ExpenseDetailResponse(CamelModel):
    expense: ExpenseDetail


class ExpenseListResponse(CamelModel):
    expenses: list[ExpenseRead]
