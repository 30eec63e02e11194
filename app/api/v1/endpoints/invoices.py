"""Invoice endpoints, including date-range queries."""

import datetime

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.security import get_current_user
from app.db.session import get_db
from app.models.invoice import Invoice
from app.models.restaurant import Restaurant
from app.models.user import User
from app.schemas.common import DeletedResponse
from app.schemas.invoice import (
    ExpenseListResponse,
    ExpenseRead,
    InvoiceCreate,
    InvoiceDetail,
    InvoiceDetailResponse,
    InvoiceListResponse,
    InvoiceRead,
    InvoiceResponse,
    InvoiceUpdate,
)
from app.services.invoice_service import (
    get_invoice,
    list_expenses_for_invoice,
    list_invoices,
    list_invoices_in_range,
    register_invoice,
    remove_invoice,
    update_invoice,
)

router: APIRouter = APIRouter()


def _serialize_invoice_detail(db: Session, invoice: Invoice) -> InvoiceDetail:
    restaurant = db.get(Restaurant, invoice.restaurant_id)
    return InvoiceDetail(
        **InvoiceRead.model_validate(invoice).model_dump(),
        restaurant_name=restaurant.name,
        expenses=[ExpenseRead.model_validate(expense) for expense in invoice.expenses],
    )


@router.post("", response_model=InvoiceResponse, status_code=status.HTTP_201_CREATED)
def create_invoice(
    payload: InvoiceCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> InvoiceResponse:
    invoice = register_invoice(db, current_user.id, payload)
    return InvoiceResponse(invoice=InvoiceRead.model_validate(invoice))


@router.get("/restaurants/{restaurant_id}", response_model=InvoiceListResponse)
def read_restaurant_invoices(
    restaurant_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> InvoiceListResponse:
    invoices = list_invoices(db, current_user.id, restaurant_id)
    return InvoiceListResponse(invoices=[InvoiceRead.model_validate(row) for row in invoices])


@router.get(
    "/restaurants/{restaurant_id}/startdate/{start_date}/enddate/{end_date}",
    response_model=InvoiceListResponse,
)
def read_restaurant_invoices_in_range(
    restaurant_id: int,
    start_date: datetime.date,
    end_date: datetime.date,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> InvoiceListResponse:
    invoices = list_invoices_in_range(db, current_user.id, restaurant_id, start_date, end_date)
    return InvoiceListResponse(invoices=[InvoiceRead.model_validate(row) for row in invoices])


@router.get("/{invoice_id}", response_model=InvoiceDetailResponse)
def read_invoice(
    invoice_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> InvoiceDetailResponse:
    invoice = get_invoice(db, current_user.id, invoice_id)
    return InvoiceDetailResponse(invoice=_serialize_invoice_detail(db, invoice))


@router.get("/{invoice_id}/expenses", response_model=ExpenseListResponse)
def read_invoice_expenses(
    invoice_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ExpenseListResponse:
    expenses = list_expenses_for_invoice(db, current_user.id, invoice_id)
    return ExpenseListResponse(expenses=[ExpenseRead.model_validate(row) for row in expenses])


@router.patch("/{invoice_id}", response_model=InvoiceResponse)
def patch_invoice(
    invoice_id: int,
    payload: InvoiceUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> InvoiceResponse:
    invoice = update_invoice(db, current_user.id, invoice_id, payload)
    return InvoiceResponse(invoice=InvoiceRead.model_validate(invoice))


@router.delete("/{invoice_id}", response_model=DeletedResponse)
def delete_invoice(
    invoice_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> DeletedResponse:
    remove_invoice(db, current_user.id, invoice_id)
    return DeletedResponse(deleted=invoice_id)
