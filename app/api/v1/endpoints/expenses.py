"""Expense endpoints."""

import datetime

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.security import get_current_user
from app.db.session import get_db
from app.models.invoice import Invoice
from app.models.user import User
from app.schemas.common import DeletedResponse
from app.schemas.invoice import (
    ExpenseCreate,
    ExpenseDetail,
    ExpenseDetailResponse,
    ExpenseListResponse,
    ExpenseRead,
    ExpenseResponse,
    ExpenseUpdate,
    InvoiceRead,
)
from app.services.invoice_service import (
    get_expense,
    list_expenses_in_range,
    register_expense,
    remove_expense,
    update_expense,
)

router: APIRouter = APIRouter()


@router.post("", response_model=ExpenseResponse, status_code=status.HTTP_201_CREATED)
def create_expense(
    payload: ExpenseCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ExpenseResponse:
    expense = register_expense(db, current_user.id, payload)
    return ExpenseResponse(expense=ExpenseRead.model_validate(expense))


@router.get(
    "/restaurants/{restaurant_id}/startdate/{start_date}/enddate/{end_date}",
    response_model=ExpenseListResponse,
)
def read_restaurant_expenses_in_range(
    restaurant_id: int,
    start_date: datetime.date,
    end_date: datetime.date,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ExpenseListResponse:
    expenses = list_expenses_in_range(db, current_user.id, restaurant_id, start_date, end_date)
    return ExpenseListResponse(expenses=[ExpenseRead.model_validate(row) for row in expenses])


@router.get("/{expense_id}", response_model=ExpenseDetailResponse)
def read_expense(
    expense_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ExpenseDetailResponse:
    expense = get_expense(db, current_user.id, expense_id)
    invoice = db.get(Invoice, expense.invoice_id)
    detail = ExpenseDetail(
        **ExpenseRead.model_validate(expense).model_dump(),
        invoice=InvoiceRead.model_validate(invoice),
    )
    return ExpenseDetailResponse(expense=detail)


@router.patch("/{expense_id}", response_model=ExpenseResponse)
def patch_expense(
    expense_id: int,
    payload: ExpenseUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ExpenseResponse:
    expense = update_expense(db, current_user.id, expense_id, payload)
    return ExpenseResponse(expense=ExpenseRead.model_validate(expense))


@router.delete("/{expense_id}", response_model=DeletedResponse)
def delete_expense(
    expense_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> DeletedResponse:
    remove_expense(db, current_user.id, expense_id)
    return DeletedResponse(deleted=expense_id)
