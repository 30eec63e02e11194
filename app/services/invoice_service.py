"""Vendor invoices and the expense lines booked against them."""

import datetime
from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.core.errors import BadRequestError
from app.db.session import transaction
from app.models.invoice import Expense, Invoice
from app.schemas.invoice import ExpenseCreate, ExpenseUpdate, InvoiceCreate, InvoiceUpdate
from app.services.access import require_member
from app.services.consistency import (
    expense_invoice_category_match,
    invoice_and_category_match,
    invoice_and_restaurant_match,
)
from app.services.existence import check_expense_exists, check_invoice_exists
from app.services.store import apply_updates


def create_invoice(
    db: Session,
    restaurant_id: int,
    date: datetime.date,
    invoice: str,
    vendor: str,
    total: Decimal,
    notes: str | None = None,
) -> Invoice:
    """Add an invoice row and flush it; the caller commits."""
    row = Invoice(restaurant_id=restaurant_id, date=date, invoice=invoice, vendor=vendor, total=total, notes=notes)
    db.add(row)
    db.flush()
    return row


def create_expense(
    db: Session,
    restaurant_id: int,
    category_id: int,
    invoice_id: int,
    amount: Decimal,
    notes: str | None = None,
) -> Expense:
    """Add an expense row and flush it; the caller commits."""
    expense = Expense(
        restaurant_id=restaurant_id,
        category_id=category_id,
        invoice_id=invoice_id,
        amount=amount,
        notes=notes,
    )
    db.add(expense)
    db.flush()
    return expense


def get_invoice_by_number(db: Session, restaurant_id: int, vendor: str, invoice: str) -> Invoice | None:
    """Return the restaurant's invoice for this vendor and invoice number, if any."""
    return db.scalar(
        select(Invoice)
        .where(Invoice.restaurant_id == restaurant_id, Invoice.vendor == vendor, Invoice.invoice == invoice)
        .limit(1)
    )


def _ensure_invoice_number_available(db: Session, restaurant_id: int, vendor: str, invoice: str) -> None:
    if get_invoice_by_number(db, restaurant_id, vendor, invoice) is not None:
        raise BadRequestError(f"Invoice {invoice} from {vendor} is already recorded for restaurant {restaurant_id}.")


def _ensure_valid_range(start_date: datetime.date, end_date: datetime.date) -> None:
    if start_date > end_date:
        raise BadRequestError(
            f"Start date {start_date.isoformat()} is after end date {end_date.isoformat()}."
        )


# Invoices


def list_invoices(db: Session, actor_id: int, restaurant_id: int) -> list[Invoice]:
    require_member(db, restaurant_id, actor_id)
    return list(
        db.scalars(select(Invoice).where(Invoice.restaurant_id == restaurant_id).order_by(Invoice.date, Invoice.id))
    )


def list_invoices_in_range(
    db: Session,
    actor_id: int,
    restaurant_id: int,
    start_date: datetime.date,
    end_date: datetime.date,
) -> list[Invoice]:
    """Invoices dated within the inclusive range."""
    require_member(db, restaurant_id, actor_id)
    _ensure_valid_range(start_date, end_date)
    return list(
        db.scalars(
            select(Invoice)
            .where(Invoice.restaurant_id == restaurant_id, Invoice.date.between(start_date, end_date))
            .order_by(Invoice.date, Invoice.id)
        )
    )


def register_invoice(db: Session, actor_id: int, payload: InvoiceCreate) -> Invoice:
    with transaction(db):
        require_member(db, payload.restaurant_id, actor_id)
        _ensure_invoice_number_available(db, payload.restaurant_id, payload.vendor, payload.invoice)
        invoice = create_invoice(
            db,
            payload.restaurant_id,
            payload.date,
            payload.invoice,
            payload.vendor,
            payload.total,
            notes=payload.notes,
        )
    return invoice


def get_invoice(db: Session, actor_id: int, invoice_id: int) -> Invoice:
    invoice = check_invoice_exists(db, invoice_id)
    require_member(db, invoice.restaurant_id, actor_id)
    return invoice


def update_invoice(db: Session, actor_id: int, invoice_id: int, payload: InvoiceUpdate) -> Invoice:
    with transaction(db):
        invoice = check_invoice_exists(db, invoice_id)
        require_member(db, invoice.restaurant_id, actor_id)
        vendor = payload.vendor or invoice.vendor
        number = payload.invoice or invoice.invoice
        if (vendor, number) != (invoice.vendor, invoice.invoice):
            _ensure_invoice_number_available(db, invoice.restaurant_id, vendor, number)
        apply_updates(invoice, payload)
    return invoice


def remove_invoice(db: Session, actor_id: int, invoice_id: int) -> None:
    """Delete an invoice together with its expense lines."""
    with transaction(db):
        invoice = check_invoice_exists(db, invoice_id)
        require_member(db, invoice.restaurant_id, actor_id)
        db.delete(invoice)


# Expenses


def list_expenses_for_invoice(db: Session, actor_id: int, invoice_id: int) -> list[Expense]:
    invoice = get_invoice(db, actor_id, invoice_id)
    return list(invoice.expenses)


def list_expenses_in_range(
    db: Session,
    actor_id: int,
    restaurant_id: int,
    start_date: datetime.date,
    end_date: datetime.date,
) -> list[Expense]:
    """Expenses whose invoice is dated within the inclusive range."""
    require_member(db, restaurant_id, actor_id)
    _ensure_valid_range(start_date, end_date)
    return list(
        db.scalars(
            select(Expense)
            .join(Invoice, Invoice.id == Expense.invoice_id)
            .where(Expense.restaurant_id == restaurant_id, Invoice.date.between(start_date, end_date))
            .order_by(Invoice.date, Expense.id)
        )
    )


def register_expense(db: Session, actor_id: int, payload: ExpenseCreate) -> Expense:
    with transaction(db):
        require_member(db, payload.restaurant_id, actor_id)
        invoice_and_restaurant_match(db, payload.invoice_id, payload.restaurant_id)
        invoice_and_category_match(db, payload.invoice_id, payload.category_id)
        expense = create_expense(
            db,
            payload.restaurant_id,
            payload.category_id,
            payload.invoice_id,
            payload.amount,
            notes=payload.notes,
        )
    return expense


def get_expense(db: Session, actor_id: int, expense_id: int) -> Expense:
    expense = check_expense_exists(db, expense_id)
    require_member(db, expense.restaurant_id, actor_id)
    return expense


def update_expense(db: Session, actor_id: int, expense_id: int, payload: ExpenseUpdate) -> Expense:
    """Partial update; a new invoice or category must share the expense's restaurant."""
    with transaction(db):
        expense = check_expense_exists(db, expense_id)
        require_member(db, expense.restaurant_id, actor_id)
        invoice_id = payload.invoice_id or expense.invoice_id
        category_id = payload.category_id or expense.category_id
        if (invoice_id, category_id) != (expense.invoice_id, expense.category_id):
            expense_invoice_category_match(db, expense_id, invoice_id, category_id)
        apply_updates(expense, payload)
    return expense


def remove_expense(db: Session, actor_id: int, expense_id: int) -> None:
    with transaction(db):
        expense = check_expense_exists(db, expense_id)
        require_member(db, expense.restaurant_id, actor_id)
        db.delete(expense)
