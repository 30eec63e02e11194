"""Cross-entity checks that referenced rows belong to the same restaurant.

Every check resolves all of its ids first, so a missing id always surfaces as
NotFoundError before any mismatch is reported as BadRequestError.
"""

from sqlalchemy.orm import Session

from app.core.errors import BadRequestError
from app.services.existence import (
    check_cat_group_exists,
    check_category_exists,
    check_expense_exists,
    check_invoice_exists,
    check_meal_period_cat_exists,
    check_meal_period_exists,
    check_restaurant_exists,
)


def _mismatch(first_kind: str, first_id: int, second_kind: str, second_id: int) -> BadRequestError:
    """Build the error for two rows owned by different restaurants."""
    return BadRequestError(
        f"{first_kind} {first_id} and {second_kind} {second_id} are not associated with the same restaurant."
    )


def category_and_group_match(db: Session, category_id: int, cat_group_id: int) -> None:
    """Raise unless the category and the group belong to one restaurant."""
    category = check_category_exists(db, category_id)
    cat_group = check_cat_group_exists(db, cat_group_id)
    if category.restaurant_id != cat_group.restaurant_id:
        raise _mismatch("Category", category_id, "group", cat_group_id)


def cat_group_and_restaurant_match(db: Session, cat_group_id: int, restaurant_id: int) -> None:
    """Raise unless the group belongs to the restaurant."""
    cat_group = check_cat_group_exists(db, cat_group_id)
    check_restaurant_exists(db, restaurant_id)
    if cat_group.restaurant_id != restaurant_id:
        raise _mismatch("Category group", cat_group_id, "restaurant", restaurant_id)


def category_and_meal_period_match(db: Session, category_id: int, meal_period_id: int) -> None:
    """Raise unless the category and the meal period belong to one restaurant."""
    category = check_category_exists(db, category_id)
    meal_period = check_meal_period_exists(db, meal_period_id)
    if category.restaurant_id != meal_period.restaurant_id:
        raise _mismatch("Category", category_id, "meal period", meal_period_id)


def invoice_and_category_match(db: Session, invoice_id: int, category_id: int) -> None:
    """Raise unless the invoice and the category belong to one restaurant."""
    invoice = check_invoice_exists(db, invoice_id)
    category = check_category_exists(db, category_id)
    if invoice.restaurant_id != category.restaurant_id:
        raise _mismatch("Invoice", invoice_id, "category", category_id)


def expense_invoice_category_match(db: Session, expense_id: int, invoice_id: int, category_id: int) -> None:
    """All three rows must share one restaurant."""
    expense = check_expense_exists(db, expense_id)
    invoice = check_invoice_exists(db, invoice_id)
    category = check_category_exists(db, category_id)
    if expense.restaurant_id != invoice.restaurant_id:
        raise _mismatch("Expense", expense_id, "invoice", invoice_id)
    if expense.restaurant_id != category.restaurant_id:
        raise _mismatch("Expense", expense_id, "category", category_id)


def invoice_and_restaurant_match(db: Session, invoice_id: int, restaurant_id: int) -> None:
    """Raise unless the invoice belongs to the restaurant."""
    invoice = check_invoice_exists(db, invoice_id)
    check_restaurant_exists(db, restaurant_id)
    if invoice.restaurant_id != restaurant_id:
        raise _mismatch("Invoice", invoice_id, "restaurant", restaurant_id)


def meal_period_and_restaurant_match(db: Session, meal_period_id: int, restaurant_id: int) -> None:
    """Raise unless the meal period belongs to the restaurant."""
    meal_period = check_meal_period_exists(db, meal_period_id)
    check_restaurant_exists(db, restaurant_id)
    if meal_period.restaurant_id != restaurant_id:
        raise _mismatch("Meal period", meal_period_id, "restaurant", restaurant_id)


def meal_period_cat_and_restaurant_match(db: Session, meal_period_cat_id: int, restaurant_id: int) -> None:
    """Raise unless the allocation belongs to the restaurant."""
    meal_period_cat = check_meal_period_cat_exists(db, meal_period_cat_id)
    check_restaurant_exists(db, restaurant_id)
    if meal_period_cat.restaurant_id != restaurant_id:
        raise _mismatch("Meal period / category association", meal_period_cat_id, "restaurant", restaurant_id)
