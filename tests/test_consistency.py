"""Cross-restaurant consistency check tests."""

import datetime
from decimal import Decimal

import pytest

from app.core.errors import BadRequestError, NotFoundError
from app.services.category_service import get_category_by_name
from app.services.consistency import (
    cat_group_and_restaurant_match,
    category_and_group_match,
    category_and_meal_period_match,
    expense_invoice_category_match,
    invoice_and_category_match,
)
from app.services.invoice_service import create_expense, create_invoice
from app.services.meal_period_service import get_meal_period_by_name


def _two_restaurants(db, make_user, make_restaurant):
    owner = make_user("owner@example.com")
    first = make_restaurant(owner, "First")
    second = make_restaurant(owner, "Second")
    return first, second


def test_matching_category_and_group_passes(db, make_user, make_restaurant) -> None:
    first, _ = _two_restaurants(db, make_user, make_restaurant)
    food = get_category_by_name(db, first.id, "Food")

    category_and_group_match(db, food.id, food.cat_group_id)


def test_category_from_other_restaurant_is_rejected(db, make_user, make_restaurant) -> None:
    first, second = _two_restaurants(db, make_user, make_restaurant)
    food = get_category_by_name(db, first.id, "Food")
    other_food = get_category_by_name(db, second.id, "Food")

    with pytest.raises(BadRequestError) as exc_info:
        category_and_group_match(db, food.id, other_food.cat_group_id)

    assert exc_info.value.message == (
        f"Category {food.id} and group {other_food.cat_group_id} are not associated with the same restaurant."
    )


def test_missing_id_is_reported_before_mismatch(db, make_user, make_restaurant) -> None:
    first, _ = _two_restaurants(db, make_user, make_restaurant)
    food = get_category_by_name(db, first.id, "Food")

    with pytest.raises(NotFoundError, match="There is no category group with id 9999."):
        category_and_group_match(db, food.id, 9999)
    with pytest.raises(NotFoundError, match="There is no category with id 9999."):
        category_and_group_match(db, 9999, 9999)


def test_cat_group_and_restaurant(db, make_user, make_restaurant) -> None:
    first, second = _two_restaurants(db, make_user, make_restaurant)
    food = get_category_by_name(db, first.id, "Food")

    cat_group_and_restaurant_match(db, food.cat_group_id, first.id)
    with pytest.raises(BadRequestError):
        cat_group_and_restaurant_match(db, food.cat_group_id, second.id)
    with pytest.raises(NotFoundError, match="There is no restaurant with id 777."):
        cat_group_and_restaurant_match(db, food.cat_group_id, 777)


def test_category_and_meal_period(db, make_user, make_restaurant) -> None:
    first, second = _two_restaurants(db, make_user, make_restaurant)
    beer = get_category_by_name(db, first.id, "Beer")
    dinner = get_meal_period_by_name(db, first.id, "Dinner")
    other_dinner = get_meal_period_by_name(db, second.id, "Dinner")

    category_and_meal_period_match(db, beer.id, dinner.id)
    with pytest.raises(BadRequestError):
        category_and_meal_period_match(db, beer.id, other_dinner.id)


def test_invoice_and_expense_checks(db, make_user, make_restaurant) -> None:
    first, second = _two_restaurants(db, make_user, make_restaurant)
    wine = get_category_by_name(db, first.id, "Wine")
    other_wine = get_category_by_name(db, second.id, "Wine")
    invoice = create_invoice(db, first.id, datetime.date(2024, 3, 1), "INV-1", "Vintner", Decimal("300.00"))
    expense = create_expense(db, first.id, wine.id, invoice.id, Decimal("300.00"))
    db.commit()

    invoice_and_category_match(db, invoice.id, wine.id)
    expense_invoice_category_match(db, expense.id, invoice.id, wine.id)

    with pytest.raises(BadRequestError):
        invoice_and_category_match(db, invoice.id, other_wine.id)
    with pytest.raises(BadRequestError, match=f"Expense {expense.id} and category {other_wine.id}"):
        expense_invoice_category_match(db, expense.id, invoice.id, other_wine.id)
    with pytest.raises(NotFoundError, match="There is no expense with id 5000."):
        expense_invoice_category_match(db, 5000, invoice.id, other_wine.id)
