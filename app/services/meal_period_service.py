"""Meal period and meal period/category allocation service operations."""

from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.core.errors import BadRequestError, NotFoundError
from app.db.session import transaction
from app.models.meal_period import MealPeriod, MealPeriodCategory
from app.schemas.meal_period import (
    MealPeriodCategoryCreate,
    MealPeriodCategoryUpdate,
    MealPeriodCreate,
    MealPeriodUpdate,
)
from app.services.access import require_admin, require_member
from app.services.consistency import category_and_meal_period_match
from app.services.existence import check_meal_period_exists
from app.services.store import apply_updates


def create_meal_period(db: Session, restaurant_id: int, name: str, notes: str | None = None) -> MealPeriod:
    """Add a meal period row and flush it; the caller commits."""
    meal_period = MealPeriod(restaurant_id=restaurant_id, name=name, notes=notes)
    db.add(meal_period)
    db.flush()
    return meal_period


def create_meal_period_category(
    db: Session,
    restaurant_id: int,
    meal_period_id: int,
    category_id: int,
    sales_percent_of_period: Decimal,
    notes: str | None = None,
) -> MealPeriodCategory:
    """Add a meal period and category allocation row and flush it; the caller commits."""
    meal_period_cat = MealPeriodCategory(
        restaurant_id=restaurant_id,
        meal_period_id=meal_period_id,
        category_id=category_id,
        sales_percent_of_period=sales_percent_of_period,
        notes=notes,
    )
    db.add(meal_period_cat)
    db.flush()
    return meal_period_cat


def get_meal_period_by_name(db: Session, restaurant_id: int, name: str) -> MealPeriod | None:
    """Return the restaurant's meal period with this name, if any."""
    return db.scalar(
        select(MealPeriod).where(MealPeriod.restaurant_id == restaurant_id, MealPeriod.name == name).limit(1)
    )


def get_meal_period_category_by_pair(db: Session, meal_period_id: int, category_id: int) -> MealPeriodCategory | None:
    """Return the allocation linking this meal period and category, if any."""
    return db.scalar(
        select(MealPeriodCategory)
        .where(MealPeriodCategory.meal_period_id == meal_period_id, MealPeriodCategory.category_id == category_id)
        .limit(1)
    )


def _ensure_meal_period_name_available(db: Session, restaurant_id: int, name: str) -> None:
    if get_meal_period_by_name(db, restaurant_id, name) is not None:
        raise BadRequestError(f"Restaurant {restaurant_id} already has a meal period named {name}.")


# Meal periods


def list_meal_periods(db: Session, actor_id: int, restaurant_id: int) -> list[MealPeriod]:
    require_member(db, restaurant_id, actor_id)
    return list(db.scalars(select(MealPeriod).where(MealPeriod.restaurant_id == restaurant_id).order_by(MealPeriod.id)))


def register_meal_period(db: Session, actor_id: int, payload: MealPeriodCreate) -> MealPeriod:
    with transaction(db):
        require_admin(db, payload.restaurant_id, actor_id)
        _ensure_meal_period_name_available(db, payload.restaurant_id, payload.name)
        meal_period = create_meal_period(db, payload.restaurant_id, payload.name, payload.notes)
    return meal_period


def get_meal_period(db: Session, actor_id: int, meal_period_id: int) -> MealPeriod:
    meal_period = check_meal_period_exists(db, meal_period_id)
    require_member(db, meal_period.restaurant_id, actor_id)
    return meal_period


def update_meal_period(db: Session, actor_id: int, meal_period_id: int, payload: MealPeriodUpdate) -> MealPeriod:
    with transaction(db):
        meal_period = check_meal_period_exists(db, meal_period_id)
        require_admin(db, meal_period.restaurant_id, actor_id)
        if payload.name is not None and payload.name != meal_period.name:
            _ensure_meal_period_name_available(db, meal_period.restaurant_id, payload.name)
        apply_updates(meal_period, payload)
    return meal_period


def remove_meal_period(db: Session, actor_id: int, meal_period_id: int) -> None:
    with transaction(db):
        meal_period = check_meal_period_exists(db, meal_period_id)
        require_admin(db, meal_period.restaurant_id, actor_id)
        db.delete(meal_period)


# Allocations of a meal period's sales across categories


def list_meal_period_categories(db: Session, actor_id: int, meal_period_id: int) -> list[MealPeriodCategory]:
    meal_period = get_meal_period(db, actor_id, meal_period_id)
    return list(
        db.scalars(
            select(MealPeriodCategory)
            .where(MealPeriodCategory.meal_period_id == meal_period.id)
            .order_by(MealPeriodCategory.id)
        )
    )


def _get_existing_allocation(db: Session, meal_period_id: int, category_id: int) -> MealPeriodCategory:
    meal_period_cat = get_meal_period_category_by_pair(db, meal_period_id, category_id)
    if meal_period_cat is None:
        raise NotFoundError(
            f"There is no meal period / category association for meal period {meal_period_id} "
            f"and category {category_id}."
        )
    return meal_period_cat


def get_meal_period_category(db: Session, actor_id: int, meal_period_id: int, category_id: int) -> MealPeriodCategory:
    meal_period = check_meal_period_exists(db, meal_period_id)
    require_member(db, meal_period.restaurant_id, actor_id)
    category_and_meal_period_match(db, category_id, meal_period_id)
    return _get_existing_allocation(db, meal_period_id, category_id)


def register_meal_period_category(
    db: Session,
    actor_id: int,
    meal_period_id: int,
    category_id: int,
    payload: MealPeriodCategoryCreate,
) -> MealPeriodCategory:
    with transaction(db):
        meal_period = check_meal_period_exists(db, meal_period_id)
        require_member(db, meal_period.restaurant_id, actor_id)
        category_and_meal_period_match(db, category_id, meal_period_id)
        if get_meal_period_category_by_pair(db, meal_period_id, category_id) is not None:
            raise BadRequestError(
                f"Meal period {meal_period_id} already has an allocation for category {category_id}."
            )
        meal_period_cat = create_meal_period_category(
            db,
            meal_period.restaurant_id,
            meal_period_id,
            category_id,
            payload.sales_percent_of_period,
            notes=payload.notes,
        )
    return meal_period_cat


def update_meal_period_category(
    db: Session,
    actor_id: int,
    meal_period_id: int,
    category_id: int,
    payload: MealPeriodCategoryUpdate,
) -> MealPeriodCategory:
    with transaction(db):
        meal_period = check_meal_period_exists(db, meal_period_id)
        require_admin(db, meal_period.restaurant_id, actor_id)
        category_and_meal_period_match(db, category_id, meal_period_id)
        meal_period_cat = _get_existing_allocation(db, meal_period_id, category_id)
        apply_updates(meal_period_cat, payload)
    return meal_period_cat


def remove_meal_period_category(db: Session, actor_id: int, meal_period_id: int, category_id: int) -> int:
    """Delete an allocation and its sales; returns the removed allocation id."""
    with transaction(db):
        meal_period = check_meal_period_exists(db, meal_period_id)
        require_admin(db, meal_period.restaurant_id, actor_id)
        category_and_meal_period_match(db, category_id, meal_period_id)
        meal_period_cat = _get_existing_allocation(db, meal_period_id, category_id)
        removed_id = meal_period_cat.id
        db.delete(meal_period_cat)
    return removed_id
