"""Single-entity existence checks by primary key."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from sqlalchemy.orm import Session

from app.core.errors import NotFoundError
from app.db.base import Base
from app.models import (
    Category,
    CategoryGroup,
    DayOfWeek,
    DefaultSale,
    Expense,
    Invoice,
    MealPeriod,
    MealPeriodCategory,
    Restaurant,
    Sale,
    User,
)


class EntityKind(str, Enum):
    """Entity kinds that can be looked up by id; values are display labels."""

    RESTAURANT = "restaurant"
    USER = "user"
    MEAL_PERIOD = "meal period"
    CATEGORY_GROUP = "category group"
    CATEGORY = "category"
    MEAL_PERIOD_CATEGORY = "meal period / category association"
    DAY_OF_WEEK = "day of the week"
    SALE = "sale record"
    DEFAULT_SALE = "default sale entry"
    INVOICE = "invoice"
    EXPENSE = "expense"

    @property
    def label(self) -> str:
        return self.value


_MODELS: dict[EntityKind, type[Base]] = {
    EntityKind.RESTAURANT: Restaurant,
    EntityKind.USER: User,
    EntityKind.MEAL_PERIOD: MealPeriod,
    EntityKind.CATEGORY_GROUP: CategoryGroup,
    EntityKind.CATEGORY: Category,
    EntityKind.MEAL_PERIOD_CATEGORY: MealPeriodCategory,
    EntityKind.DAY_OF_WEEK: DayOfWeek,
    EntityKind.SALE: Sale,
    EntityKind.DEFAULT_SALE: DefaultSale,
    EntityKind.INVOICE: Invoice,
    EntityKind.EXPENSE: Expense,
}


@dataclass(frozen=True)
class Found:
    """Lookup result for an id that resolved to a row."""

    kind: EntityKind
    entity: Any

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True)
class Missing:
    """Lookup result for an id with no matching row."""

    kind: EntityKind
    entity_id: int

    def __bool__(self) -> bool:
        return False

    def to_error(self) -> NotFoundError:
        return NotFoundError(kind=self.kind.label, entity_id=self.entity_id)


LookupResult = Found | Missing


def find_entity(db: Session, kind: EntityKind, entity_id: int) -> LookupResult:
    """Look up one row by primary key without deciding whether absence is an error."""
    entity = db.get(_MODELS[kind], entity_id)
    if entity is None:
        return Missing(kind=kind, entity_id=entity_id)
    return Found(kind=kind, entity=entity)


def ensure_exists(db: Session, kind: EntityKind, entity_id: int) -> Any:
    """Return the row for ``entity_id`` or raise NotFoundError naming the kind and id."""
    result = find_entity(db, kind, entity_id)
    if isinstance(result, Missing):
        raise result.to_error()
    return result.entity


def check_restaurant_exists(db: Session, restaurant_id: int) -> Restaurant:
    """Return the restaurant or raise NotFoundError."""
    return ensure_exists(db, EntityKind.RESTAURANT, restaurant_id)


def check_user_exists(db: Session, user_id: int) -> User:
    """Return the user or raise NotFoundError."""
    return ensure_exists(db, EntityKind.USER, user_id)


def check_meal_period_exists(db: Session, meal_period_id: int) -> MealPeriod:
    """Return the meal period or raise NotFoundError."""
    return ensure_exists(db, EntityKind.MEAL_PERIOD, meal_period_id)


def check_cat_group_exists(db: Session, cat_group_id: int) -> CategoryGroup:
    """Return the category group or raise NotFoundError."""
    return ensure_exists(db, EntityKind.CATEGORY_GROUP, cat_group_id)


def check_category_exists(db: Session, category_id: int) -> Category:
    """Return the category or raise NotFoundError."""
    return ensure_exists(db, EntityKind.CATEGORY, category_id)


def check_meal_period_cat_exists(db: Session, meal_period_cat_id: int) -> MealPeriodCategory:
    """Return the meal period allocation or raise NotFoundError."""
    return ensure_exists(db, EntityKind.MEAL_PERIOD_CATEGORY, meal_period_cat_id)


def check_day_of_week_exists(db: Session, day_id: int) -> DayOfWeek:
    """Return the day of the week or raise NotFoundError."""
    return ensure_exists(db, EntityKind.DAY_OF_WEEK, day_id)


def check_sale_exists(db: Session, sale_id: int) -> Sale:
    """Return the sale or raise NotFoundError."""
    return ensure_exists(db, EntityKind.SALE, sale_id)


def check_default_sale_exists(db: Session, default_sale_id: int) -> DefaultSale:
    """Return the default sale or raise NotFoundError."""
    return ensure_exists(db, EntityKind.DEFAULT_SALE, default_sale_id)


def check_invoice_exists(db: Session, invoice_id: int) -> Invoice:
    """Return the invoice or raise NotFoundError."""
    return ensure_exists(db, EntityKind.INVOICE, invoice_id)


def check_expense_exists(db: Session, expense_id: int) -> Expense:
    """Return the expense or raise NotFoundError."""
    return ensure_exists(db, EntityKind.EXPENSE, expense_id)
