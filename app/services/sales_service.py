"""Daily sale records and default sale baselines."""

import datetime
from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.core.errors import BadRequestError
from app.db.session import transaction
from app.models.sale import DefaultSale, Sale
from app.schemas.sale import DefaultSaleCreate, DefaultSaleUpdate, SaleCreate, SaleUpdate
from app.services.access import require_admin, require_member
from app.services.consistency import meal_period_and_restaurant_match, meal_period_cat_and_restaurant_match
from app.services.existence import check_day_of_week_exists, check_default_sale_exists, check_sale_exists
from app.services.store import apply_updates


def create_sale(
    db: Session,
    restaurant_id: int,
    meal_period_cat_id: int,
    date: datetime.date,
    expected_sales: Decimal | None = None,
    actual_sales: Decimal | None = None,
    notes: str | None = None,
) -> Sale:
    """Add a sale row and flush it; the caller commits."""
    sale = Sale(
        restaurant_id=restaurant_id,
        meal_period_cat_id=meal_period_cat_id,
        date=date,
        expected_sales=expected_sales,
        actual_sales=actual_sales,
        notes=notes,
    )
    db.add(sale)
    db.flush()
    return sale


def create_default_sale(
    db: Session,
    restaurant_id: int,
    meal_period_id: int,
    day_id: int,
    total: Decimal,
    notes: str | None = None,
) -> DefaultSale:
    """Add a default sale row and flush it; the caller commits."""
    default_sale = DefaultSale(
        restaurant_id=restaurant_id,
        meal_period_id=meal_period_id,
        day_id=day_id,
        total=total,
        notes=notes,
    )
    db.add(default_sale)
    db.flush()
    return default_sale


def get_sale_by_key(db: Session, restaurant_id: int, meal_period_cat_id: int, date: datetime.date) -> Sale | None:
    """Return the sale for this restaurant, allocation and date, if any."""
    return db.scalar(
        select(Sale)
        .where(
            Sale.restaurant_id == restaurant_id,
            Sale.meal_period_cat_id == meal_period_cat_id,
            Sale.date == date,
        )
        .limit(1)
    )


def get_default_sale_by_key(db: Session, restaurant_id: int, meal_period_id: int, day_id: int) -> DefaultSale | None:
    """Return the default sale for this restaurant, meal period and weekday, if any."""
    return db.scalar(
        select(DefaultSale)
        .where(
            DefaultSale.restaurant_id == restaurant_id,
            DefaultSale.meal_period_id == meal_period_id,
            DefaultSale.day_id == day_id,
        )
        .limit(1)
    )


# Sales


def list_sales_for_date(db: Session, actor_id: int, restaurant_id: int, date: datetime.date) -> list[Sale]:
    require_member(db, restaurant_id, actor_id)
    return list(
        db.scalars(select(Sale).where(Sale.restaurant_id == restaurant_id, Sale.date == date).order_by(Sale.id))
    )


def register_sale(db: Session, actor_id: int, payload: SaleCreate) -> Sale:
    with transaction(db):
        require_member(db, payload.restaurant_id, actor_id)
        meal_period_cat_and_restaurant_match(db, payload.meal_period_cat_id, payload.restaurant_id)
        if get_sale_by_key(db, payload.restaurant_id, payload.meal_period_cat_id, payload.date) is not None:
            raise BadRequestError(
                f"A sale for meal period / category association {payload.meal_period_cat_id} "
                f"on {payload.date.isoformat()} already exists."
            )
        sale = create_sale(
            db,
            payload.restaurant_id,
            payload.meal_period_cat_id,
            payload.date,
            expected_sales=payload.expected_sales,
            actual_sales=payload.actual_sales,
            notes=payload.notes,
        )
    return sale


def get_sale(db: Session, actor_id: int, sale_id: int) -> Sale:
    sale = check_sale_exists(db, sale_id)
    require_member(db, sale.restaurant_id, actor_id)
    return sale


def update_sale(db: Session, actor_id: int, sale_id: int, payload: SaleUpdate) -> Sale:
    with transaction(db):
        sale = check_sale_exists(db, sale_id)
        require_member(db, sale.restaurant_id, actor_id)
        apply_updates(sale, payload)
    return sale


def remove_sale(db: Session, actor_id: int, sale_id: int) -> None:
    with transaction(db):
        sale = check_sale_exists(db, sale_id)
        require_member(db, sale.restaurant_id, actor_id)
        db.delete(sale)


# Default sales


def list_default_sales(db: Session, actor_id: int, restaurant_id: int) -> list[DefaultSale]:
    require_member(db, restaurant_id, actor_id)
    return list(
        db.scalars(
            select(DefaultSale)
            .where(DefaultSale.restaurant_id == restaurant_id)
            .order_by(DefaultSale.day_id, DefaultSale.meal_period_id)
        )
    )


def register_default_sale(db: Session, actor_id: int, payload: DefaultSaleCreate) -> DefaultSale:
    with transaction(db):
        require_member(db, payload.restaurant_id, actor_id)
        meal_period_and_restaurant_match(db, payload.meal_period_id, payload.restaurant_id)
        check_day_of_week_exists(db, payload.day_id)
        if get_default_sale_by_key(db, payload.restaurant_id, payload.meal_period_id, payload.day_id) is not None:
            raise BadRequestError(
                f"Meal period {payload.meal_period_id} already has a default sale for day {payload.day_id}."
            )
        default_sale = create_default_sale(
            db,
            payload.restaurant_id,
            payload.meal_period_id,
            payload.day_id,
            payload.total,
            notes=payload.notes,
        )
    return default_sale


def get_default_sale(db: Session, actor_id: int, default_sale_id: int) -> DefaultSale:
    default_sale = check_default_sale_exists(db, default_sale_id)
    require_member(db, default_sale.restaurant_id, actor_id)
    return default_sale


def update_default_sale(db: Session, actor_id: int, default_sale_id: int, payload: DefaultSaleUpdate) -> DefaultSale:
    with transaction(db):
        default_sale = check_default_sale_exists(db, default_sale_id)
        require_admin(db, default_sale.restaurant_id, actor_id)
        apply_updates(default_sale, payload)
    return default_sale


def remove_default_sale(db: Session, actor_id: int, default_sale_id: int) -> None:
    with transaction(db):
        default_sale = check_default_sale_exists(db, default_sale_id)
        require_admin(db, default_sale.restaurant_id, actor_id)
        db.delete(default_sale)
