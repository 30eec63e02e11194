"""Sales, default sale baselines and day-of-week reference ORM models."""

import datetime
from decimal import Decimal

from sqlalchemy import Date, ForeignKey, Numeric, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base

DAYS_OF_WEEK: tuple[tuple[int, str], ...] = (
    (1, "Monday"),
    (2, "Tuesday"),
    (3, "Wednesday"),
    (4, "Thursday"),
    (5, "Friday"),
    (6, "Saturday"),
    (7, "Sunday"),
)


class DayOfWeek(Base):
    """Reference row for ISO weekday numbers."""

    __tablename__ = "days_of_week"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=False)
    name: Mapped[str] = mapped_column(String(16), nullable=False, unique=True)


class DefaultSale(Base):
    """Baseline sales total expected for a meal period on a weekday."""

    __tablename__ = "default_sales"
    __table_args__ = (
        UniqueConstraint("restaurant_id", "meal_period_id", "day_id", name="uq_default_sale_restaurant_period_day"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    restaurant_id: Mapped[int] = mapped_column(ForeignKey("restaurants.id"), nullable=False, index=True)
    meal_period_id: Mapped[int] = mapped_column(ForeignKey("meal_periods.id"), nullable=False, index=True)
    day_id: Mapped[int] = mapped_column(ForeignKey("days_of_week.id"), nullable=False)
    total: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)


class Sale(Base):
    """Expected and actual sales for one meal period/category on one date."""

    __tablename__ = "sales"
    __table_args__ = (
        UniqueConstraint("restaurant_id", "meal_period_cat_id", "date", name="uq_sale_restaurant_period_cat_date"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    restaurant_id: Mapped[int] = mapped_column(ForeignKey("restaurants.id"), nullable=False, index=True)
    meal_period_cat_id: Mapped[int] = mapped_column(
        ForeignKey("meal_periods_categories.id"),
        nullable=False,
        index=True,
    )
    date: Mapped[datetime.date] = mapped_column(Date, nullable=False, index=True)
    expected_sales: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    actual_sales: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
