"""Meal period and meal period/category allocation ORM models."""

from decimal import Decimal

from sqlalchemy import ForeignKey, Numeric, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base


class MealPeriod(Base):
    """Service period of the day, e.g. Brunch or Dinner."""

    __tablename__ = "meal_periods"
    __table_args__ = (
        UniqueConstraint("restaurant_id", "name", name="uq_meal_period_restaurant_name"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    restaurant_id: Mapped[int] = mapped_column(ForeignKey("restaurants.id"), nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    meal_period_categories: Mapped[list["MealPeriodCategory"]] = relationship(cascade="all")
    default_sales: Mapped[list["DefaultSale"]] = relationship(cascade="all")


class MealPeriodCategory(Base):
    """Share of a meal period's sales expected from one category."""

    __tablename__ = "meal_periods_categories"
    __table_args__ = (
        UniqueConstraint("meal_period_id", "category_id", name="uq_meal_period_category"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    restaurant_id: Mapped[int] = mapped_column(ForeignKey("restaurants.id"), nullable=False, index=True)
    meal_period_id: Mapped[int] = mapped_column(ForeignKey("meal_periods.id"), nullable=False, index=True)
    category_id: Mapped[int] = mapped_column(ForeignKey("categories.id"), nullable=False, index=True)
    sales_percent_of_period: Mapped[Decimal] = mapped_column(Numeric(5, 4), nullable=False)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    sales: Mapped[list["Sale"]] = relationship(cascade="all")
