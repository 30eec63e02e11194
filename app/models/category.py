"""Category group and category ORM models."""

from decimal import Decimal

from sqlalchemy import ForeignKey, Numeric, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base


class CategoryGroup(Base):
    """Named grouping of categories within one restaurant."""

    __tablename__ = "cat_groups"
    __table_args__ = (
        UniqueConstraint("restaurant_id", "name", name="uq_cat_group_restaurant_name"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    restaurant_id: Mapped[int] = mapped_column(ForeignKey("restaurants.id"), nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Deleting a group detaches its categories instead of deleting them.
    categories: Mapped[list["Category"]] = relationship(order_by="Category.id")


class Category(Base):
    """Revenue/expense category with its cost-of-goods-sold fraction."""

    __tablename__ = "categories"
    __table_args__ = (
        UniqueConstraint("restaurant_id", "name", name="uq_category_restaurant_name"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    restaurant_id: Mapped[int] = mapped_column(ForeignKey("restaurants.id"), nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    cat_group_id: Mapped[int | None] = mapped_column(ForeignKey("cat_groups.id"), nullable=True, index=True)
    cogs_percent: Mapped[Decimal] = mapped_column(Numeric(5, 4), nullable=False, default=Decimal("0"))
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    meal_period_categories: Mapped[list["MealPeriodCategory"]] = relationship(cascade="all")
    expenses: Mapped[list["Expense"]] = relationship(cascade="all")
