"""Restaurant and membership ORM models."""

from sqlalchemy import Boolean, ForeignKey, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base


class Restaurant(Base):
    """A tenant: every financial record is scoped to one restaurant."""

    __tablename__ = "restaurants"

    id: Mapped[int] = mapped_column(primary_key=True)
    owner_id: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    address: Mapped[str | None] = mapped_column(String(255), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(64), nullable=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    website: Mapped[str | None] = mapped_column(String(255), nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    owner: Mapped["User"] = relationship(back_populates="owned_restaurants")
    members: Mapped[list["RestaurantUser"]] = relationship(
        back_populates="restaurant",
        cascade="all",
        order_by="RestaurantUser.id",
    )

    cat_groups: Mapped[list["CategoryGroup"]] = relationship(cascade="all")
    categories: Mapped[list["Category"]] = relationship(cascade="all")
    meal_periods: Mapped[list["MealPeriod"]] = relationship(cascade="all")
    meal_period_categories: Mapped[list["MealPeriodCategory"]] = relationship(cascade="all")
    default_sales: Mapped[list["DefaultSale"]] = relationship(cascade="all")
    sales: Mapped[list["Sale"]] = relationship(cascade="all")
    invoices: Mapped[list["Invoice"]] = relationship(cascade="all")
    expenses: Mapped[list["Expense"]] = relationship(cascade="all")


class RestaurantUser(Base):
    """Membership row granting a user access to a restaurant."""

    __tablename__ = "restaurants_users"
    __table_args__ = (
        UniqueConstraint("restaurant_id", "user_id", name="uq_restaurant_user"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    restaurant_id: Mapped[int] = mapped_column(ForeignKey("restaurants.id"), nullable=False, index=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False, index=True)
    is_admin: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    restaurant: Mapped[Restaurant] = relationship(back_populates="members")
    user: Mapped["User"] = relationship(back_populates="memberships")
