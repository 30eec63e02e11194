"""User account ORM model."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base


class User(Base):
    """Account that can own restaurants or be granted access to them."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True)
    email_address: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    first_name: Mapped[str] = mapped_column(String(128), nullable=False)
    last_name: Mapped[str] = mapped_column(String(128), nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    memberships: Mapped[list["RestaurantUser"]] = relationship(
        back_populates="user",
        cascade="all",
    )
    owned_restaurants: Mapped[list["Restaurant"]] = relationship(
        back_populates="owner",
        cascade="all",
    )
