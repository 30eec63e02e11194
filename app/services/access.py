"""Membership-based access checks for restaurant-scoped operations."""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.core.errors import UnauthorizedError
from app.models.restaurant import RestaurantUser
from app.services.existence import check_restaurant_exists, check_user_exists

logger = logging.getLogger(__name__)


def get_membership(db: Session, restaurant_id: int, user_id: int) -> RestaurantUser | None:
    return db.scalar(
        select(RestaurantUser)
        .where(RestaurantUser.restaurant_id == restaurant_id, RestaurantUser.user_id == user_id)
        .limit(1)
    )


def is_member(db: Session, restaurant_id: int, user_id: int) -> bool:
    """Return whether a membership row exists; unknown ids raise NotFoundError."""
    check_restaurant_exists(db, restaurant_id)
    check_user_exists(db, user_id)
    return get_membership(db, restaurant_id, user_id) is not None


def is_admin(db: Session, restaurant_id: int, user_id: int) -> bool:
    """Return whether the user holds an admin membership; unknown ids raise NotFoundError."""
    check_restaurant_exists(db, restaurant_id)
    check_user_exists(db, user_id)
    membership = get_membership(db, restaurant_id, user_id)
    return membership is not None and membership.is_admin


def require_member(db: Session, restaurant_id: int, user_id: int, action: str = "access") -> None:
    if not is_member(db, restaurant_id, user_id):
        logger.info("[ACCESS] Denied non-member user_id=%s restaurant_id=%s action=%s", user_id, restaurant_id, action)
        raise UnauthorizedError.for_action(user_id, action, restaurant_id)


def require_admin(db: Session, restaurant_id: int, user_id: int, action: str = "manage") -> None:
    if not is_admin(db, restaurant_id, user_id):
        logger.info("[ACCESS] Denied non-admin user_id=%s restaurant_id=%s action=%s", user_id, restaurant_id, action)
        raise UnauthorizedError.for_action(user_id, action, restaurant_id)
