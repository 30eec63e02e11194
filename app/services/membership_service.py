"""Restaurant membership management with owner protection."""

import logging

from sqlalchemy.orm import Session

from app.core.errors import BadRequestError, NotFoundError, UnauthorizedError
from app.db.session import transaction
from app.models.restaurant import RestaurantUser
from app.services.access import get_membership, require_admin
from app.services.existence import check_restaurant_exists, check_user_exists

logger = logging.getLogger(__name__)


def create_membership(db: Session, restaurant_id: int, user_id: int, is_admin: bool = False) -> RestaurantUser:
    """Add a restaurant membership row and flush it; the caller commits."""
    membership = RestaurantUser(restaurant_id=restaurant_id, user_id=user_id, is_admin=is_admin)
    db.add(membership)
    db.flush()
    return membership


def _ensure_not_owner(db: Session, restaurant_id: int, user_id: int) -> None:
    """Reject changes to the owner's own membership; the owner is re-read every time."""
    restaurant = check_restaurant_exists(db, restaurant_id)
    if restaurant.owner_id == user_id:
        logger.info("[MEMBERSHIP] Refused change to owner membership restaurant_id=%s", restaurant_id)
        raise UnauthorizedError("Cannot modify the owner's restaurant association.")


def _get_existing_membership(db: Session, restaurant_id: int, user_id: int) -> RestaurantUser:
    membership = get_membership(db, restaurant_id, user_id)
    if membership is None:
        raise NotFoundError(f"User {user_id} is not associated with restaurant {restaurant_id}.")
    return membership


def add_member(db: Session, actor_id: int, restaurant_id: int, user_id: int, is_admin: bool = False) -> RestaurantUser:
    with transaction(db):
        require_admin(db, restaurant_id, actor_id)
        check_user_exists(db, user_id)
        if get_membership(db, restaurant_id, user_id) is not None:
            raise BadRequestError(f"User {user_id} is already associated with restaurant {restaurant_id}.")
        membership = create_membership(db, restaurant_id, user_id, is_admin=is_admin)
    logger.info("[MEMBERSHIP] Added user_id=%s to restaurant_id=%s admin=%s", user_id, restaurant_id, is_admin)
    return membership


def update_member(db: Session, actor_id: int, restaurant_id: int, user_id: int, is_admin: bool) -> RestaurantUser:
    with transaction(db):
        require_admin(db, restaurant_id, actor_id)
        _ensure_not_owner(db, restaurant_id, user_id)
        check_user_exists(db, user_id)
        membership = _get_existing_membership(db, restaurant_id, user_id)
        membership.is_admin = is_admin
    logger.info("[MEMBERSHIP] Updated user_id=%s in restaurant_id=%s admin=%s", user_id, restaurant_id, is_admin)
    return membership


def remove_member(db: Session, actor_id: int, restaurant_id: int, user_id: int) -> None:
    """Remove a membership; members may remove themselves, anyone else needs admin."""
    with transaction(db):
        _ensure_not_owner(db, restaurant_id, user_id)
        check_user_exists(db, user_id)
        if actor_id != user_id:
            require_admin(db, restaurant_id, actor_id)
        membership = _get_existing_membership(db, restaurant_id, user_id)
        db.delete(membership)
    logger.info("[MEMBERSHIP] Removed user_id=%s from restaurant_id=%s", user_id, restaurant_id)
