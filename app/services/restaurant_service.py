"""Restaurant lifecycle: registration with bootstrap, reads, updates and removal."""

import logging

from sqlalchemy.orm import Session

from app.db.session import transaction
from app.models.restaurant import Restaurant
from app.schemas.restaurant import RestaurantCreate, RestaurantUpdate
from app.services.access import get_membership, require_admin, require_member
from app.services.bootstrap import bootstrap_restaurant
from app.services.existence import check_restaurant_exists, check_user_exists
from app.services.membership_service import create_membership
from app.services.store import apply_updates

logger = logging.getLogger(__name__)


def create_restaurant(db: Session, owner_id: int, payload: RestaurantCreate) -> Restaurant:
    """Add a restaurant row owned by owner_id and flush it."""
    restaurant = Restaurant(owner_id=owner_id, **payload.model_dump())
    db.add(restaurant)
    db.flush()
    return restaurant


def register_restaurant(db: Session, owner_id: int, payload: RestaurantCreate) -> Restaurant:
    """Create a restaurant, its owner's admin membership and the default taxonomy atomically."""
    with transaction(db):
        check_user_exists(db, owner_id)
        restaurant = create_restaurant(db, owner_id, payload)
        create_membership(db, restaurant.id, owner_id, is_admin=True)
        bootstrap_restaurant(db, restaurant.id)
    logger.info("[RESTAURANT] Registered restaurant_id=%s owner_id=%s", restaurant.id, owner_id)
    return restaurant


def get_restaurant(db: Session, actor_id: int, restaurant_id: int) -> Restaurant:
    require_member(db, restaurant_id, actor_id)
    return check_restaurant_exists(db, restaurant_id)


def get_caller_roles(db: Session, restaurant: Restaurant, actor_id: int) -> tuple[bool, bool]:
    """Return ``(is_admin, is_owner)`` for the caller within the restaurant."""
    membership = get_membership(db, restaurant.id, actor_id)
    return membership is not None and membership.is_admin, restaurant.owner_id == actor_id


def update_restaurant(db: Session, actor_id: int, restaurant_id: int, payload: RestaurantUpdate) -> Restaurant:
    with transaction(db):
        require_admin(db, restaurant_id, actor_id)
        restaurant = check_restaurant_exists(db, restaurant_id)
        apply_updates(restaurant, payload)
    return restaurant


def remove_restaurant(db: Session, actor_id: int, restaurant_id: int) -> None:
    """Delete a restaurant and everything scoped to it."""
    with transaction(db):
        require_admin(db, restaurant_id, actor_id)
        restaurant = check_restaurant_exists(db, restaurant_id)
        db.delete(restaurant)
    logger.info("[RESTAURANT] Removed restaurant_id=%s by user_id=%s", restaurant_id, actor_id)
