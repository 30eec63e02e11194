"""Membership add/update/remove tests, including owner protection."""

import pytest
from sqlalchemy import select

from app.core.errors import BadRequestError, NotFoundError, UnauthorizedError
from app.models import RestaurantUser
from app.services.access import get_membership, is_admin
from app.services.membership_service import add_member, remove_member, update_member


def _setup(db, make_user, make_restaurant):
    owner = make_user("owner@example.com")
    staff = make_user("staff@example.com")
    restaurant = make_restaurant(owner)
    return owner, staff, restaurant


def test_admin_can_add_and_promote_member(db, make_user, make_restaurant) -> None:
    owner, staff, restaurant = _setup(db, make_user, make_restaurant)

    membership = add_member(db, owner.id, restaurant.id, staff.id)
    assert membership.is_admin is False

    update_member(db, owner.id, restaurant.id, staff.id, is_admin=True)
    assert is_admin(db, restaurant.id, staff.id)


def test_duplicate_membership_is_rejected(db, make_user, make_restaurant) -> None:
    owner, staff, restaurant = _setup(db, make_user, make_restaurant)
    add_member(db, owner.id, restaurant.id, staff.id)

    with pytest.raises(BadRequestError):
        add_member(db, owner.id, restaurant.id, staff.id)

    rows = db.scalars(select(RestaurantUser).where(RestaurantUser.user_id == staff.id)).all()
    assert len(rows) == 1


def test_non_admin_cannot_add_members(db, make_user, make_restaurant) -> None:
    owner, staff, restaurant = _setup(db, make_user, make_restaurant)
    newcomer = make_user("newcomer@example.com")
    add_member(db, owner.id, restaurant.id, staff.id)

    with pytest.raises(UnauthorizedError):
        add_member(db, staff.id, restaurant.id, newcomer.id)
    assert get_membership(db, restaurant.id, newcomer.id) is None


def test_owner_membership_cannot_be_changed(db, make_user, make_restaurant) -> None:
    owner, staff, restaurant = _setup(db, make_user, make_restaurant)
    add_member(db, owner.id, restaurant.id, staff.id, is_admin=True)

    with pytest.raises(UnauthorizedError, match="Cannot modify the owner's restaurant association."):
        update_member(db, staff.id, restaurant.id, owner.id, is_admin=False)
    with pytest.raises(UnauthorizedError, match="Cannot modify the owner's restaurant association."):
        remove_member(db, staff.id, restaurant.id, owner.id)

    assert is_admin(db, restaurant.id, owner.id)


def test_owner_cannot_remove_themself(db, make_user, make_restaurant) -> None:
    owner, _, restaurant = _setup(db, make_user, make_restaurant)

    with pytest.raises(UnauthorizedError):
        remove_member(db, owner.id, restaurant.id, owner.id)
    assert get_membership(db, restaurant.id, owner.id) is not None


def test_member_can_remove_themself_without_admin(db, make_user, make_restaurant) -> None:
    owner, staff, restaurant = _setup(db, make_user, make_restaurant)
    add_member(db, owner.id, restaurant.id, staff.id)

    remove_member(db, staff.id, restaurant.id, staff.id)

    assert get_membership(db, restaurant.id, staff.id) is None


def test_member_cannot_remove_someone_else(db, make_user, make_restaurant) -> None:
    owner, staff, restaurant = _setup(db, make_user, make_restaurant)
    colleague = make_user("colleague@example.com")
    add_member(db, owner.id, restaurant.id, staff.id)
    add_member(db, owner.id, restaurant.id, colleague.id)

    with pytest.raises(UnauthorizedError):
        remove_member(db, staff.id, restaurant.id, colleague.id)
    assert get_membership(db, restaurant.id, colleague.id) is not None


def test_removing_missing_membership_is_not_found(db, make_user, make_restaurant) -> None:
    owner, staff, restaurant = _setup(db, make_user, make_restaurant)

    with pytest.raises(NotFoundError):
        remove_member(db, owner.id, restaurant.id, staff.id)
