"""Membership-based access check tests."""

import pytest

from app.core.errors import NotFoundError, UnauthorizedError
from app.services.access import is_admin, is_member, require_admin, require_member
from app.services.membership_service import add_member


def test_owner_is_admin_and_member(db, make_user, make_restaurant) -> None:
    owner = make_user("owner@example.com")
    restaurant = make_restaurant(owner)

    assert is_member(db, restaurant.id, owner.id)
    assert is_admin(db, restaurant.id, owner.id)


def test_plain_member_is_not_admin(db, make_user, make_restaurant) -> None:
    owner = make_user("owner@example.com")
    staff = make_user("staff@example.com")
    restaurant = make_restaurant(owner)
    add_member(db, owner.id, restaurant.id, staff.id)

    assert is_member(db, restaurant.id, staff.id)
    assert not is_admin(db, restaurant.id, staff.id)
    require_member(db, restaurant.id, staff.id)
    with pytest.raises(UnauthorizedError):
        require_admin(db, restaurant.id, staff.id)


def test_admin_implies_member(db, make_user, make_restaurant) -> None:
    owner = make_user("owner@example.com")
    manager = make_user("manager@example.com")
    restaurant = make_restaurant(owner)
    add_member(db, owner.id, restaurant.id, manager.id, is_admin=True)

    for user in (owner, manager):
        assert is_admin(db, restaurant.id, user.id)
        assert is_member(db, restaurant.id, user.id)


def test_outsider_is_denied_with_explicit_error(db, make_user, make_restaurant) -> None:
    owner = make_user("owner@example.com")
    outsider = make_user("outsider@example.com")
    restaurant = make_restaurant(owner)

    assert not is_member(db, restaurant.id, outsider.id)
    with pytest.raises(UnauthorizedError) as exc_info:
        require_member(db, restaurant.id, outsider.id)

    assert exc_info.value.status_code == 401
    assert exc_info.value.message == f"User {outsider.id} is not authorized to access restaurant {restaurant.id}."


def test_unknown_ids_raise_not_found(db, make_user, make_restaurant) -> None:
    owner = make_user("owner@example.com")
    restaurant = make_restaurant(owner)

    with pytest.raises(NotFoundError, match="There is no restaurant with id 404."):
        is_member(db, 404, owner.id)
    with pytest.raises(NotFoundError, match="There is no user with id 404."):
        is_admin(db, restaurant.id, 404)
