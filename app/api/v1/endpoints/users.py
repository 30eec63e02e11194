"""User account endpoints; every route is limited to the account holder."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.security import get_current_user
from app.db.session import get_db
from app.models.user import User
from app.schemas.common import DeletedResponse
from app.schemas.user import UserDetail, UserResponse, UserRestaurantRead, UserUpdate
from app.services.user_service import get_user, remove_user, update_user

router: APIRouter = APIRouter()


def serialize_user_detail(user: User) -> UserDetail:
    restaurants = [
        UserRestaurantRead(
            restaurant_id=membership.restaurant_id,
            restaurant_name=membership.restaurant.name,
            is_admin=membership.is_admin,
            is_owner=membership.restaurant.owner_id == user.id,
        )
        for membership in user.memberships
    ]
    return UserDetail(
        id=user.id,
        email_address=user.email_address,
        first_name=user.first_name,
        last_name=user.last_name,
        restaurants=restaurants,
    )


@router.get("/{user_id}", response_model=UserResponse)
def read_user(
    user_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> UserResponse:
    user = get_user(db, current_user.id, user_id)
    return UserResponse(user=serialize_user_detail(user))


@router.patch("/{user_id}", response_model=UserResponse)
def patch_user(
    user_id: int,
    payload: UserUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> UserResponse:
    user = update_user(db, current_user.id, user_id, payload)
    return UserResponse(user=serialize_user_detail(user))


@router.delete("/{user_id}", response_model=DeletedResponse)
def delete_user(
    user_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> DeletedResponse:
    remove_user(db, current_user.id, user_id)
    return DeletedResponse(deleted=user_id)
