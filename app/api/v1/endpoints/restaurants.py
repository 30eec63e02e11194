"""Restaurant and membership endpoints."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.security import get_current_user
from app.db.session import get_db
from app.models.restaurant import Restaurant
from app.models.user import User
from app.schemas.category import CategoryGroupRead, CategoryRead
from app.schemas.common import DeletedResponse
from app.schemas.invoice import ExpenseRead, InvoiceRead
from app.schemas.meal_period import MealPeriodCategoryRead, MealPeriodRead
from app.schemas.restaurant import (
    MembershipCreate,
    MembershipRead,
    MembershipResponse,
    MembershipUpdate,
    RestaurantCreate,
    RestaurantDetail,
    RestaurantDetailResponse,
    RestaurantMemberRead,
    RestaurantRead,
    RestaurantResponse,
    RestaurantUpdate,
)
from app.schemas.sale import DefaultSaleRead
from app.services.membership_service import add_member, remove_member, update_member
from app.services.restaurant_service import (
    get_caller_roles,
    get_restaurant,
    register_restaurant,
    remove_restaurant,
    update_restaurant,
)

router: APIRouter = APIRouter()


def _serialize_restaurant_detail(db: Session, restaurant: Restaurant, actor_id: int) -> RestaurantDetail:
    is_admin, is_owner = get_caller_roles(db, restaurant, actor_id)
    users = [
        RestaurantMemberRead(
            id=membership.id,
            restaurant_id=membership.restaurant_id,
            user_id=membership.user_id,
            is_admin=membership.is_admin,
            email_address=membership.user.email_address,
            first_name=membership.user.first_name,
            last_name=membership.user.last_name,
        )
        for membership in restaurant.members
    ]
    return RestaurantDetail(
        **RestaurantRead.model_validate(restaurant).model_dump(),
        users=users,
        meal_periods=[MealPeriodRead.model_validate(row) for row in restaurant.meal_periods],
        cat_groups=[CategoryGroupRead.model_validate(row) for row in restaurant.cat_groups],
        categories=[CategoryRead.model_validate(row) for row in restaurant.categories],
        meal_period_categories=[MealPeriodCategoryRead.model_validate(row) for row in restaurant.meal_period_categories],
        default_sales=[DefaultSaleRead.model_validate(row) for row in restaurant.default_sales],
        invoices=[InvoiceRead.model_validate(row) for row in restaurant.invoices],
        expenses=[ExpenseRead.model_validate(row) for row in restaurant.expenses],
        is_admin=is_admin,
        is_owner=is_owner,
    )


@router.post("", response_model=RestaurantResponse, status_code=status.HTTP_201_CREATED)
def create_restaurant(
    payload: RestaurantCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> RestaurantResponse:
    """Register a restaurant owned by the caller, seeded with the default taxonomy."""
    restaurant = register_restaurant(db, current_user.id, payload)
    return RestaurantResponse(restaurant=RestaurantRead.model_validate(restaurant))


@router.get("/{restaurant_id}", response_model=RestaurantDetailResponse)
def read_restaurant(
    restaurant_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> RestaurantDetailResponse:
    restaurant = get_restaurant(db, current_user.id, restaurant_id)
    return RestaurantDetailResponse(restaurant=_serialize_restaurant_detail(db, restaurant, current_user.id))


@router.patch("/{restaurant_id}", response_model=RestaurantResponse)
def patch_restaurant(
    restaurant_id: int,
    payload: RestaurantUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> RestaurantResponse:
    restaurant = update_restaurant(db, current_user.id, restaurant_id, payload)
    return RestaurantResponse(restaurant=RestaurantRead.model_validate(restaurant))


@router.delete("/{restaurant_id}", response_model=DeletedResponse)
def delete_restaurant(
    restaurant_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> DeletedResponse:
    remove_restaurant(db, current_user.id, restaurant_id)
    return DeletedResponse(deleted=restaurant_id)


@router.post(
    "/{restaurant_id}/users/{user_id}",
    response_model=MembershipResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_membership(
    restaurant_id: int,
    user_id: int,
    payload: MembershipCreate | None = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> MembershipResponse:
    is_admin = payload.is_admin if payload is not None else False
    membership = add_member(db, current_user.id, restaurant_id, user_id, is_admin=is_admin)
    return MembershipResponse(restaurant_user=MembershipRead.model_validate(membership))


@router.patch("/{restaurant_id}/users/{user_id}", response_model=MembershipResponse)
def patch_membership(
    restaurant_id: int,
    user_id: int,
    payload: MembershipUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> MembershipResponse:
    membership = update_member(db, current_user.id, restaurant_id, user_id, is_admin=payload.is_admin)
    return MembershipResponse(restaurant_user=MembershipRead.model_validate(membership))


@router.delete("/{restaurant_id}/users/{user_id}", response_model=DeletedResponse)
def delete_membership(
    restaurant_id: int,
    user_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> DeletedResponse:
    """Remove a member; members may remove themselves without admin rights."""
    remove_member(db, current_user.id, restaurant_id, user_id)
    return DeletedResponse(deleted=user_id)
