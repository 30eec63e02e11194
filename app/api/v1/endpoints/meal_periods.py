"""Meal period and meal period/category allocation endpoints."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.security import get_current_user
from app.db.session import get_db
from app.models.restaurant import Restaurant
from app.models.user import User
from app.schemas.common import DeletedResponse
from app.schemas.meal_period import (
    MealPeriodCategoryCreate,
    MealPeriodCategoryListResponse,
    MealPeriodCategoryRead,
    MealPeriodCategoryResponse,
    MealPeriodCategoryUpdate,
    MealPeriodCreate,
    MealPeriodDetail,
    MealPeriodDetailResponse,
    MealPeriodListResponse,
    MealPeriodRead,
    MealPeriodResponse,
    MealPeriodUpdate,
)
from app.services.meal_period_service import (
    get_meal_period,
    get_meal_period_category,
    list_meal_period_categories,
    list_meal_periods,
    register_meal_period,
    register_meal_period_category,
    remove_meal_period,
    remove_meal_period_category,
    update_meal_period,
    update_meal_period_category,
)

router: APIRouter = APIRouter()


@router.post("", response_model=MealPeriodResponse, status_code=status.HTTP_201_CREATED)
def create_meal_period(
    payload: MealPeriodCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> MealPeriodResponse:
    meal_period = register_meal_period(db, current_user.id, payload)
    return MealPeriodResponse(meal_period=MealPeriodRead.model_validate(meal_period))


@router.get("/restaurants/{restaurant_id}", response_model=MealPeriodListResponse)
def read_restaurant_meal_periods(
    restaurant_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> MealPeriodListResponse:
    meal_periods = list_meal_periods(db, current_user.id, restaurant_id)
    return MealPeriodListResponse(meal_periods=[MealPeriodRead.model_validate(row) for row in meal_periods])


@router.get("/{meal_period_id}", response_model=MealPeriodDetailResponse)
def read_meal_period(
    meal_period_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> MealPeriodDetailResponse:
    meal_period = get_meal_period(db, current_user.id, meal_period_id)
    restaurant = db.get(Restaurant, meal_period.restaurant_id)
    detail = MealPeriodDetail(
        **MealPeriodRead.model_validate(meal_period).model_dump(),
        restaurant_name=restaurant.name,
    )
    return MealPeriodDetailResponse(meal_period=detail)


@router.patch("/{meal_period_id}", response_model=MealPeriodResponse)
def patch_meal_period(
    meal_period_id: int,
    payload: MealPeriodUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> MealPeriodResponse:
    meal_period = update_meal_period(db, current_user.id, meal_period_id, payload)
    return MealPeriodResponse(meal_period=MealPeriodRead.model_validate(meal_period))


@router.delete("/{meal_period_id}", response_model=DeletedResponse)
def delete_meal_period(
    meal_period_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> DeletedResponse:
    remove_meal_period(db, current_user.id, meal_period_id)
    return DeletedResponse(deleted=meal_period_id)


@router.get("/{meal_period_id}/categories", response_model=MealPeriodCategoryListResponse)
def read_meal_period_categories(
    meal_period_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> MealPeriodCategoryListResponse:
    rows = list_meal_period_categories(db, current_user.id, meal_period_id)
    return MealPeriodCategoryListResponse(meal_period_cats=[MealPeriodCategoryRead.model_validate(row) for row in rows])


@router.get("/{meal_period_id}/categories/{category_id}", response_model=MealPeriodCategoryResponse)
def read_meal_period_category(
    meal_period_id: int,
    category_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> MealPeriodCategoryResponse:
    row = get_meal_period_category(db, current_user.id, meal_period_id, category_id)
    return MealPeriodCategoryResponse(meal_period_cat=MealPeriodCategoryRead.model_validate(row))


@router.post(
    "/{meal_period_id}/categories/{category_id}",
    response_model=MealPeriodCategoryResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_meal_period_category(
    meal_period_id: int,
    category_id: int,
    payload: MealPeriodCategoryCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> MealPeriodCategoryResponse:
    row = register_meal_period_category(db, current_user.id, meal_period_id, category_id, payload)
    return MealPeriodCategoryResponse(meal_period_cat=MealPeriodCategoryRead.model_validate(row))


@router.patch("/{meal_period_id}/categories/{category_id}", response_model=MealPeriodCategoryResponse)
def patch_meal_period_category(
    meal_period_id: int,
    category_id: int,
    payload: MealPeriodCategoryUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> MealPeriodCategoryResponse:
    row = update_meal_period_category(db, current_user.id, meal_period_id, category_id, payload)
    return MealPeriodCategoryResponse(meal_period_cat=MealPeriodCategoryRead.model_validate(row))


@router.delete("/{meal_period_id}/categories/{category_id}", response_model=DeletedResponse)
def delete_meal_period_category(
    meal_period_id: int,
    category_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> DeletedResponse:
    removed_id = remove_meal_period_category(db, current_user.id, meal_period_id, category_id)
    return DeletedResponse(deleted=removed_id)
