"""Category endpoints."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.security import get_current_user
from app.db.session import get_db
from app.models.category import Category, CategoryGroup
from app.models.restaurant import Restaurant
from app.models.user import User
from app.schemas.category import (
    CategoryCreate,
    CategoryDetail,
    CategoryDetailResponse,
    CategoryListResponse,
    CategoryRead,
    CategoryResponse,
    CategoryUpdate,
)
from app.schemas.common import DeletedResponse
from app.services.category_service import (
    get_category,
    list_categories,
    list_categories_for_group,
    register_category,
    remove_category,
    set_category_group,
    update_category,
)

router: APIRouter = APIRouter()


def _serialize_category_detail(db: Session, category: Category) -> CategoryDetail:
    restaurant = db.get(Restaurant, category.restaurant_id)
    cat_group = db.get(CategoryGroup, category.cat_group_id) if category.cat_group_id is not None else None
    return CategoryDetail(
        **CategoryRead.model_validate(category).model_dump(),
        restaurant_name=restaurant.name,
        cat_group_name=cat_group.name if cat_group is not None else None,
    )


@router.post("", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
def create_category(
    payload: CategoryCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> CategoryResponse:
    category = register_category(db, current_user.id, payload)
    return CategoryResponse(category=CategoryRead.model_validate(category))


@router.get("/restaurants/{restaurant_id}", response_model=CategoryListResponse)
def read_restaurant_categories(
    restaurant_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> CategoryListResponse:
    categories = list_categories(db, current_user.id, restaurant_id)
    return CategoryListResponse(categories=[CategoryRead.model_validate(row) for row in categories])


@router.get("/catgroups/{cat_group_id}", response_model=CategoryListResponse)
def read_group_categories(
    cat_group_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> CategoryListResponse:
    categories = list_categories_for_group(db, current_user.id, cat_group_id)
    return CategoryListResponse(categories=[CategoryRead.model_validate(row) for row in categories])


@router.get("/{category_id}", response_model=CategoryDetailResponse)
def read_category(
    category_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> CategoryDetailResponse:
    category = get_category(db, current_user.id, category_id)
    return CategoryDetailResponse(category=_serialize_category_detail(db, category))


@router.patch("/{category_id}", response_model=CategoryResponse)
def patch_category(
    category_id: int,
    payload: CategoryUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> CategoryResponse:
    category = update_category(db, current_user.id, category_id, payload)
    return CategoryResponse(category=CategoryRead.model_validate(category))


@router.patch("/{category_id}/group/{cat_group_id}", response_model=CategoryResponse)
def patch_category_group(
    category_id: int,
    cat_group_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> CategoryResponse:
    """Move a category into a group; group id 0 removes it from its group."""
    category = set_category_group(db, current_user.id, category_id, cat_group_id)
    return CategoryResponse(category=CategoryRead.model_validate(category))


@router.delete("/{category_id}", response_model=DeletedResponse)
def delete_category(
    category_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> DeletedResponse:
    remove_category(db, current_user.id, category_id)
    return DeletedResponse(deleted=category_id)
