"""Category group endpoints."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.security import get_current_user
from app.db.session import get_db
from app.models.category import CategoryGroup
from app.models.restaurant import Restaurant
from app.models.user import User
from app.schemas.category import (
    CategoryGroupCreate,
    CategoryGroupDetail,
    CategoryGroupDetailResponse,
    CategoryGroupListResponse,
    CategoryGroupRead,
    CategoryGroupResponse,
    CategoryGroupUpdate,
    CategoryRead,
)
from app.schemas.common import DeletedResponse
from app.services.category_service import (
    get_cat_group,
    list_cat_groups,
    register_cat_group,
    remove_cat_group,
    update_cat_group,
)

router: APIRouter = APIRouter()


def _serialize_cat_group_detail(db: Session, cat_group: CategoryGroup) -> CategoryGroupDetail:
    restaurant = db.get(Restaurant, cat_group.restaurant_id)
    return CategoryGroupDetail(
        **CategoryGroupRead.model_validate(cat_group).model_dump(),
        restaurant_name=restaurant.name,
        categories=[CategoryRead.model_validate(category) for category in cat_group.categories],
    )


@router.post("", response_model=CategoryGroupResponse, status_code=status.HTTP_201_CREATED)
def create_cat_group(
    payload: CategoryGroupCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> CategoryGroupResponse:
    cat_group = register_cat_group(db, current_user.id, payload)
    return CategoryGroupResponse(cat_group=CategoryGroupRead.model_validate(cat_group))


@router.get("/restaurants/{restaurant_id}", response_model=CategoryGroupListResponse)
def read_restaurant_cat_groups(
    restaurant_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> CategoryGroupListResponse:
    cat_groups = list_cat_groups(db, current_user.id, restaurant_id)
    return CategoryGroupListResponse(cat_groups=[CategoryGroupRead.model_validate(row) for row in cat_groups])


@router.get("/{cat_group_id}", response_model=CategoryGroupDetailResponse)
def read_cat_group(
    cat_group_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> CategoryGroupDetailResponse:
    cat_group = get_cat_group(db, current_user.id, cat_group_id)
    return CategoryGroupDetailResponse(cat_group=_serialize_cat_group_detail(db, cat_group))


@router.patch("/{cat_group_id}", response_model=CategoryGroupResponse)
def patch_cat_group(
    cat_group_id: int,
    payload: CategoryGroupUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> CategoryGroupResponse:
    cat_group = update_cat_group(db, current_user.id, cat_group_id, payload)
    return CategoryGroupResponse(cat_group=CategoryGroupRead.model_validate(cat_group))


@router.delete("/{cat_group_id}", response_model=DeletedResponse)
def delete_cat_group(
    cat_group_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> DeletedResponse:
    remove_cat_group(db, current_user.id, cat_group_id)
    return DeletedResponse(deleted=cat_group_id)
