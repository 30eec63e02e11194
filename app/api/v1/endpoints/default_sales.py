"""Default sale baseline endpoints."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.security import get_current_user
from app.db.session import get_db
from app.models.user import User
from app.schemas.common import DeletedResponse
from app.schemas.sale import (
    DefaultSaleCreate,
    DefaultSaleListResponse,
    DefaultSaleRead,
    DefaultSaleResponse,
    DefaultSaleUpdate,
)
from app.services.sales_service import (
    get_default_sale,
    list_default_sales,
    register_default_sale,
    remove_default_sale,
    update_default_sale,
)

router: APIRouter = APIRouter()


@router.post("", response_model=DefaultSaleResponse, status_code=status.HTTP_201_CREATED)
def create_default_sale(
    payload: DefaultSaleCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> DefaultSaleResponse:
    default_sale = register_default_sale(db, current_user.id, payload)
    return DefaultSaleResponse(default_sale=DefaultSaleRead.model_validate(default_sale))


@router.get("/restaurants/{restaurant_id}", response_model=DefaultSaleListResponse)
def read_restaurant_default_sales(
    restaurant_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> DefaultSaleListResponse:
    rows = list_default_sales(db, current_user.id, restaurant_id)
    return DefaultSaleListResponse(default_sales=[DefaultSaleRead.model_validate(row) for row in rows])


@router.get("/{default_sale_id}", response_model=DefaultSaleResponse)
def read_default_sale(
    default_sale_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> DefaultSaleResponse:
    default_sale = get_default_sale(db, current_user.id, default_sale_id)
    return DefaultSaleResponse(default_sale=DefaultSaleRead.model_validate(default_sale))


@router.patch("/{default_sale_id}", response_model=DefaultSaleResponse)
def patch_default_sale(
    default_sale_id: int,
    payload: DefaultSaleUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> DefaultSaleResponse:
    default_sale = update_default_sale(db, current_user.id, default_sale_id, payload)
    return DefaultSaleResponse(default_sale=DefaultSaleRead.model_validate(default_sale))


@router.delete("/{default_sale_id}", response_model=DeletedResponse)
def delete_default_sale(
    default_sale_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> DeletedResponse:
    remove_default_sale(db, current_user.id, default_sale_id)
    return DeletedResponse(deleted=default_sale_id)
