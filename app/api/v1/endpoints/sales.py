"""Daily sale endpoints."""

import datetime

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.security import get_current_user
from app.db.session import get_db
from app.models.user import User
from app.schemas.common import DeletedResponse
from app.schemas.sale import SaleCreate, SaleListResponse, SaleRead, SaleResponse, SaleUpdate
from app.services.sales_service import get_sale, list_sales_for_date, register_sale, remove_sale, update_sale

router: APIRouter = APIRouter()


@router.post("", response_model=SaleResponse, status_code=status.HTTP_201_CREATED)
def create_sale(
    payload: SaleCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> SaleResponse:
    sale = register_sale(db, current_user.id, payload)
    return SaleResponse(sale=SaleRead.model_validate(sale))


@router.get("/restaurants/{restaurant_id}/date/{sale_date}", response_model=SaleListResponse)
def read_restaurant_sales_for_date(
    restaurant_id: int,
    sale_date: datetime.date,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> SaleListResponse:
    sales = list_sales_for_date(db, current_user.id, restaurant_id, sale_date)
    return SaleListResponse(sales=[SaleRead.model_validate(row) for row in sales])


@router.get("/{sale_id}", response_model=SaleResponse)
def read_sale(
    sale_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> SaleResponse:
    sale = get_sale(db, current_user.id, sale_id)
    return SaleResponse(sale=SaleRead.model_validate(sale))


@router.patch("/{sale_id}", response_model=SaleResponse)
def patch_sale(
    sale_id: int,
    payload: SaleUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> SaleResponse:
    sale = update_sale(db, current_user.id, sale_id, payload)
    return SaleResponse(sale=SaleRead.model_validate(sale))


@router.delete("/{sale_id}", response_model=DeletedResponse)
def delete_sale(
    sale_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> DeletedResponse:
    remove_sale(db, current_user.id, sale_id)
    return DeletedResponse(deleted=sale_id)
