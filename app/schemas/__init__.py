"""Schema exports."""

from app.schemas.auth import TokenRequest, TokenResponse
from app.schemas.category import (
    CategoryCreate,
    CategoryGroupCreate,
    CategoryGroupRead,
    CategoryGroupUpdate,
    CategoryRead,
    CategoryUpdate,
)
from app.schemas.common import CamelModel, DeletedResponse, ErrorResponse
from app.schemas.invoice import ExpenseCreate, ExpenseRead, ExpenseUpdate, InvoiceCreate, InvoiceRead, InvoiceUpdate
from app.schemas.meal_period import (
    MealPeriodCategoryCreate,
    MealPeriodCategoryRead,
    MealPeriodCategoryUpdate,
    MealPeriodCreate,
    MealPeriodRead,
    MealPeriodUpdate,
)
from app.schemas.restaurant import (
    MembershipCreate,
    MembershipRead,
    MembershipUpdate,
    RestaurantCreate,
    RestaurantDetail,
    RestaurantRead,
    RestaurantUpdate,
)
from app.schemas.sale import DefaultSaleCreate, DefaultSaleRead, DefaultSaleUpdate, SaleCreate, SaleRead, SaleUpdate
from app.schemas.user import UserCreate, UserRead, UserUpdate

__all__ = [
    "CamelModel",
    "DeletedResponse",
    "ErrorResponse",
    "TokenRequest",
    "TokenResponse",
    "UserCreate",
    "UserRead",
    "UserUpdate",
    "RestaurantCreate",
    "RestaurantDetail",
    "RestaurantRead",
    "RestaurantUpdate",
    "MembershipCreate",
    "MembershipRead",
    "MembershipUpdate",
    "CategoryGroupCreate",
    "CategoryGroupRead",
    "CategoryGroupUpdate",
    "CategoryCreate",
    "CategoryRead",
    "CategoryUpdate",
    "MealPeriodCreate",
    "MealPeriodRead",
    "MealPeriodUpdate",
    "MealPeriodCategoryCreate",
    "MealPeriodCategoryRead",
    "MealPeriodCategoryUpdate",
    "SaleCreate",
    "SaleRead",
    "SaleUpdate",
    "DefaultSaleCreate",
    "DefaultSaleRead",
    "DefaultSaleUpdate",
    "InvoiceCreate",
    "InvoiceRead",
    "InvoiceUpdate",
    "ExpenseCreate",
    "ExpenseRead",
    "ExpenseUpdate",
]
