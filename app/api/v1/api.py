"""API v1 router composition."""

from fastapi import APIRouter

from app.api.v1.endpoints import (
    auth,
    cat_groups,
    categories,
    default_sales,
    expenses,
    invoices,
    meal_periods,
    restaurants,
    sales,
    users,
)

api_router: APIRouter = APIRouter()
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(restaurants.router, prefix="/restaurants", tags=["restaurants"])
api_router.include_router(cat_groups.router, prefix="/catgroups", tags=["catgroups"])
api_router.include_router(categories.router, prefix="/categories", tags=["categories"])
api_router.include_router(meal_periods.router, prefix="/mealperiods", tags=["mealperiods"])
api_router.include_router(sales.router, prefix="/sales", tags=["sales"])
api_router.include_router(default_sales.router, prefix="/defaultsales", tags=["defaultsales"])
api_router.include_router(invoices.router, prefix="/invoices", tags=["invoices"])
api_router.include_router(expenses.router, prefix="/expenses", tags=["expenses"])
