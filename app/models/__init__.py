"""Application models package."""

from app.models.category import Category, CategoryGroup
from app.models.invoice import Expense, Invoice
from app.models.meal_period import MealPeriod, MealPeriodCategory
from app.models.restaurant import Restaurant, RestaurantUser
from app.models.sale import DAYS_OF_WEEK, DayOfWeek, DefaultSale, Sale
from app.models.user import User

__all__ = [
    "User", "Restaurant", "RestaurantUser", "CategoryGroup", "Category", "MealPeriod", "MealPeriodCategory",
    "DayOfWeek", "DefaultSale", "Sale", "Invoice", "Expense", "DAYS_OF_WEEK",
]
