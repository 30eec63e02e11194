"""Restaurant and membership schemas."""

from pydantic import Field

from app.schemas.category import CategoryGroupRead, CategoryRead
from app.schemas.common import CamelModel
from app.schemas.invoice import ExpenseRead, InvoiceRead
from app.schemas.meal_period import MealPeriodCategoryRead, MealPeriodRead
from app.schemas.sale import DefaultSaleRead


class RestaurantCreate(CamelModel):
    """Payload for registering a restaurant owned by the caller."""

    name: str = Field(min_length=1, max_length=255)
    address: str | None = Field(default=None, max_length=255)
    phone: str | None = Field(default=None, max_length=64)
    email: str | None = Field(default=None, max_length=255)
    website: str | None = Field(default=None, max_length=255)
    notes: str | None = None


class RestaurantUpdate(CamelModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    address: str | None = Field(default=None, max_length=255)
    phone: str | None = Field(default=None, max_length=64)
    email: str | None = Field(default=None, max_length=255)
    website: str | None = Field(default=None, max_length=255)
    notes: str | None = None


class RestaurantRead(CamelModel):
    id: int
    owner_id: int
    name: str
    address: str | None
    phone: str | None
    email: str | None
    website: str | None
    notes: str | None


class MembershipCreate(CamelModel):
    is_admin: bool = False


class MembershipUpdate(CamelModel):
    is_admin: bool


class MembershipRead(CamelModel):
    id: int
    restaurant_id: int
    user_id: int
    is_admin: bool


class RestaurantMemberRead(MembershipRead):
    """Membership row with the member's display fields."""

    email_address: str
    first_name: str
    last_name: str


class RestaurantDetail(RestaurantRead):
    """Restaurant with every scoped collection and the caller's role."""

    users: list[RestaurantMemberRead] = []
    meal_periods: list[MealPeriodRead] = []
    cat_groups: list[CategoryGroupRead] = []
    categories: list[CategoryRead] = []
    meal_period_categories: list[MealPeriodCategoryRead] = []
    default_sales: list[DefaultSaleRead] = []
    invoices: list[InvoiceRead] = []
    expenses: list[ExpenseRead] = []
    is_admin: bool = False
    is_owner: bool = False


class RestaurantResponse(CamelModel):
    restaurant: RestaurantRead


class RestaurantDetailResponse(CamelModel):
    restaurant: RestaurantDetail


class MembershipResponse(CamelModel):
    restaurant_user: MembershipRead
