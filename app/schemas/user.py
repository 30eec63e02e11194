"""User account schemas."""

from pydantic import Field

from app.schemas.common import CamelModel


class UserCreate(CamelModel):
    """Payload for user registration."""

    email_address: str = Field(min_length=3, max_length=255)
    password: str = Field(min_length=5, max_length=128)
    first_name: str = Field(min_length=1, max_length=128)
    last_name: str = Field(min_length=1, max_length=128)


class UserUpdate(CamelModel):
    """Partial user update; omitted fields keep their value."""

    email_address: str | None = Field(default=None, min_length=3, max_length=255)
    password: str | None = Field(default=None, min_length=5, max_length=128)
    first_name: str | None = Field(default=None, min_length=1, max_length=128)
    last_name: str | None = Field(default=None, min_length=1, max_length=128)


class UserRead(CamelModel):
    id: int
    email_address: str
    first_name: str
    last_name: str


class UserRestaurantRead(CamelModel):
    """Restaurant the user belongs to, with the user's role there."""

    restaurant_id: int
    restaurant_name: str
    is_admin: bool
    is_owner: bool


class UserDetail(UserRead):
    restaurants: list[UserRestaurantRead] = []


class UserResponse(CamelModel):
    user: UserDetail


class UserRegisterResponse(CamelModel):
    user: UserRead
    token: str
