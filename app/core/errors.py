"""Domain errors raised by services and rendered by the API error handlers."""

from __future__ import annotations


class AppError(Exception):
    """Base class for expected, client-facing failures."""

    status_code: int = 500
    default_message: str = "Internal Server Error"

    def __init__(self, message: str | None = None) -> None:
        self.message: str = message or self.default_message
        super().__init__(self.message)


class NotFoundError(AppError):
    """A referenced id does not resolve to an existing row."""

    status_code = 404
    default_message = "Not Found"

    def __init__(self, message: str | None = None, *, kind: str | None = None, entity_id: int | None = None) -> None:
        self.kind = kind
        self.entity_id = entity_id
        if message is None and kind is not None:
            message = f"There is no {kind} with id {entity_id}."
        super().__init__(message)


class BadRequestError(AppError):
    """Structurally valid input that conflicts with stored data."""

    status_code = 400
    default_message = "Bad Request"


class UnauthorizedError(AppError):
    """Identity is missing, invalid, or lacks the required restaurant role."""

    status_code = 401
    default_message = "Unauthorized"

    @classmethod
    def for_action(cls, user_id: int, action: str, restaurant_id: int) -> "UnauthorizedError":
        return cls(f"User {user_id} is not authorized to {action} restaurant {restaurant_id}.")
