"""Store-level helpers shared by the entity services."""

from typing import Any

from pydantic import BaseModel

from app.core.errors import BadRequestError
from app.db.base import Base


def apply_updates(entity: Base, payload: BaseModel, skip: tuple[str, ...] = ()) -> dict[str, Any]:
    """Copy the fields the client actually sent onto ``entity``.

    Omitted fields keep their stored value. Sending null for a non-nullable
    column is rejected instead of being left to the database.
    """
    changes: dict[str, Any] = payload.model_dump(exclude_unset=True, exclude=set(skip))
    columns = entity.__table__.columns
    for field, value in changes.items():
        if value is None and not columns[field].nullable:
            raise BadRequestError(f"Field '{field}' cannot be null.")
    for field, value in changes.items():
        setattr(entity, field, value)
    return changes
