"""User service operations."""

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.core.errors import BadRequestError, UnauthorizedError
from app.core.security import get_password_hash, verify_password
from app.db.session import transaction
from app.models.user import User
from app.schemas.user import UserCreate, UserUpdate
from app.services.existence import check_user_exists
from app.services.store import apply_updates

logger = logging.getLogger(__name__)


def get_user_by_email(db: Session, email: str) -> User | None:
    """Return the user with this email address, if any."""
    return db.scalar(select(User).where(User.email_address == email).limit(1))


def create_user(
    db: Session,
    *,
    email_address: str,
    password_hash: str,
    first_name: str,
    last_name: str,
) -> User:
    """Add a user row with an already hashed password and flush it."""
    user = User(
        email_address=email_address,
        password_hash=password_hash,
        first_name=first_name,
        last_name=last_name,
    )
    db.add(user)
    db.flush()
    return user


def _ensure_email_available(db: Session, email: str) -> None:
    if get_user_by_email(db, email) is not None:
        raise BadRequestError(f"There is already a user with email address {email}.")


def ensure_correct_user(actor_id: int, user_id: int) -> None:
    """Only the account holder may read or change their own account."""
    if actor_id != user_id:
        logger.info("[AUTH] User %s denied access to user %s", actor_id, user_id)
        raise UnauthorizedError(f"User {actor_id} is not authorized to access user {user_id}.")


def register_user(db: Session, payload: UserCreate) -> User:
    with transaction(db):
        _ensure_email_available(db, payload.email_address)
        user = create_user(
            db,
            email_address=payload.email_address,
            password_hash=get_password_hash(payload.password),
            first_name=payload.first_name,
            last_name=payload.last_name,
        )
    logger.info("[AUTH] Registered user_id=%s", user.id)
    return user


def authenticate_user(db: Session, email: str, password: str) -> User:
    """Return the user for valid credentials; never reveal which half was wrong."""
    user = get_user_by_email(db, email)
    if user is None or not verify_password(password, user.password_hash):
        logger.info("[AUTH] Failed login for email=%s", email)
        raise UnauthorizedError("Invalid email/password.")
    return user


def get_user(db: Session, actor_id: int, user_id: int) -> User:
    ensure_correct_user(actor_id, user_id)
    return check_user_exists(db, user_id)


def update_user(db: Session, actor_id: int, user_id: int, payload: UserUpdate) -> User:
    ensure_correct_user(actor_id, user_id)
    with transaction(db):
        user = check_user_exists(db, user_id)
        if payload.email_address is not None and payload.email_address != user.email_address:
            _ensure_email_available(db, payload.email_address)
        apply_updates(user, payload, skip=("password",))
        if payload.password is not None:
            user.password_hash = get_password_hash(payload.password)
    return user


def remove_user(db: Session, actor_id: int, user_id: int) -> None:
    ensure_correct_user(actor_id, user_id)
    with transaction(db):
        user = check_user_exists(db, user_id)
        db.delete(user)
    logger.info("[AUTH] Removed user_id=%s", user_id)
