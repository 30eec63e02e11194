"""Security utilities for password hashing and JWT-based auth."""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.errors import UnauthorizedError
from app.db.session import get_db
from app.models.user import User

logger = logging.getLogger(__name__)

pwd_context: CryptContext = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")
bearer_scheme: HTTPBearer = HTTPBearer(auto_error=False)


def get_password_hash(password: str) -> str:
    """Hash a plaintext password."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plaintext password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(user: User) -> str:
    """Create a signed JWT access token identifying the user."""
    expire: datetime = datetime.now(timezone.utc) + timedelta(
        minutes=settings.jwt_expire_minutes
    )
    to_encode: dict[str, Any] = {"sub": str(user.id), "email": user.email_address, "exp": expire}
    return jwt.encode(
        to_encode,
        settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
    )


def verify_token(token: str) -> dict[str, Any]:
    """Decode and validate a JWT token payload."""
    try:
        payload: dict[str, Any] = jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm],
        )
    except JWTError as exc:
        logger.info("[AUTH] Rejected token: %s", exc)
        raise UnauthorizedError("Could not validate credentials.") from exc

    return payload


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> User:
    """Resolve the authenticated user from the Authorization header."""
    if credentials is None:
        raise UnauthorizedError("You must be logged in to access this resource.")

    payload: dict[str, Any] = verify_token(credentials.credentials)
    user_id = payload.get("sub")
    if user_id is None:
        raise UnauthorizedError("Invalid authentication token.")

    try:
        parsed_user_id: int = int(user_id)
    except (TypeError, ValueError) as exc:
        raise UnauthorizedError("Invalid authentication token.") from exc

    user: User | None = db.get(User, parsed_user_id)
    if user is None:
        raise UnauthorizedError("Invalid authentication token.")

    return user
