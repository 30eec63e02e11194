"""Authentication endpoints (API JWT)."""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.v1.endpoints.users import serialize_user_detail
from app.core.security import create_access_token, get_current_user
from app.db.session import get_db
from app.models.user import User
from app.schemas.auth import TokenRequest, TokenResponse
from app.schemas.user import UserCreate, UserRead, UserRegisterResponse, UserResponse
from app.services.user_service import authenticate_user, register_user

router: APIRouter = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/register", response_model=UserRegisterResponse, status_code=status.HTTP_201_CREATED)
def register(payload: UserCreate, db: Session = Depends(get_db)) -> UserRegisterResponse:
    user = register_user(db, payload)
    return UserRegisterResponse(user=UserRead.model_validate(user), token=create_access_token(user))


@router.post("/token", response_model=TokenResponse)
def token(payload: TokenRequest, db: Session = Depends(get_db)) -> TokenResponse:
    user = authenticate_user(db, payload.email_address, payload.password)
    logger.info("[AUTH] Issued token for user_id=%s", user.id)
    return TokenResponse(token=create_access_token(user), id=user.id)


@router.get("/me", response_model=UserResponse)
def me(current_user: User = Depends(get_current_user)) -> UserResponse:
    return UserResponse(user=serialize_user_detail(current_user))
