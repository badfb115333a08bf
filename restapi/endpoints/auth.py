"""Authentication endpoints for user login and registration."""

from datetime import timedelta
from typing import Any, Optional
from fastapi import APIRouter, Depends, status
from fastapi.security import OAuth2PasswordBearer, OAuth2PasswordRequestForm
from sqlalchemy.ext.asyncio import AsyncSession

from components.core.config import get_settings
from components.core.exceptions import AuthError
from components.core.init_db import get_db
from components.core.schemas import DataResponse
from components.core.security import (
    verify_password,
    verify_token,
    create_access_token,
)
from components.user.models import User
from components.user.repository import UserRepository
from components.user.schemas import UserCreate, User as UserSchema, UserWithToken

settings = get_settings()

router = APIRouter(prefix="/auth", tags=["authentication"])
oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{settings.api_prefix}/auth/login", auto_error=False)


def issue_token(user: User) -> str:
    access_token_expires = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    return create_access_token(
        data={"sub": str(user.id)}, expires_delta=access_token_expires
    )


async def get_current_user(
    db: AsyncSession = Depends(get_db),
    token: Optional[str] = Depends(oauth2_scheme)
) -> User:
    """Get current user from JWT token."""
    if not token:
        raise AuthError("Not authenticated")

    payload = verify_token(token)
    if payload is None:
        raise AuthError("Could not validate credentials")

    try:
        user_id = int(payload.get("sub"))
    except (TypeError, ValueError):
        raise AuthError("Could not validate credentials")

    user = await UserRepository(db).get_by_id(user_id)
    if user is None:
        raise AuthError("User not found")
    return user


@router.post("/register", response_model=UserWithToken, status_code=status.HTTP_201_CREATED)
async def register(
    user_in: UserCreate,
    db: AsyncSession = Depends(get_db)
) -> Any:
    """Create new user and return JWT token."""
    user = await UserRepository(db).create(user_in)
    return UserWithToken(
        **UserSchema.model_validate(user).model_dump(),
        access_token=issue_token(user),
    )


@router.post("/login", response_model=UserWithToken)
async def login(
    db: AsyncSession = Depends(get_db),
    form_data: OAuth2PasswordRequestForm = Depends()
) -> Any:
    """Login user and return JWT token."""
    user = await UserRepository(db).get_by_email(form_data.username)

    if not user or not verify_password(form_data.password, user.password):
        raise AuthError("Incorrect email or password")

    return UserWithToken(
        **UserSchema.model_validate(user).model_dump(),
        access_token=issue_token(user),
    )


@router.get("/me", response_model=DataResponse[UserSchema])
async def read_me(current_user: User = Depends(get_current_user)) -> Any:
    """Get the authenticated user."""
    return DataResponse[UserSchema](
        data=UserSchema.model_validate(current_user),
        message="User retrieved successfully",
    )
