"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from naai.api.dependencies import get_current_user
from naai.database import get_db
from naai.models.user import User
from naai.schemas.auth import AuthResponse, MeResponse, UserLogin, UserResponse, UserSignup
from naai.services.auth import authenticate_user, create_user
from naai.services.tokens import TokenService, get_token_service

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def signup(
    user_data: UserSignup,
    db: Annotated[Session, Depends(get_db)],
    token_service: Annotated[TokenService, Depends(get_token_service)],
):
    """Register a new customer or barber account."""
    user = create_user(db, user_data.email, user_data.password, user_data.name, user_data.role)

    return AuthResponse(
        message="User created successfully",
        user=UserResponse.model_validate(user),
        token=token_service.issue(user.id, user.email),
    )


@router.post("/login", response_model=AuthResponse)
def login(
    credentials: UserLogin,
    db: Annotated[Session, Depends(get_db)],
    token_service: Annotated[TokenService, Depends(get_token_service)],
):
    """Login with email and password."""
    user = authenticate_user(db, credentials.email, credentials.password)

    return AuthResponse(
        message="Login successful",
        user=UserResponse.model_validate(user),
        token=token_service.issue(user.id, user.email),
    )


@router.get("/me", response_model=MeResponse)
def get_me(
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Get current user information."""
    return MeResponse(user=UserResponse.model_validate(current_user))
