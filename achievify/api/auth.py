"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from achievify.api.dependencies import get_auth_service
from achievify.schemas.auth import (
    LoginResponse,
    MessageResponse,
    UserLogin,
    UserRegister,
    UserResponse,
)
from achievify.services.auth import AuthService

router = APIRouter(prefix="/api", tags=["auth"])


@router.post("/register", response_model=MessageResponse)
def register(
    user_data: UserRegister,
    service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Register a new user."""
    service.register(
        full_name=user_data.full_name,
        username=user_data.username,
        email=user_data.email,
        password=user_data.password,
        phone=user_data.phone,
    )
    return MessageResponse(message="Registered")


@router.post("/login", response_model=LoginResponse)
def login(
    credentials: UserLogin,
    service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Login with username or email and password."""
    user = service.authenticate(credentials.user_or_email, credentials.password)
    return LoginResponse(
        message="Logged in",
        user=UserResponse(
            id=user.id,
            full_name=user.full_name,
            username=user.username,
            email=user.email,
        ),
    )
