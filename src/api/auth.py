"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from src.api.dependencies import (
    AUTH_COOKIE_NAME,
    get_auth_service,
    get_current_identity,
)
from src.config import get_settings
from src.schemas.auth import (
    Identity,
    LoginResponse,
    MessageResponse,
    RegisterResponse,
    UserLogin,
    UserRegister,
    UserResponse,
    WelcomeResponse,
)
from src.services.auth import AuthService

router = APIRouter(tags=["auth"])


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
@router.post(
    "/registrar",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
def register(
    user_data: UserRegister,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Register a new user."""
    user = auth_service.register(user_data.email, user_data.password, user_data.name)

    return RegisterResponse(
        message="User registered successfully",
        user=UserResponse.model_validate(user),
    )


@router.post("/login", response_model=LoginResponse)
def login(
    credentials: UserLogin,
    response: Response,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Login with email and password.

    The token is returned in the body and also set as an httpOnly cookie.
    """
    settings = get_settings()
    _, token = auth_service.login(credentials.email, credentials.password)

    response.set_cookie(
        AUTH_COOKIE_NAME,
        token,
        max_age=settings.jwt_expiration_minutes * 60,
        httponly=True,
        secure=settings.cookie_secure,
        samesite="lax",
    )

    return LoginResponse(
        message="Login successful",
        token=token,
        redirect=settings.login_redirect,
    )


@router.post("/logout", response_model=MessageResponse)
def logout(response: Response):
    """Logout by clearing the token cookie.

    The token itself stays valid until it expires.
    """
    response.delete_cookie(
        AUTH_COOKIE_NAME,
        httponly=True,
        secure=get_settings().cookie_secure,
        samesite="lax",
    )
    return MessageResponse(message="Logged out successfully")


@router.get("/api/me", response_model=Identity)
def get_me(
    identity: Annotated[Identity, Depends(get_current_identity)],
):
    """Get current user information from the token claims."""
    return identity


@router.get("/willkommen", response_model=WelcomeResponse)
def welcome(
    identity: Annotated[Identity, Depends(get_current_identity)],
):
    """Landing route that /login redirects to. Requires a valid token."""
    return WelcomeResponse(message=f"Welcome, {identity.name or identity.email}!", user=identity)
