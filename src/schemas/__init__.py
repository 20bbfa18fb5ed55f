"""Pydantic schemas for API requests and responses."""

from src.schemas.auth import (
    Identity,
    LoginResponse,
    MessageResponse,
    RegisterResponse,
    TokenClaims,
    UserLogin,
    UserRegister,
    UserResponse,
    WelcomeResponse,
)
from src.schemas.post import PostCreate, PostResponse, PostUpdate

__all__ = [
    "UserRegister",
    "UserLogin",
    "UserResponse",
    "RegisterResponse",
    "LoginResponse",
    "MessageResponse",
    "WelcomeResponse",
    "TokenClaims",
    "Identity",
    "PostCreate",
    "PostUpdate",
    "PostResponse",
]
