"""FastAPI dependencies for authentication and services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import APIKeyCookie, HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from src.config import get_settings
from src.database import get_db
from src.errors import UnauthenticatedError
from src.repositories.sql import SqlCredentialStore, SqlPostStore
from src.schemas.auth import Identity
from src.services.auth import AuthService, TokenService
from src.services.post_service import PostService

AUTH_COOKIE_NAME = "token"  # noqa: S105

cookie_scheme = APIKeyCookie(name=AUTH_COOKIE_NAME, auto_error=False)
security = HTTPBearer(auto_error=False)


@lru_cache
def get_token_service() -> TokenService:
    """Get the process-wide token service, keyed by the configured secret."""
    settings = get_settings()
    return TokenService(
        secret=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        expiration_minutes=settings.jwt_expiration_minutes,
    )


def get_auth_service(
    db: Annotated[Session, Depends(get_db)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
) -> AuthService:
    """Get auth service with dependencies."""
    return AuthService(SqlCredentialStore(db), tokens)


def get_post_service(
    db: Annotated[Session, Depends(get_db)],
) -> PostService:
    """Get post service with dependencies."""
    return PostService(SqlPostStore(db), SqlCredentialStore(db))


def get_current_identity(
    request: Request,
    cookie_token: Annotated[str | None, Depends(cookie_scheme)],
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
) -> Identity:
    """Resolve the caller from the token cookie or the Bearer header.

    The cookie wins when both are present. A missing token is 401, a token
    that fails verification is 403. Identity is attached to request.state
    only on success.
    """
    token = cookie_token or (credentials.credentials if credentials else None)
    if not token:
        raise UnauthenticatedError("Missing token. Please log in first")

    claims = tokens.verify(token)

    identity = Identity(id=claims.user_id, email=claims.email, name=claims.name)
    request.state.identity = identity
    return identity
