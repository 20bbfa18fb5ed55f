"""Authentication service for JWT and password handling."""

import logging
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt
from passlib.context import CryptContext
from pydantic import ValidationError

from src.errors import ConflictError, InvalidCredentialsError, InvalidTokenError
from src.models.user import User
from src.repositories.base import CredentialStore
from src.schemas.auth import TokenClaims

logger = logging.getLogger(__name__)

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=10)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        # Stored value is not a recognizable hash
        return False


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


class TokenService:
    """Issues and verifies signed, time-limited bearer tokens.

    The signing secret is handed in once at construction and never changes
    for the lifetime of the instance.
    """

    def __init__(self, secret: str, algorithm: str = "HS256", expiration_minutes: int = 60):
        if not secret:
            raise ValueError("A JWT signing secret is required")
        self._secret = secret
        self.algorithm = algorithm
        self.expiration = timedelta(minutes=expiration_minutes)

    def issue(
        self,
        user_id: int,
        email: str,
        name: str | None = None,
        ttl: timedelta | None = None,
    ) -> str:
        """Create a JWT access token for a user."""
        now = datetime.now(UTC)
        to_encode = {
            "sub": str(user_id),
            "email": email,
            "name": name,
            "iat": now,
            "exp": now + (ttl if ttl is not None else self.expiration),
        }
        return jwt.encode(to_encode, self._secret, algorithm=self.algorithm)

    def verify(self, token: str) -> TokenClaims:
        """Decode and validate a JWT token.

        Every failure (bad signature, malformed token, expired, bad payload)
        raises the same InvalidTokenError.
        """
        try:
            payload = jwt.decode(token, self._secret, algorithms=[self.algorithm])
            claims = TokenClaims.model_validate(payload)
        except (JWTError, ValidationError) as e:
            raise InvalidTokenError() from e
        return claims


def normalize_email(email: str) -> str:
    return email.strip().lower()


class AuthService:
    """Registration and login flows."""

    def __init__(self, users: CredentialStore, tokens: TokenService):
        self.users = users
        self.tokens = tokens

    def register(self, email: str, password: str, name: str | None = None) -> User:
        """Create a new user. Raises ConflictError if the email is taken."""
        email = normalize_email(email)
        if self.users.get_by_email(email) is not None:
            raise ConflictError("Email already registered")

        user = self.users.add(email, get_password_hash(password), name)
        logger.info(f"Registered user {user.id} ({user.email})")
        return user

    def authenticate(self, email: str, password: str) -> User:
        """Authenticate a user by email and password.

        Unknown email and wrong password raise the same error.
        """
        user = self.users.get_by_email(normalize_email(email))
        if user is None or not verify_password(password, user.password_hash):
            logger.info(f"Failed login attempt for {email}")
            raise InvalidCredentialsError()
        return user

    def login(self, email: str, password: str) -> tuple[User, str]:
        """Authenticate and issue a token."""
        user = self.authenticate(email, password)
        token = self.tokens.issue(user.id, user.email, user.name)
        logger.info(f"User {user.id} logged in")
        return user, token

    def set_password(self, user: User, new_password: str) -> User:
        """Re-hash and store a new password.

        Tokens issued before the change stay valid until they expire.
        """
        return self.users.update_password_hash(user, get_password_hash(new_password))
