"""Authentication schemas."""

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

# bcrypt ignores everything past the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72


def check_password_bytes(value: str) -> str:
    if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
    return value


class UserRegister(BaseModel):
    """User registration request."""

    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=1, max_length=MAX_PASSWORD_BYTES)
    name: str | None = Field(None, max_length=255)

    @field_validator("password")
    @classmethod
    def validate_password(cls, value: str) -> str:
        return check_password_bytes(value)


class UserLogin(BaseModel):
    """User login request."""

    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=1, max_length=MAX_PASSWORD_BYTES)

    @field_validator("password")
    @classmethod
    def validate_password(cls, value: str) -> str:
        return check_password_bytes(value)


class UserResponse(BaseModel):
    """Public user information. Never carries the password hash."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    name: str | None


class RegisterResponse(BaseModel):
    """Registration response."""

    message: str
    user: UserResponse


class LoginResponse(BaseModel):
    """Login response with the issued bearer token."""

    message: str
    token: str
    token_type: str = "bearer"  # noqa: S105
    redirect: str


class TokenClaims(BaseModel):
    """Verified JWT payload."""

    sub: str
    email: str
    name: str | None = None
    iat: int | None = None
    exp: int

    @field_validator("sub")
    @classmethod
    def validate_sub(cls, value: str) -> str:
        """Subject must be a numeric user id."""
        if not value.isdigit():
            raise ValueError("sub must be a numeric user id")
        return value

    @property
    def user_id(self) -> int:
        return int(self.sub)


class Identity(BaseModel):
    """Authenticated caller, attached to the request by the auth gate."""

    id: int
    email: str
    name: str | None = None


class MessageResponse(BaseModel):
    message: str


class WelcomeResponse(BaseModel):
    """Greeting for an authenticated caller."""

    message: str
    user: Identity
