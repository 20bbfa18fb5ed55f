"""Post schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from src.schemas.auth import UserResponse


class PostCreate(BaseModel):
    """Create a new post."""

    title: str = Field(..., min_length=1, max_length=255)
    content: str = Field(..., min_length=1)


class PostUpdate(BaseModel):
    """Update a post. Omitted fields keep their current value."""

    title: str | None = Field(None, min_length=1, max_length=255)
    content: str | None = Field(None, min_length=1)


class PostResponse(BaseModel):
    """Post response with the author projected to public fields."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    content: str
    author: UserResponse
    created_at: datetime
    updated_at: datetime
