"""Post API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, status

from src.api.dependencies import get_current_identity, get_post_service
from src.schemas.auth import Identity, MessageResponse
from src.schemas.post import PostCreate, PostResponse, PostUpdate
from src.services.post_service import PostService

router = APIRouter(prefix="/api/posts", tags=["posts"])

# Ids outside the 64-bit integer range cannot exist in the database
PostId = Annotated[int, Path(ge=1, le=2**63 - 1)]


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
def create_post(
    post_data: PostCreate,
    identity: Annotated[Identity, Depends(get_current_identity)],
    post_service: Annotated[PostService, Depends(get_post_service)],
):
    """Create a new post authored by the current user."""
    post = post_service.create_post(identity.id, post_data.title, post_data.content)
    return PostResponse.model_validate(post)


@router.get("", response_model=list[PostResponse])
def list_posts(
    post_service: Annotated[PostService, Depends(get_post_service)],
):
    """List all posts, newest first. No authentication required."""
    return [PostResponse.model_validate(post) for post in post_service.list_posts()]


@router.get("/{post_id}", response_model=PostResponse)
def get_post(
    post_id: PostId,
    post_service: Annotated[PostService, Depends(get_post_service)],
):
    """Get a specific post."""
    return PostResponse.model_validate(post_service.get_post(post_id))


@router.put("/{post_id}", response_model=PostResponse)
def update_post(
    post_id: PostId,
    post_data: PostUpdate,
    identity: Annotated[Identity, Depends(get_current_identity)],
    post_service: Annotated[PostService, Depends(get_post_service)],
):
    """Update a post (author only)."""
    post = post_service.update_post(
        post_id,
        identity.id,
        title=post_data.title,
        content=post_data.content,
    )
    return PostResponse.model_validate(post)


@router.delete("/{post_id}", response_model=MessageResponse)
def delete_post(
    post_id: PostId,
    identity: Annotated[Identity, Depends(get_current_identity)],
    post_service: Annotated[PostService, Depends(get_post_service)],
):
    """Delete a post (author only)."""
    post_service.delete_post(post_id, identity.id)
    return MessageResponse(message="Post deleted successfully")
