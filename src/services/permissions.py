"""Ownership checks for mutating operations."""

from src.errors import ForbiddenError


def ensure_owner(owner_id: int, subject_id: int) -> None:
    """Allow the operation only when the caller owns the resource."""
    if owner_id != subject_id:
        raise ForbiddenError("Only the author can modify this post")
