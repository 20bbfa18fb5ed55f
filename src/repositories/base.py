"""Persistence interfaces used by the services.

Services depend on these protocols rather than on a database session, so the
SQLAlchemy stores in ``src.repositories.sql`` can be swapped for the in-memory
stores in ``src.repositories.memory``.
"""

from typing import Protocol

from src.models.post import Post
from src.models.user import User


class CredentialStore(Protocol):
    """Persists user records keyed by id and by unique email."""

    def get_by_id(self, user_id: int) -> User | None: ...

    def get_by_email(self, email: str) -> User | None: ...

    def add(self, email: str, password_hash: str, name: str | None = None) -> User:
        """Persist a new user. Raises ConflictError if the email is taken."""
        ...

    def update_password_hash(self, user: User, password_hash: str) -> User: ...


class PostStore(Protocol):
    """CRUD persistence for posts, with the author relationship populated."""

    def add(self, title: str, content: str, author_id: int) -> Post: ...

    def get(self, post_id: int) -> Post | None: ...

    def list_recent(self) -> list[Post]:
        """Return every post, newest first."""
        ...

    def update(self, post: Post, title: str | None = None, content: str | None = None) -> Post: ...

    def delete(self, post: Post) -> None: ...
