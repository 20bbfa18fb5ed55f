"""In-memory stores, used to exercise the services without a database."""

from datetime import UTC, datetime
from itertools import count

from src.errors import ConflictError
from src.models.post import Post
from src.models.user import User


class InMemoryCredentialStore:
    """Dict-backed user store."""

    def __init__(self):
        self._users: dict[int, User] = {}
        self._ids = count(1)

    def get_by_id(self, user_id: int) -> User | None:
        return self._users.get(user_id)

    def get_by_email(self, email: str) -> User | None:
        return next((u for u in self._users.values() if u.email == email), None)

    def add(self, email: str, password_hash: str, name: str | None = None) -> User:
        if self.get_by_email(email) is not None:
            raise ConflictError("Email already registered")
        now = datetime.now(UTC)
        user = User(
            id=next(self._ids),
            email=email,
            password_hash=password_hash,
            name=name,
            created_at=now,
            updated_at=now,
        )
        self._users[user.id] = user
        return user

    def update_password_hash(self, user: User, password_hash: str) -> User:
        user.password_hash = password_hash
        user.updated_at = datetime.now(UTC)
        return user


class InMemoryPostStore:
    """Dict-backed post store that resolves authors from a credential store."""

    def __init__(self, users: InMemoryCredentialStore):
        self.users = users
        self._posts: dict[int, Post] = {}
        self._ids = count(1)

    def add(self, title: str, content: str, author_id: int) -> Post:
        now = datetime.now(UTC)
        post = Post(
            id=next(self._ids),
            title=title,
            content=content,
            author_id=author_id,
            created_at=now,
            updated_at=now,
        )
        post.author = self.users.get_by_id(author_id)
        self._posts[post.id] = post
        return post

    def get(self, post_id: int) -> Post | None:
        return self._posts.get(post_id)

    def list_recent(self) -> list[Post]:
        return sorted(self._posts.values(), key=lambda p: (p.created_at, p.id), reverse=True)

    def update(self, post: Post, title: str | None = None, content: str | None = None) -> Post:
        if title is not None:
            post.title = title
        if content is not None:
            post.content = content
        post.updated_at = datetime.now(UTC)
        return post

    def delete(self, post: Post) -> None:
        self._posts.pop(post.id, None)
