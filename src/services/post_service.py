"""Post service for blog post CRUD."""

import logging

from src.errors import NotFoundError
from src.models.post import Post
from src.repositories.base import CredentialStore, PostStore
from src.services.permissions import ensure_owner

logger = logging.getLogger(__name__)


class PostService:
    """Service for post-related operations.

    Reads are public. Update and delete go through the ownership check after
    the post has been resolved, so a missing post is reported before a
    permission problem. Concurrent updates are last-write-wins.
    """

    def __init__(self, posts: PostStore, users: CredentialStore):
        self.posts = posts
        self.users = users

    def create_post(self, author_id: int, title: str, content: str) -> Post:
        """Create a post owned by the given user."""
        if self.users.get_by_id(author_id) is None:
            raise NotFoundError("User not found")

        post = self.posts.add(title=title, content=content, author_id=author_id)
        logger.info(f"User {author_id} created post {post.id}")
        return post

    def list_posts(self) -> list[Post]:
        return self.posts.list_recent()

    def get_post(self, post_id: int) -> Post:
        post = self.posts.get(post_id)
        if post is None:
            raise NotFoundError("Post not found")
        return post

    def update_post(
        self,
        post_id: int,
        subject_id: int,
        title: str | None = None,
        content: str | None = None,
    ) -> Post:
        """Update the given fields of a post (author only)."""
        post = self.get_post(post_id)
        ensure_owner(post.author_id, subject_id)

        post = self.posts.update(post, title=title, content=content)
        logger.info(f"User {subject_id} updated post {post_id}")
        return post

    def delete_post(self, post_id: int, subject_id: int) -> None:
        """Delete a post (author only)."""
        post = self.get_post(post_id)
        ensure_owner(post.author_id, subject_id)

        self.posts.delete(post)
        logger.info(f"User {subject_id} deleted post {post_id}")
