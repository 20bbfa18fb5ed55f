"""SQLAlchemy-backed stores."""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from src.errors import ConflictError
from src.models.post import Post
from src.models.user import User


class SqlCredentialStore:
    """User store on top of a SQLAlchemy session."""

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, user_id: int) -> User | None:
        return self.db.query(User).filter(User.id == user_id).first()

    def get_by_email(self, email: str) -> User | None:
        return self.db.query(User).filter(User.email == email).first()

    def add(self, email: str, password_hash: str, name: str | None = None) -> User:
        user = User(email=email, password_hash=password_hash, name=name)
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError as e:
            # Unique index on email caught a concurrent registration
            self.db.rollback()
            raise ConflictError("Email already registered") from e
        self.db.refresh(user)
        return user

    def update_password_hash(self, user: User, password_hash: str) -> User:
        user.password_hash = password_hash
        self.db.commit()
        self.db.refresh(user)
        return user


class SqlPostStore:
    """Post store on top of a SQLAlchemy session."""

    def __init__(self, db: Session):
        self.db = db

    def add(self, title: str, content: str, author_id: int) -> Post:
        post = Post(title=title, content=content, author_id=author_id)
        self.db.add(post)
        self.db.commit()
        return self.get(post.id)

    def get(self, post_id: int) -> Post | None:
        return (
            self.db.query(Post)
            .options(joinedload(Post.author))
            .filter(Post.id == post_id)
            .first()
        )

    def list_recent(self) -> list[Post]:
        return (
            self.db.query(Post)
            .options(joinedload(Post.author))
            .order_by(Post.created_at.desc(), Post.id.desc())
            .all()
        )

    def update(self, post: Post, title: str | None = None, content: str | None = None) -> Post:
        if title is not None:
            post.title = title
        if content is not None:
            post.content = content
        self.db.commit()
        return self.get(post.id)

    def delete(self, post: Post) -> None:
        self.db.delete(post)
        self.db.commit()
