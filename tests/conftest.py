"""Pytest configuration and fixtures."""

import os

# Settings are read at import time; the app refuses to start without a secret
os.environ.setdefault("JWT_SECRET", "test-secret-key-for-the-blog-api-suite")
# Never run against the application database: the db fixture empties every table
TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite:///./test.db")
os.environ["DATABASE_URL"] = TEST_DATABASE_URL

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from src.database import Base, get_db  # noqa: E402
from src.main import app  # noqa: E402
from src.repositories.memory import InMemoryCredentialStore, InMemoryPostStore  # noqa: E402
from src.services.auth import AuthService, TokenService  # noqa: E402
from src.services.post_service import PostService  # noqa: E402

TEST_SECRET = os.environ["JWT_SECRET"]


class AuthHeaders(dict):
    """Dict subclass that also stores user_id and email."""

    def __init__(self, *args, user_id: int | None = None, email: str | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.email = email


SQLALCHEMY_DATABASE_URL = TEST_DATABASE_URL

connect_args = {"check_same_thread": False} if "sqlite" in SQLALCHEMY_DATABASE_URL else {}
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture(scope="function")
def db():
    """Create a fresh database session for each test with cleanup."""
    session = TestingSessionLocal()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture(scope="function")
def client(db):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def register_and_login(client, email: str, password: str, name: str | None = None) -> AuthHeaders:
    """Register a user, log in, and return Bearer headers for them.

    Cookies set by /login are cleared so requests authenticate by header only.
    """
    response = client.post("/register", json={"email": email, "password": password, "name": name})
    assert response.status_code == 201
    user_id = response.json()["user"]["id"]

    response = client.post("/login", json={"email": email, "password": password})
    assert response.status_code == 200
    token = response.json()["token"]
    client.cookies.clear()

    return AuthHeaders({"Authorization": f"Bearer {token}"}, user_id=user_id, email=email)


@pytest.fixture
def register_user(client):
    """Factory fixture: register and log in an extra user."""

    def _register(email: str, password: str, name: str | None = None) -> AuthHeaders:
        return register_and_login(client, email, password, name)

    return _register


@pytest.fixture
def auth_headers(client):
    """Create a user and return auth headers with user info."""
    return register_and_login(client, "test@example.com", "testpass123", "Test User")


@pytest.fixture
def other_auth_headers(client):
    """A second, unrelated user."""
    return register_and_login(client, "other@example.com", "otherpass123", "Other User")


@pytest.fixture
def token_service():
    return TokenService(secret=TEST_SECRET, expiration_minutes=60)


@pytest.fixture
def user_store():
    return InMemoryCredentialStore()


@pytest.fixture
def auth_service(user_store, token_service):
    return AuthService(user_store, token_service)


@pytest.fixture
def post_service(user_store):
    return PostService(InMemoryPostStore(user_store), user_store)
