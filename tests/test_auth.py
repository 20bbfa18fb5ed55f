"""Password hashing, token and auth service tests."""

from datetime import timedelta

import pytest

from src.errors import ConflictError, InvalidCredentialsError, InvalidTokenError
from src.services.auth import TokenService, get_password_hash, verify_password


def test_password_hash_roundtrip():
    hashed = get_password_hash("s3cret")
    assert hashed != "s3cret"
    assert hashed.startswith("$2b$10$")
    assert verify_password("s3cret", hashed)
    assert not verify_password("wrong", hashed)


def test_password_hash_is_salted():
    assert get_password_hash("same") != get_password_hash("same")


def test_verify_password_with_malformed_hash():
    assert verify_password("anything", "not-a-bcrypt-hash") is False


def test_token_service_requires_secret():
    with pytest.raises(ValueError):
        TokenService(secret="")


def test_issue_and_verify_token(token_service):
    token = token_service.issue(42, "alice@example.com", "Alice")

    claims = token_service.verify(token)
    assert claims.user_id == 42
    assert claims.email == "alice@example.com"
    assert claims.name == "Alice"
    assert claims.exp - claims.iat == 60 * 60


def test_expired_token_fails(token_service):
    token = token_service.issue(1, "a@example.com", ttl=timedelta(seconds=-1))
    with pytest.raises(InvalidTokenError):
        token_service.verify(token)


def test_token_from_other_secret_fails(token_service):
    token = TokenService(secret="another-secret").issue(1, "a@example.com")
    with pytest.raises(InvalidTokenError):
        token_service.verify(token)


def test_garbage_token_fails(token_service):
    with pytest.raises(InvalidTokenError):
        token_service.verify("not.a.jwt")


def test_register_then_login(auth_service, token_service):
    user = auth_service.register("Alice@Example.com", "pw123", "Alice")
    assert user.email == "alice@example.com"
    assert user.password_hash != "pw123"

    logged_in, token = auth_service.login("alice@example.com", "pw123")
    assert logged_in.id == user.id
    assert token_service.verify(token).user_id == user.id


def test_register_duplicate_email(auth_service):
    auth_service.register("bob@example.com", "pw")
    with pytest.raises(ConflictError):
        auth_service.register("bob@example.com", "other")


def test_login_failures_are_unified(auth_service):
    auth_service.register("carol@example.com", "right")

    with pytest.raises(InvalidCredentialsError) as unknown:
        auth_service.authenticate("nobody@example.com", "right")
    with pytest.raises(InvalidCredentialsError) as wrong:
        auth_service.authenticate("carol@example.com", "wrong")
    assert unknown.value.message == wrong.value.message


def test_set_password_rehashes(auth_service, token_service):
    user = auth_service.register("dave@example.com", "old-pass")
    _, old_token = auth_service.login("dave@example.com", "old-pass")

    auth_service.set_password(user, "new-pass")

    with pytest.raises(InvalidCredentialsError):
        auth_service.authenticate("dave@example.com", "old-pass")
    assert auth_service.authenticate("dave@example.com", "new-pass").id == user.id
    # Outstanding tokens are not revoked
    assert token_service.verify(old_token).user_id == user.id
