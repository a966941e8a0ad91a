import datetime as dt

import pytest
from jose import jwt

from affirmations.config import config
from affirmations.errors import UnauthorizedError
from affirmations.services.auth_service import AuthService


def test_require_user_without_token_is_unauthorized():
    with pytest.raises(UnauthorizedError) as exc_info:
        AuthService.require_user(None)

    assert exc_info.value.code == "UNAUTHORIZED"
    assert exc_info.value.http_status == 401


def test_require_user_with_empty_token_is_unauthorized():
    with pytest.raises(UnauthorizedError):
        AuthService.require_user("")


def test_verify_token_returns_subject_and_email(token_for):
    user = AuthService.verify_token(token_for("user-1", email="one@example.com"))

    assert user.id == "user-1"
    assert user.email == "one@example.com"


def test_verify_token_accepts_access_scope(token_for):
    assert AuthService.verify_token(token_for("user-1", scope="access")).id == "user-1"


def test_verify_token_rejects_refresh_scope(token_for):
    with pytest.raises(UnauthorizedError, match="scope"):
        AuthService.verify_token(token_for("user-1", scope="refresh"))


def test_verify_token_rejects_missing_subject(token_for):
    with pytest.raises(UnauthorizedError, match="subject"):
        AuthService.verify_token(token_for(None))


def test_verify_token_rejects_expired_token(token_for):
    with pytest.raises(UnauthorizedError, match="Invalid token"):
        AuthService.verify_token(token_for("user-1", ttl=dt.timedelta(minutes=-5)))


def test_verify_token_rejects_foreign_signature():
    token = jwt.encode({"sub": "user-1"}, config.JWT_SECRET + "-other", algorithm=config.JWT_ALG)

    with pytest.raises(UnauthorizedError):
        AuthService.verify_token(token)


def test_verify_token_rejects_garbage():
    with pytest.raises(UnauthorizedError):
        AuthService.verify_token("not-a-jwt")
