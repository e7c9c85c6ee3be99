from datetime import timedelta

import pytest
from jose import jwt

from ainotes.config import Settings
from ainotes.services.auth_service import InvalidTokenError, issue_owner_token, owner_from_token

SETTINGS = Settings(JWT_SECRET="auth-test-secret")


def test_round_trips_owner_id():
    token = issue_owner_token("user-42", settings=SETTINGS)
    assert owner_from_token(token, settings=SETTINGS) == "user-42"


def test_expired_token_rejected():
    token = issue_owner_token("user-42", timedelta(seconds=-5), settings=SETTINGS)
    with pytest.raises(InvalidTokenError):
        owner_from_token(token, settings=SETTINGS)


def test_wrong_secret_rejected():
    token = issue_owner_token("user-42", settings=Settings(JWT_SECRET="other-secret"))
    with pytest.raises(InvalidTokenError):
        owner_from_token(token, settings=SETTINGS)


@pytest.mark.parametrize(
    "claims",
    [
        {"sub": "user-42", "type": "refresh"},
        {"type": "access"},
        {"sub": "", "type": "access"},
    ],
)
def test_non_access_or_subjectless_tokens_rejected(claims):
    token = jwt.encode(claims, SETTINGS.JWT_SECRET, algorithm=SETTINGS.JWT_ALGORITHM)
    with pytest.raises(InvalidTokenError):
        owner_from_token(token, settings=SETTINGS)
