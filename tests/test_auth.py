from datetime import timedelta

import jwt
import pytest

from services.auth import InvalidTokenError, create_access_token, decode_access_token


def test_token_round_trip(settings):
    token = create_access_token("user-42", settings)
    assert decode_access_token(token, settings) == "user-42"


def test_expired_token(settings):
    token = create_access_token("user-42", settings, expires_in=timedelta(seconds=-10))
    with pytest.raises(InvalidTokenError, match="expired"):
        decode_access_token(token, settings)


def test_wrong_secret(settings):
    token = jwt.encode({"userId": "user-42"}, "some-other-secret-of-sufficient-length", algorithm="HS256")
    with pytest.raises(InvalidTokenError):
        decode_access_token(token, settings)


def test_sub_claim_fallback(settings):
    token = jwt.encode({"sub": "user-7"}, settings.jwt_secret, algorithm="HS256")
    assert decode_access_token(token, settings) == "user-7"


def test_token_without_user(settings):
    token = jwt.encode({"role": "admin"}, settings.jwt_secret, algorithm="HS256")
    with pytest.raises(InvalidTokenError):
        decode_access_token(token, settings)
