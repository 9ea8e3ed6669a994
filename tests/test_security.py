"""Tests for access token minting and verification."""

from datetime import datetime, timedelta

import pytest
from jose import jwt

from core.config import settings
from core.errors import TokenExpired, TokenInvalid
from core.security import (
    create_access_token,
    decode_access_token,
    generate_refresh_token,
    hash_password,
    hash_refresh_token,
    refresh_token_matches,
    verify_access_token,
    verify_password,
)
from schemas.auth import ClaimsUser
from schemas.lang import LanguageCode

from conftest import auth_header


@pytest.fixture
def claims():
    return ClaimsUser(
        id=7,
        username="reader",
        created_at=datetime(2026, 1, 2, 3, 4, 5, 678000),
        study_lang=LanguageCode.ZH,
        display_lang=LanguageCode.EN,
    )


class TestAccessToken:
    def test_round_trip(self, claims):
        assert verify_access_token(create_access_token(claims)) == claims

    def test_past_expiry_is_expired(self, claims):
        token = create_access_token(claims, expires_delta=timedelta(minutes=-5))
        with pytest.raises(TokenExpired):
            verify_access_token(token)

    def test_expired_token_still_decodes_without_expiry_check(self, claims):
        token = create_access_token(claims, expires_delta=timedelta(minutes=-5))
        assert decode_access_token(token, verify_exp=False).user == claims

    def test_foreign_signature_is_invalid(self, claims):
        forged = jwt.encode(
            {"exp": 4102444800, "user": claims.model_dump(mode="json")},
            "some-other-secret",
            algorithm=settings.JWT_ALG,
        )
        with pytest.raises(TokenInvalid):
            verify_access_token(forged)

    def test_forged_token_is_invalid_even_without_expiry_check(self, claims):
        forged = jwt.encode({"exp": 1, "user": claims.model_dump(mode="json")}, "nope", algorithm="HS256")
        with pytest.raises(TokenInvalid):
            decode_access_token(forged, verify_exp=False)

    @pytest.mark.parametrize("token", ["", "garbage", "a.b.c"])
    def test_malformed_token_is_invalid(self, token):
        with pytest.raises(TokenInvalid):
            verify_access_token(token)

    def test_missing_user_claims_is_invalid(self):
        token = jwt.encode({"exp": 4102444800, "sub": "7"}, settings.SECRET_KEY, algorithm=settings.JWT_ALG)
        with pytest.raises(TokenInvalid):
            verify_access_token(token)

    def test_missing_expiry_is_invalid(self, claims):
        token = jwt.encode({"user": claims.model_dump(mode="json")}, settings.SECRET_KEY, algorithm=settings.JWT_ALG)
        with pytest.raises(TokenInvalid):
            verify_access_token(token)
        with pytest.raises(TokenInvalid):
            decode_access_token(token, verify_exp=False)

    def test_long_expired_token_decodes_for_refresh(self, claims):
        token = create_access_token(claims, expires_delta=timedelta(days=-30))
        decoded = decode_access_token(token, verify_exp=False)
        assert decoded.user == claims
        assert decoded.exp < datetime.now().timestamp()


class TestSecrets:
    def test_password_hash(self):
        hashed = hash_password("s3cret-pass!")
        assert hashed != "s3cret-pass!"
        assert verify_password("s3cret-pass!", hashed)
        assert not verify_password("wrong-pass!", hashed)

    def test_refresh_tokens_are_random_and_matched_by_digest(self):
        first, second = generate_refresh_token(), generate_refresh_token()
        assert first != second
        stored = hash_refresh_token(first)
        assert refresh_token_matches(first, stored)
        assert not refresh_token_matches(second, stored)
        assert not refresh_token_matches(first, None)


class TestBearerDependency:
    def test_missing_header_is_unauthorized(self, client):
        response = client.get("/user/me")
        assert response.status_code == 401
        assert response.json() == {"error": "token_invalid"}

    def test_expired_token_is_unauthorized(self, client, claims):
        token = create_access_token(claims, expires_delta=timedelta(seconds=-1))
        response = client.get("/user/me", headers=auth_header(token))
        assert response.status_code == 401
        assert response.json() == {"error": "token_expired"}

    def test_valid_token_needs_no_stored_user(self, client, claims):
        # verification is stateless: user 7 does not exist in the empty database
        response = client.get("/user/me", headers=auth_header(create_access_token(claims)))
        assert response.status_code == 200
        assert response.json()["username"] == "reader"
        assert response.json()["study_lang"] == "zh"
