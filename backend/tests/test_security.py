"""
Notedeck Backend — Password, Token and Auth Gate Tests
========================================================

What we test:
    ✅ bcrypt hash verifies against its plaintext, rejects others
    ✅ Default work factor is 10
    ✅ Issued token verifies back to the same user id
    ✅ Expired / forged / malformed / claim-less tokens are rejected
    ✅ Gate: missing header vs invalid token messages
"""

import uuid
from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

import jwt
import pytest

from app.config import Settings, settings
from app.exceptions import UnauthenticatedError, ValidationError
from app.middleware.auth import (
    extract_bearer_token,
    get_current_user_id,
    resolve_user_id,
)
from app.services.password_service import PasswordService
from app.services.token_service import TokenService


class TestPasswordService:

    def setup_method(self):
        self.service = PasswordService()

    def test_hash_is_not_plaintext_and_verifies(self):
        digest = self.service.hash_password("password123")

        assert digest != "password123"
        assert digest.startswith("$2")
        assert self.service.verify_password("password123", digest) is True

    def test_wrong_password_does_not_verify(self):
        digest = self.service.hash_password("password123")
        assert self.service.verify_password("wrongpassword", digest) is False

    def test_hashes_are_salted(self):
        assert self.service.hash_password("same") != self.service.hash_password("same")

    def test_corrupt_hash_does_not_verify(self):
        assert self.service.verify_password("password123", "not-a-bcrypt-hash") is False

    def test_password_over_72_bytes_rejected(self):
        with pytest.raises(ValidationError):
            self.service.hash_password("x" * 73)

    def test_default_work_factor_is_10(self):
        assert Settings.model_fields["bcrypt_rounds"].default == 10


class TestTokenService:

    def setup_method(self):
        self.service = TokenService()

    def test_round_trip(self):
        user_id = uuid.uuid4()
        token = self.service.issue_token(user_id)
        assert self.service.verify_token(token) == user_id

    def test_token_expires_after_seven_days(self):
        user_id = uuid.uuid4()
        issued_at = datetime.now(timezone.utc)
        token = self.service.issue_token(user_id, now=issued_at)

        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
        assert payload["userId"] == str(user_id)
        assert payload["exp"] - payload["iat"] == 7 * 24 * 3600

    def test_expired_token_rejected(self):
        token = self.service.issue_token(
            uuid.uuid4(), now=datetime.now(timezone.utc) - timedelta(days=8)
        )
        with pytest.raises(UnauthenticatedError) as exc_info:
            self.service.verify_token(token)
        assert exc_info.value.message == "Token is not valid"

    def test_token_signed_with_other_secret_rejected(self):
        now = datetime.now(timezone.utc)
        forged = jwt.encode(
            {"userId": str(uuid.uuid4()), "iat": now, "exp": now + timedelta(days=1)},
            "a-different-secret-that-is-also-long-enough",
            algorithm="HS256",
        )
        with pytest.raises(UnauthenticatedError):
            self.service.verify_token(forged)

    def test_token_without_user_claim_rejected(self):
        now = datetime.now(timezone.utc)
        token = jwt.encode(
            {"iat": now, "exp": now + timedelta(days=1)},
            settings.jwt_secret,
            algorithm="HS256",
        )
        with pytest.raises(UnauthenticatedError):
            self.service.verify_token(token)

    def test_token_with_non_uuid_user_rejected(self):
        now = datetime.now(timezone.utc)
        token = jwt.encode(
            {"userId": "not-a-uuid", "iat": now, "exp": now + timedelta(days=1)},
            settings.jwt_secret,
            algorithm="HS256",
        )
        with pytest.raises(UnauthenticatedError):
            self.service.verify_token(token)

    def test_garbage_rejected(self):
        with pytest.raises(UnauthenticatedError):
            self.service.verify_token("not.a.token")

    def test_refuses_to_sign_without_secret(self, monkeypatch):
        monkeypatch.setattr(settings, "jwt_secret", "")
        with pytest.raises(RuntimeError):
            self.service.issue_token(uuid.uuid4())


class TestAuthGate:

    @pytest.mark.parametrize(
        "header,expected",
        [
            ("Bearer abc.def.ghi", "abc.def.ghi"),
            ("Bearer   abc", "abc"),
            ("Token xyz", "xyz"),
            ("Bearer", None),
            ("", None),
            (None, None),
        ],
    )
    def test_extract_bearer_token(self, header, expected):
        assert extract_bearer_token(header) == expected

    def test_missing_header(self):
        with pytest.raises(UnauthenticatedError) as exc_info:
            resolve_user_id(None)
        assert exc_info.value.message == "No token, authorization denied"

    def test_scheme_without_token(self):
        with pytest.raises(UnauthenticatedError) as exc_info:
            resolve_user_id("Bearer")
        assert exc_info.value.message == "No token, authorization denied"

    def test_invalid_token(self):
        with pytest.raises(UnauthenticatedError) as exc_info:
            resolve_user_id("Bearer garbage")
        assert exc_info.value.message == "Token is not valid"

    def test_valid_token_resolves_user(self):
        user_id = uuid.uuid4()
        token = TokenService().issue_token(user_id)
        assert resolve_user_id(f"Bearer {token}") == user_id

    @pytest.mark.asyncio
    async def test_dependency_attaches_identity_to_request(self):
        user_id = uuid.uuid4()
        token = TokenService().issue_token(user_id)
        request = MagicMock()
        request.headers = {"Authorization": f"Bearer {token}"}

        result = await get_current_user_id(request)

        assert result == user_id
        assert request.state.user_id == user_id
