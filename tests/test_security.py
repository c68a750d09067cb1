"""
Tests for token signing and role parsing.
"""

import time
from datetime import timedelta

from jose import jwt

from doctors_portal.core.config import settings
from doctors_portal.core.security import (
    UserRole, create_access_token, verify_token
)


class TestAccessToken:

    def test_round_trip_carries_email(self):
        token = create_access_token("patient@example.com")

        payload = verify_token(token)

        assert payload is not None
        assert payload.email == "patient@example.com"

    def test_expires_one_hour_after_issue(self):
        before = int(time.time())
        token = create_access_token("patient@example.com")
        after = int(time.time())

        exp = jwt.get_unverified_claims(token)["exp"]

        assert settings.ACCESS_TOKEN_EXPIRE_MINUTES == 60
        assert before + 3600 <= exp <= after + 3600 + 1

    def test_expired_token_is_rejected(self):
        token = create_access_token("patient@example.com", expires_delta=timedelta(minutes=-1))

        assert verify_token(token) is None

    def test_wrong_secret_is_rejected(self):
        token = jwt.encode({"email": "patient@example.com"}, "another-secret", algorithm="HS256")

        assert verify_token(token) is None

    def test_token_without_email_is_rejected(self):
        token = jwt.encode({"sub": "42"}, settings.SECRET_KEY, algorithm=settings.ALGORITHM)

        assert verify_token(token) is None

    def test_token_without_expiry_is_rejected(self):
        """Every identity claim carries an expiry."""
        token = jwt.encode(
            {"email": "patient@example.com"}, settings.SECRET_KEY, algorithm=settings.ALGORITHM
        )

        assert verify_token(token) is None

    def test_garbage_is_rejected(self):
        assert verify_token("not.a.token") is None


class TestUserRole:

    def test_admin_is_read(self):
        assert UserRole.from_stored("admin") == UserRole.ADMIN

    def test_missing_role_is_none(self):
        assert UserRole.from_stored(None) == UserRole.NONE

    def test_unknown_role_grants_nothing(self):
        """A typo in a stored role must not grant admin."""
        assert UserRole.from_stored("Admin") == UserRole.NONE
        assert UserRole.from_stored("superuser") == UserRole.NONE
