from datetime import UTC, datetime, timedelta

import jwt
import pytest
from storefront import settings
from storefront.account.authentication import (
    JWT_ALGORITHM,
    AuthenticationError,
    authenticate,
    create_token,
    user_from_token,
)


class TestAuthenticate:
    def test_valid_credentials(self, customer):
        user = authenticate("jane@example.com", "s3cret-pass")
        assert user.id == customer.id

    def test_email_is_case_insensitive(self, customer):
        assert authenticate("JANE@example.com", "s3cret-pass").id == customer.id

    def test_wrong_password(self, customer):
        with pytest.raises(AuthenticationError):
            authenticate("jane@example.com", "wrong")

    def test_unknown_email(self):
        with pytest.raises(AuthenticationError):
            authenticate("nobody@example.com", "whatever")


class TestTokens:
    def test_round_trip(self, customer):
        token = create_token(customer)
        assert user_from_token(token).id == customer.id

    def test_token_carries_role(self, admin):
        payload = jwt.decode(create_token(admin), settings.jwt_secret(), algorithms=[JWT_ALGORITHM])
        assert payload["role"] == "admin"
        assert payload["sub"] == str(admin.id)

    def test_tampered_token(self, customer):
        token = jwt.encode({"sub": str(customer.id)}, "another-secret", algorithm=JWT_ALGORITHM)
        with pytest.raises(AuthenticationError):
            user_from_token(token)

    def test_expired_token(self, customer):
        payload = {"sub": str(customer.id), "exp": datetime.now(UTC) - timedelta(minutes=1)}
        token = jwt.encode(payload, settings.jwt_secret(), algorithm=JWT_ALGORITHM)
        with pytest.raises(AuthenticationError, match="expired"):
            user_from_token(token)

    def test_token_for_deleted_user(self):
        token = jwt.encode({"sub": "ghost"}, settings.jwt_secret(), algorithm=JWT_ALGORITHM)
        with pytest.raises(AuthenticationError):
            user_from_token(token)
