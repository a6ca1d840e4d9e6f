"""Credential checks and bearer tokens.

Tokens are HS256 JWTs carrying the user id and role; they are issued on
login and required by admin-only routes.
"""

from datetime import UTC, datetime, timedelta

import jwt
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from storefront import settings
from storefront.account.user import User

JWT_ALGORITHM = "HS256"


class AuthenticationError(Exception):
    """Credentials or token could not be verified."""


def authenticate(email: str, password: str) -> User:
    """Return the user owning ``email`` if ``password`` matches.

    Unknown email and wrong password raise the same error so callers cannot
    tell which one failed.
    """
    user = current_domain.repository_for(User).find_by_email(email)
    if user is None or not user.check_password(password):
        raise AuthenticationError("Invalid email or password")
    return user


def create_token(user: User) -> str:
    expires_at = datetime.now(UTC) + timedelta(days=settings.token_ttl_days())
    payload = {"sub": str(user.id), "role": user.role, "exp": expires_at}
    return jwt.encode(payload, settings.jwt_secret(), algorithm=JWT_ALGORITHM)


def user_from_token(token: str) -> User:
    """Resolve a bearer token to its user."""
    try:
        payload = jwt.decode(token, settings.jwt_secret(), algorithms=[JWT_ALGORITHM])
    except jwt.ExpiredSignatureError:
        raise AuthenticationError("Token expired") from None
    except jwt.InvalidTokenError:
        raise AuthenticationError("Invalid token") from None

    user_id = payload.get("sub")
    if not user_id:
        raise AuthenticationError("Invalid token payload")

    try:
        return current_domain.repository_for(User).get(user_id)
    except ObjectNotFoundError:
        raise AuthenticationError("User not found") from None
