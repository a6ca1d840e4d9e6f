"""Process configuration for the storefront.

Values are read from the environment on every call so that a running
process and the test suite see the same source of truth.
"""

import os

DEFAULT_CORS_ORIGINS = "http://localhost:3000"


def admin_email() -> str | None:
    """The email address that owns the admin role, if one is configured."""
    value = os.getenv("ADMIN_EMAIL")
    return value.strip().lower() if value else None


def jwt_secret() -> str:
    return os.getenv("JWT_SECRET", "devsecret")


def token_ttl_days() -> int:
    return int(os.getenv("TOKEN_TTL_DAYS", "7"))


def cors_origins() -> list[str]:
    raw = os.getenv("CORS_ORIGINS", DEFAULT_CORS_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]
