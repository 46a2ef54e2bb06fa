"""Bearer token validation.

Tokens are minted by an upstream identity provider; this service only checks
the signature and expiry and reads the subject.
"""

from __future__ import annotations

from uuid import UUID

import jwt
from seatsync.core.config import get_settings


class TokenError(Exception):
    """Raised when a token cannot be decoded or validated."""


def decode_access_token(token: str) -> dict:
    """Decode and validate a JWT access token."""
    settings = get_settings()

    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["sub", "exp"]},
        )
    except jwt.PyJWTError as exc:  # pragma: no cover - third-party raises numerous subclasses
        raise TokenError("Invalid token") from exc

    return payload


def subject_as_user_id(payload: dict) -> UUID:
    """Return the token subject as an account identifier."""
    try:
        return UUID(str(payload["sub"]))
    except (KeyError, ValueError) as exc:
        raise TokenError("Token subject is not an account id") from exc
