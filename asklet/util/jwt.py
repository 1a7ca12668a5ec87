"""Auth token encoding with PyJWT.

Tokens carry the user ID in the standard ``sub`` claim plus the username,
and always expire.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from asklet.config import AuthSettings

REQUIRED_CLAIMS = ["sub", "exp"]


class TokenPayload(BaseModel):
    """Decoded auth token claims."""

    sub: str
    username: str
    iat: datetime
    exp: datetime

    @property
    def user_id(self) -> str:
        return self.sub


class JWTError(Exception):
    """Token could not be decoded or verified."""


class TokenExpiredError(JWTError):
    """Token was valid but its ``exp`` has passed."""


def encode_auth_token(
    user_id: str,
    username: str,
    settings: AuthSettings,
    now: datetime | None = None,
) -> str:
    """Issue a signed token valid for ``settings.jwt_expiry_days``."""
    issued_at = now or datetime.now(timezone.utc)
    claims = {
        "sub": user_id,
        "username": username,
        "iat": issued_at,
        "exp": issued_at + timedelta(days=settings.jwt_expiry_days),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_auth_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify a token's signature and expiry and return its claims.

    Raises:
        TokenExpiredError: If the token has expired
        JWTError: If the token is malformed, tampered with or missing claims
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": REQUIRED_CLAIMS},
        )
    except jwt.ExpiredSignatureError:
        raise TokenExpiredError("Token has expired")
    except jwt.InvalidTokenError as e:
        raise JWTError(f"Invalid token: {e}")
    return TokenPayload(
        sub=claims["sub"],
        username=claims.get("username", ""),
        iat=claims.get("iat", claims["exp"]),
        exp=claims["exp"],
    )
