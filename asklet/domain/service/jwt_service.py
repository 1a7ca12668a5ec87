"""Auth token domain service."""

import logfire

from asklet.config import AuthSettings
from asklet.util.jwt import JWTError, TokenPayload, decode_auth_token, encode_auth_token

from .base import Service


class JWTService(Service):
    """Issues and checks the tokens carried in the auth cookie."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def create_token(self, user_id: str, username: str) -> str:
        """Issue a token for a user who just logged in."""
        token = encode_auth_token(user_id, username, self.auth_settings)
        logfire.info("Auth token issued", user_id=user_id)
        return token

    def verify_token(self, token: str) -> TokenPayload:
        """Decode a token.

        Raises:
            JWTError: If the token is invalid or expired
        """
        return decode_auth_token(token, self.auth_settings)

    def get_user_id_from_token(self, token: str | None) -> str | None:
        """User ID from the auth cookie, or None for anonymous callers.

        Routes authenticate with this; a missing, expired or tampered token
        all mean "not signed in".
        """
        if not token:
            return None
        try:
            return self.verify_token(token).user_id
        except JWTError as e:
            logfire.debug("Auth token rejected", error=str(e))
            return None
