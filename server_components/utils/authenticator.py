from typing import Optional

from server_components.errors import Unauthenticated
from server_components.utils.token_service import TokenService


def bearer_token(header_value: Optional[str]) -> Optional[str]:
    """Pull the token out of an `Authorization: Bearer <token>` value."""
    if not isinstance(header_value, str) or not header_value:
        return None
    parts = header_value.strip().split(None, 1)
    if len(parts) != 2 or parts[0].lower() != "bearer":
        return None
    token = parts[1].strip()
    return token or None


class RequestAuthenticator:
    def __init__(self, tokens: TokenService):
        self.tokens = tokens

    def authenticate(self, header_value: Optional[str]) -> str:
        token = bearer_token(header_value)
        if token is None:
            raise Unauthenticated()
        # TokenService raises InvalidToken for bad signature, shape or expiry
        return self.tokens.verify(token)
