from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, Optional

import jwt

from server_components.errors import InvalidToken

ALGORITHM = "HS256"
DEFAULT_TTL = timedelta(days=7)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TokenService:
    """Mints and checks signed bearer tokens.

    Tokens are self-contained: nothing is stored server side, so a token
    stays valid until it expires. Expiry is checked against the injected
    clock rather than the host clock so tests can pin time.
    """

    def __init__(self, secret: str, ttl: timedelta = DEFAULT_TTL,
                 clock: Optional[Callable[[], datetime]] = None):
        if not secret:
            raise ValueError("Token secret must not be empty")
        self._secret = secret
        self.ttl = ttl
        self._clock = clock or utc_now

    def issue(self, username: str) -> str:
        # whole seconds, so iat/exp match what the clock is compared against
        now = self._clock().replace(microsecond=0)
        payload: Dict[str, Any] = {
            "username": username,
            "iat": int(now.timestamp()),
            "exp": int((now + self.ttl).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=ALGORITHM)

    def decode(self, token: str) -> Dict[str, Any]:
        if not token or not isinstance(token, str):
            raise InvalidToken()
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[ALGORITHM],
                options={
                    "require": ["username", "iat", "exp"],
                    "verify_exp": False,
                    "verify_iat": False,
                },
            )
        except jwt.InvalidTokenError:
            raise InvalidToken()

        username = payload.get("username")
        expires_at = payload.get("exp")
        if not isinstance(username, str) or not username:
            raise InvalidToken()
        if isinstance(expires_at, bool) or not isinstance(expires_at, (int, float)):
            raise InvalidToken()

        if self._clock().timestamp() > expires_at:
            raise InvalidToken("Token has expired")
        return payload

    def verify(self, token: str) -> str:
        return self.decode(token)["username"]
