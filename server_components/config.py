import os
from dataclasses import dataclass, field
from typing import List

DEV_SECRET = "your-secret-key-change-in-production"

DEFAULT_ORIGINS = [
    "http://localhost:3000",
    "https://mtgcardbuilder-frontend.vercel.app",
    "https://wolfehoovermarine.com",
]


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class ServerConfig:
    """Process-wide settings, read once at startup.

    The signing secret lives here for the lifetime of the process; changing it
    invalidates every token issued so far.
    """

    env: str = "dev"
    jwt_secret: str = DEV_SECRET
    token_ttl_days: int = 7
    bcrypt_rounds: int = 10
    seed_demo_account: bool = True
    allowed_origins: List[str] = field(default_factory=lambda: list(DEFAULT_ORIGINS))
    host: str = "0.0.0.0"
    port: int = 5000

    @property
    def is_prod(self) -> bool:
        return self.env == "prod"

    @property
    def using_dev_secret(self) -> bool:
        return self.jwt_secret == DEV_SECRET

    @classmethod
    def from_env(cls) -> "ServerConfig":
        env = os.getenv("ENV", "dev")
        secret = os.getenv("JWT_SECRET", "")

        if not secret:
            if env == "prod":
                raise ValueError("JWT_SECRET must be set when ENV=prod")
            secret = DEV_SECRET

        origins = os.getenv("ALLOWED_ORIGINS")
        if origins:
            allowed = [o.strip() for o in origins.split(",") if o.strip()]
        else:
            allowed = list(DEFAULT_ORIGINS)

        return cls(
            env=env,
            jwt_secret=secret,
            token_ttl_days=int(os.getenv("TOKEN_TTL_DAYS", "7")),
            bcrypt_rounds=int(os.getenv("BCRYPT_ROUNDS", "10")),
            seed_demo_account=_env_flag("SEED_DEMO_ACCOUNT", env != "prod"),
            allowed_origins=allowed,
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "5000")),
        )
