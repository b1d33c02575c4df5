import threading
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Dict, Optional

from passlib.context import CryptContext

from server_components.card_utils.collection_store import CollectionStore
from server_components.errors import DuplicateUser, MissingFields


def make_password_context(rounds: int = 10) -> CryptContext:
    return CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)


@dataclass(frozen=True)
class User:
    username: str
    email: str
    password_hash: str
    created_at: datetime

    def public_dict(self) -> Dict[str, str]:
        return {
            "username": self.username,
            "email": self.email,
            "created_at": self.created_at.isoformat(),
        }


class CredentialStore:
    """In-memory user records keyed by username.

    Registration is the only path that creates a user, and the only path that
    creates a collection. Users are never updated or removed.
    """

    def __init__(self, collections: CollectionStore, pwd_context: Optional[CryptContext] = None,
                 clock: Optional[Callable[[], datetime]] = None):
        self.collections = collections
        self.pwd_context = pwd_context or make_password_context()
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self._users: Dict[str, User] = {}
        self._lock = threading.Lock()

    def __contains__(self, username: str) -> bool:
        return username in self._users

    def __len__(self) -> int:
        return len(self._users)

    def get(self, username: str) -> Optional[User]:
        return self._users.get(username)

    def register(self, username: str, password: str, email: str) -> User:
        if not username or not password or not email:
            raise MissingFields()

        # fail fast before paying for a bcrypt hash
        if username in self._users:
            raise DuplicateUser()

        password_hash = self.pwd_context.hash(password)
        user = User(
            username=username,
            email=email,
            password_hash=password_hash,
            created_at=self._clock(),
        )

        with self._lock:
            if username in self._users:
                raise DuplicateUser()
            self._users[username] = user
            self.collections.create(username)
        return user

    def verify_credentials(self, username: str, password: str) -> bool:
        user = self._users.get(username) if username else None
        if user is None or not password:
            # burn the same bcrypt time as a real check so a missing
            # username can't be told apart by response time
            self.pwd_context.dummy_verify()
            return False
        return self.pwd_context.verify(password, user.password_hash)
