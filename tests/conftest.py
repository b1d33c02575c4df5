from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from server_components.card_utils.collection_store import CollectionStore
from server_components.collection_api import CollectionAPI
from server_components.config import ServerConfig
from server_components.server import create_app
from server_components.utils.credential_store import CredentialStore, make_password_context
from server_components.utils.token_service import TokenService
from server_logs.base import Logger

TEST_SECRET = "test-secret-0123456789abcdef0123456789abcdef"
START = datetime(2026, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


class FixedClock:
    def __init__(self, now: datetime = START):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs):
        self.now = self.now + timedelta(**kwargs)


class RecordingLogger(Logger):
    def __init__(self, log_type="test"):
        self.log_type = log_type
        self.records = []

    def _emit(self, level, msg, data):
        self.records.append((level, msg, data))

    def events(self):
        return [msg for _, msg, _ in self.records]


@pytest.fixture
def clock():
    return FixedClock()


@pytest.fixture
def collections():
    return CollectionStore()


@pytest.fixture
def credentials(collections, clock):
    return CredentialStore(collections, pwd_context=make_password_context(rounds=4), clock=clock)


@pytest.fixture
def tokens(clock):
    return TokenService(TEST_SECRET, clock=clock)


@pytest.fixture
def auth_log():
    return RecordingLogger("auth")


@pytest.fixture
def collection_log():
    return RecordingLogger("collection")


@pytest.fixture
def api(credentials, collections, tokens, auth_log, collection_log):
    return CollectionAPI(credentials, collections, tokens,
                         auth_log=auth_log, collection_log=collection_log)


@pytest.fixture
def config():
    return ServerConfig(env="dev", jwt_secret=TEST_SECRET, bcrypt_rounds=4, seed_demo_account=False)


@pytest.fixture
def client(config, api):
    return TestClient(create_app(config=config, services=api))


def bearer(token):
    return {"Authorization": f"Bearer {token}"}
