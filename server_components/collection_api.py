# the operations a caller performs against the card server.
# register/login hand out tokens; every other call goes through the
# authenticator first and only ever touches the caller's own collection.
import re
from datetime import timedelta
from typing import Any, Dict, Optional

from server_components.card_utils.collection_store import CollectionStore
from server_components.config import ServerConfig
from server_components.errors import (
    AuthenticationError,
    CardServerError,
    InvalidCredentials,
    MissingFields,
    NotFound,
)
from server_components.utils.authenticator import RequestAuthenticator
from server_components.utils.credential_store import CredentialStore, make_password_context
from server_components.utils.token_service import TokenService
from server_logs.base import Logger
from server_logs.loggers import auth_logger, collection_logger

_INT_PATTERN = re.compile(r"-?\d+")


class CollectionAPI:
    def __init__(self, credentials: CredentialStore, collections: CollectionStore,
                 tokens: TokenService, authenticator: Optional[RequestAuthenticator] = None,
                 auth_log: Logger = auth_logger, collection_log: Logger = collection_logger):
        self.credentials = credentials
        self.collections = collections
        self.tokens = tokens
        self.authenticator = authenticator or RequestAuthenticator(tokens)
        self.auth_log = auth_log
        self.collection_log = collection_log

    # ---- account ---------------------------------------------------------

    def register(self, username: str, password: str, email: str) -> Dict[str, str]:
        self.auth_log.info("signup_attempt", username=username, email=email)
        try:
            user = self.credentials.register(username, password, email)
        except CardServerError as e:
            self.auth_log.warning("signup_failed", username=username, reason=e.code)
            raise

        token = self.tokens.issue(user.username)
        self.auth_log.info("signup_success", username=user.username)
        return {"token": token, "username": user.username}

    def login(self, username: str, password: str) -> Dict[str, str]:
        self.auth_log.info("login_attempt", username=username)
        if not username or not password:
            self.auth_log.warning("login_failed_missing_fields", username=username)
            raise MissingFields("Missing username or password")

        if not self.credentials.verify_credentials(username, password):
            # same answer for unknown user and wrong password
            self.auth_log.warning("login_failed_invalid_credentials", username=username)
            raise InvalidCredentials()

        token = self.tokens.issue(username)
        self.auth_log.info("login_success", username=username)
        return {"token": token, "username": username}

    def authenticate(self, header_value: Optional[str]) -> str:
        try:
            return self.authenticator.authenticate(header_value)
        except AuthenticationError as e:
            self.auth_log.warning("auth_rejected", reason=e.code)
            raise

    def verify_token(self, header_value: Optional[str]) -> Dict[str, str]:
        return {"username": self.authenticate(header_value)}

    # ---- collection ------------------------------------------------------

    def list_cards(self, header_value: Optional[str]) -> Dict[str, Any]:
        username = self.authenticate(header_value)
        return {"cards": self.collections.get(username)}

    def add_cards(self, header_value: Optional[str], cards: Any) -> Dict[str, Any]:
        username = self.authenticate(header_value)
        try:
            count = self.collections.append(username, cards)
        except CardServerError as e:
            self.collection_log.warning("cards_add_rejected", username=username, reason=e.code)
            raise

        self.collection_log.info("cards_added", username=username, count=count)
        return {"success": True, "count": count}

    def remove_card(self, header_value: Optional[str], position: Any) -> Dict[str, bool]:
        username = self.authenticate(header_value)
        index = _as_int(position)
        try:
            removed = self.collections.delete_at(username, index)
        except NotFound:
            self.collection_log.warning("card_remove_not_found", username=username, position=position)
            raise

        self.collection_log.info("card_removed", username=username, position=index,
                                 card_id=removed["id"], card_name=removed["name"])
        return {"success": True}

    def remove_card_by_id(self, header_value: Optional[str], card_id: Any) -> Dict[str, bool]:
        username = self.authenticate(header_value)
        try:
            removed = self.collections.delete_by_id(username, _as_int(card_id))
        except NotFound:
            self.collection_log.warning("card_remove_not_found", username=username, card_id=card_id)
            raise

        self.collection_log.info("card_removed", username=username,
                                 card_id=removed["id"], card_name=removed["name"])
        return {"success": True}


def _as_int(value: Any) -> Any:
    """Parse path values like "3" to int; anything else is passed through to fail as NotFound."""
    if isinstance(value, str):
        text = value.strip()
        if _INT_PATTERN.fullmatch(text):
            return int(text)
        return None
    return value


def build_services(config: ServerConfig, clock=None) -> CollectionAPI:
    """Wire the stores and token service for one process."""
    collections = CollectionStore()
    credentials = CredentialStore(
        collections,
        pwd_context=make_password_context(config.bcrypt_rounds),
        clock=clock,
    )
    tokens = TokenService(
        config.jwt_secret,
        ttl=timedelta(days=config.token_ttl_days),
        clock=clock,
    )
    return CollectionAPI(credentials, collections, tokens)
