from abc import ABC, abstractmethod
from typing import Any, Dict

# keys whose values must never reach a log sink
SENSITIVE_KEYS = {"password", "password_hash", "token", "authorization", "secret", "jwt_secret"}
REDACTED = "***"


def redact(data: Dict[str, Any]) -> Dict[str, Any]:
    clean = {}
    for key, value in data.items():
        if key.lower() in SENSITIVE_KEYS:
            clean[key] = REDACTED
        elif isinstance(value, dict):
            clean[key] = redact(value)
        else:
            clean[key] = value
    return clean


class Logger(ABC):
    """Event logger: `logger.info("login_success", username=...)`.

    Subclasses implement `_emit`; the public methods scrub credentials first.
    """

    log_type = "server"

    @abstractmethod
    def _emit(self, level: str, msg: str, data: Dict[str, Any]): ...

    def info(self, msg: str, **data):
        self._emit("INFO", msg, redact(data))

    def debug(self, msg: str, **data):
        self._emit("DEBUG", msg, redact(data))

    def warning(self, msg: str, **data):
        self._emit("WARN", msg, redact(data))

    def error(self, msg: str, **data):
        self._emit("ERROR", msg, redact(data))
