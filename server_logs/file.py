from server_logs.base import Logger
from datetime import datetime, timezone
from pathlib import Path
import threading
import json


class FileLogger(Logger):
    """Appends one JSON object per event to logs/<log_type>.log."""

    def __init__(self, log_type="server", base_path="logs"):
        self.log_type = log_type
        self.path = Path(base_path) / f"{log_type}.log"
        self._lock = threading.Lock()

        self.path.parent.mkdir(parents=True, exist_ok=True)

    def _emit(self, level, msg, data):
        line = json.dumps({
            "ts": datetime.now(timezone.utc).isoformat(),
            "log_type": self.log_type,
            "level": level,
            "event": msg,
            **data
        }, default=str)
        # handlers run in a threadpool; keep lines from interleaving
        with self._lock:
            with open(self.path, "a") as f:
                f.write(line + "\n")
