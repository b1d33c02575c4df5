from server_logs.base import Logger
from datetime import datetime, timezone


class StdoutLogger(Logger):

    def __init__(self, log_type="server"):
        self.log_type = log_type

    def _emit(self, level, msg, data):
        ts = datetime.now(timezone.utc).isoformat()
        print(f"[{ts}] [{self.log_type}] {level} {msg} {data}")
