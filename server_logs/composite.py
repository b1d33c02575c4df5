from server_logs.base import Logger


class CompositeLogger(Logger):
    """Fans each event out to several sinks (file + stdout JSON in prod)."""

    def __init__(self, *loggers: Logger, log_type="server"):
        self.loggers = loggers
        self.log_type = log_type

    def _emit(self, level, msg, data):
        # data is already redacted; call the sinks' _emit directly
        for sink in self.loggers:
            sink._emit(level, msg, data)
