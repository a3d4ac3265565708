from finds_logs.base import Logger

class CompositeLogger(Logger):
    """Fans every record out to each wrapped logger, in order."""

    def __init__(self, *loggers: Logger):
        self.loggers = loggers

    def _fan_out(self, level, msg, data):
        for l in self.loggers:
            getattr(l, level)(msg, **data)

    def info(self, msg, **data):
        self._fan_out("info", msg, data)

    def debug(self, msg, **data):
        self._fan_out("debug", msg, data)

    def warning(self, msg, **data):
        self._fan_out("warning", msg, data)

    def error(self, msg, **data):
        self._fan_out("error", msg, data)
