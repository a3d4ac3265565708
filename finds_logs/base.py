from abc import ABC, abstractmethod

# record level -> rank; records below a logger's threshold are dropped
LEVELS = {"DEBUG": 10, "INFO": 20, "WARN": 30, "WARNING": 30, "ERROR": 40}

class Logger(ABC):
    """Structured logger: an event name plus keyword data, one record per call."""

    level = "INFO"

    def _enabled(self, level: str) -> bool:
        return LEVELS[level] >= LEVELS.get(str(self.level).upper(), LEVELS["INFO"])

    @abstractmethod
    def info(self, msg: str, **data): ...

    @abstractmethod
    def debug(self, msg: str, **data): ...

    @abstractmethod
    def warning(self, msg: str, **data): ...

    @abstractmethod
    def error(self, msg: str, **data): ...

    def rejected(self, msg: str, exc: Exception, **data):
        """Warn about input refused with `exc`, keeping the exception's own fields."""
        details = {
            "error_type": type(exc).__name__,
            "error": str(exc),
        }
        for attr in ("reason", "tokens"):
            if hasattr(exc, attr):
                details[attr] = getattr(exc, attr)
        self.warning(msg, **details, **data)
