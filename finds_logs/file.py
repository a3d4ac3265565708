from finds_logs.base import Logger
from datetime import datetime, timezone
from pathlib import Path
import json
import os

class FileLogger(Logger):
    def __init__(self, log_type="engine", base_path=None, level="INFO"):
        self.log_type = log_type
        self.level = level
        base_path = base_path or os.getenv("FINDS_LOG_DIR", "logs")
        self.path = Path(base_path) / f"{log_type}.log"

        # Ensure directory exists
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def _write(self, level, msg, data):
        if not self._enabled(level):
            return
        ts = datetime.now(timezone.utc).isoformat()
        with open(self.path, "a", encoding="utf-8") as f:
            f.write(json.dumps({
                "ts": ts,
                "log_type": self.log_type,
                "level": level,
                "event": msg,
                **data
            }, ensure_ascii=False) + "\n")

    def info(self, msg, **data):
        self._write("INFO", msg, data)

    def debug(self, msg, **data):
        self._write("DEBUG", msg, data)

    def warning(self, msg, **data):
        self._write("WARN", msg, data)

    def error(self, msg, **data):
        self._write("ERROR", msg, data)
