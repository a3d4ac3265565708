"""Tests for the finds_logs logger package."""

from __future__ import annotations

import json

from finds_logs.chooseLogType import get_logger
from finds_logs.composite import CompositeLogger
from finds_logs.file import FileLogger
from finds_logs.json import JSONLogger
from finds_logs.stdout import StdoutLogger


class TestGetLogger:
    def test_dev_is_stdout(self) -> None:
        assert isinstance(get_logger(mode="dev"), StdoutLogger)

    def test_prod_is_file_and_json(self, tmp_path, monkeypatch) -> None:
        monkeypatch.setenv("FINDS_LOG_DIR", str(tmp_path))
        logger = get_logger(mode="prod", log_type="engine")
        assert isinstance(logger, CompositeLogger)
        assert [type(l) for l in logger.loggers] == [FileLogger, JSONLogger]

    def test_level_passed_through(self, tmp_path, monkeypatch) -> None:
        monkeypatch.setenv("FINDS_LOG_DIR", str(tmp_path))
        assert get_logger(mode="dev", level="DEBUG").level == "DEBUG"
        logger = get_logger(mode="prod", level="WARN")
        assert [l.level for l in logger.loggers] == ["WARN", "WARN"]


class TestFileLogger:
    def test_writes_json_lines(self, tmp_path) -> None:
        logger = FileLogger(log_type="engine", base_path=str(tmp_path))
        logger.info("finds_detected", finds=3, ids=["pair", "mirror", "ace-high"])
        logger.warning("detect_rejected", reason="duplicate", tokens=["5♠"])

        lines = (tmp_path / "engine.log").read_text(encoding="utf-8").splitlines()
        first, second = (json.loads(line) for line in lines)
        assert first["level"] == "INFO"
        assert first["event"] == "finds_detected"
        assert first["ids"] == ["pair", "mirror", "ace-high"]
        assert second["level"] == "WARN"
        assert second["tokens"] == ["5♠"]


class TestStreamLoggers:
    def test_stdout_format(self, capsys) -> None:
        StdoutLogger(log_type="client").error("deck_load_failed", path="x.json")
        out = capsys.readouterr().out
        assert "[client] ERROR deck_load_failed" in out
        assert "x.json" in out

    def test_json_format(self, capsys) -> None:
        JSONLogger(log_type="engine", level="DEBUG").debug("finds_detected", finds=0)
        record = json.loads(capsys.readouterr().out)
        assert record["level"] == "DEBUG"
        assert record["data"] == {"finds": 0}


class TestLevels:
    def test_debug_hidden_by_default(self, capsys) -> None:
        StdoutLogger(log_type="engine").debug("finds_detected", finds=2)
        JSONLogger(log_type="engine").debug("finds_detected", finds=2)
        assert capsys.readouterr().out == ""

    def test_debug_shown_at_debug(self, capsys) -> None:
        StdoutLogger(log_type="engine", level="debug").debug("finds_detected", finds=2)
        assert "DEBUG finds_detected" in capsys.readouterr().out

    def test_threshold_drops_lower_levels(self, tmp_path) -> None:
        logger = FileLogger(log_type="engine", base_path=str(tmp_path), level="WARNING")
        logger.info("deck_loaded", path="x.json")
        logger.error("deck_load_failed", path="x.json")

        lines = (tmp_path / "engine.log").read_text(encoding="utf-8").splitlines()
        assert [json.loads(line)["level"] for line in lines] == ["ERROR"]

    def test_detect_is_quiet_at_info(self, capsys, monkeypatch) -> None:
        from finds_components import engine
        from finds_components.card_utils.deck import FACTORY_ORDER

        monkeypatch.setattr(engine, "engine_logger", StdoutLogger(log_type="engine"))
        engine.detect(FACTORY_ORDER)
        assert capsys.readouterr().out == ""


class TestRejected:
    def test_carries_invalid_deck_fields(self, tmp_path) -> None:
        from finds_components.card_utils.deck import InvalidDeck

        logger = FileLogger(log_type="engine", base_path=str(tmp_path))
        logger.rejected("detect_rejected", InvalidDeck("duplicate", "Duplicate cards", ["5♠"]), source="test")

        record = json.loads((tmp_path / "engine.log").read_text(encoding="utf-8"))
        assert record["level"] == "WARN"
        assert record["error_type"] == "InvalidDeck"
        assert record["reason"] == "duplicate"
        assert record["tokens"] == ["5♠"]
        assert record["source"] == "test"

    def test_plain_exception(self, capsys) -> None:
        StdoutLogger().rejected("deck_load_failed", FileNotFoundError("nope.json"))
        out = capsys.readouterr().out
        assert "WARN deck_load_failed" in out
        assert "FileNotFoundError" in out
