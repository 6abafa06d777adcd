"""Unit tests for CLI interaction logging."""

import json
from datetime import datetime, timezone
from unittest.mock import patch

import pytest

from nipsearch.cli.interaction_logger import InteractionLogger


def _read_entries(log_dir):
    today = datetime.now(timezone.utc).strftime("%Y-%m-%d")
    log_file = log_dir / f"nipsearch-interactions-{today}.log"
    return [json.loads(line) for line in log_file.read_text().splitlines()]


@pytest.fixture
def enabled_env(monkeypatch):
    """Re-enable interaction logging that the shared fixture switches off."""
    monkeypatch.setenv("NIPSEARCH_INTERACTION_LOG", "1")
    monkeypatch.delenv("CI", raising=False)


class TestLogFile:
    """Test log file creation and format."""

    def test_creates_log_directory(self, tmp_path, enabled_env):
        log_dir = tmp_path / "logs"

        with patch.object(InteractionLogger, "LOG_DIR", log_dir):
            logger = InteractionLogger()
            logger.start("search", "parse")
            logger.finish()

        assert log_dir.exists()

    def test_defaults_to_xdg_state_dir(self, isolated_env, enabled_env):
        logger = InteractionLogger()
        logger.start("search", "parse")
        logger.finish()

        entries = _read_entries(isolated_env / "state" / "nipsearch" / "logs")
        assert entries[0]["command"] == "search"

    def test_writes_jsonl(self, tmp_path, enabled_env):
        with patch.object(InteractionLogger, "LOG_DIR", tmp_path):
            logger = InteractionLogger()
            logger.start("search", "req", query="nostr")
            logger.finish(result_count=1)
            logger.start("search", "parse", query="bitcoin")
            logger.finish()

        entries = _read_entries(tmp_path)
        assert len(entries) == 2
        assert entries[0]["subcommand"] == "req"
        assert entries[0]["query"] == "nostr"
        assert entries[0]["result_count"] == 1
        assert "result_count" not in entries[1]


class TestLogEntryFormat:
    """Test log entry fields."""

    def test_entry_includes_required_fields(self, tmp_path, enabled_env):
        with patch.object(InteractionLogger, "LOG_DIR", tmp_path):
            logger = InteractionLogger()
            logger.start("search", "filter", query="nostr")
            logger.finish()

        entry = _read_entries(tmp_path)[0]
        for field in ("timestamp", "context", "command", "subcommand", "duration_ms", "cwd", "error"):
            assert field in entry
        assert entry["context"] == "terminal"
        assert entry["error"] is None

    def test_ci_context(self, tmp_path, enabled_env, monkeypatch):
        monkeypatch.setenv("CI", "true")
        assert InteractionLogger().execution_context == "ci"

    def test_error_field_captures_errors(self, tmp_path, enabled_env):
        with patch.object(InteractionLogger, "LOG_DIR", tmp_path):
            logger = InteractionLogger()
            logger.start("config", "show")
            logger.finish(error="Config file not found")

        assert _read_entries(tmp_path)[0]["error"] == "Config file not found"

    def test_finish_without_start_is_noop(self, tmp_path, enabled_env):
        with patch.object(InteractionLogger, "LOG_DIR", tmp_path):
            InteractionLogger().finish()

        assert list(tmp_path.iterdir()) == []


class TestTrack:
    """Test the track() context manager."""

    def test_records_result_count(self, tmp_path, enabled_env):
        with patch.object(InteractionLogger, "LOG_DIR", tmp_path):
            logger = InteractionLogger()
            with logger.track("search", "req", query="nostr") as result:
                result["result_count"] = 1

        assert _read_entries(tmp_path)[0]["result_count"] == 1

    def test_records_and_reraises_errors(self, tmp_path, enabled_env):
        with patch.object(InteractionLogger, "LOG_DIR", tmp_path):
            logger = InteractionLogger()
            with pytest.raises(ValueError):
                with logger.track("search", "filter"):
                    raise ValueError("bad kind")

        assert _read_entries(tmp_path)[0]["error"] == "bad kind"


class TestDisablingLogging:
    """Test disabling logging via environment variable."""

    def test_env_var_disables_logging(self, tmp_path, monkeypatch):
        monkeypatch.setenv("NIPSEARCH_INTERACTION_LOG", "0")

        with patch.object(InteractionLogger, "LOG_DIR", tmp_path):
            logger = InteractionLogger()
            logger.start("search", "parse")
            logger.finish()

        assert list(tmp_path.iterdir()) == []

    def test_write_failure_is_silent(self, tmp_path, enabled_env):
        blocker = tmp_path / "not-a-dir"
        blocker.write_text("")

        with patch.object(InteractionLogger, "LOG_DIR", blocker):
            logger = InteractionLogger()
            logger.start("search", "parse")
            logger.finish()
