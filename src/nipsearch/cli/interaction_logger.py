"""CLI interaction logging.

Logs every nipsearch CLI invocation as one JSON line under
~/.local/state/nipsearch/logs/ for:
- Debugging how queries and their extensions were interpreted
- Reviewing which REQ messages were generated over time
"""

import json
import os
import time
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

from nipsearch.paths import get_log_dir


class InteractionLogger:
    """Appends CLI interactions to a daily log file.

    Can be disabled by setting NIPSEARCH_INTERACTION_LOG=0.
    """

    # None means the XDG state directory from nipsearch.paths
    LOG_DIR: Optional[Path] = None
    LOG_FILENAME_TEMPLATE = "nipsearch-interactions-{date}.log"

    def __init__(self):
        self._disabled = os.environ.get("NIPSEARCH_INTERACTION_LOG", "1") == "0"
        self._start_time: Optional[float] = None
        self._context: dict[str, Any] = {}

    def _get_log_dir(self) -> Path:
        """Get or create the log directory."""
        if self.LOG_DIR is None:
            return get_log_dir()
        if not self.LOG_DIR.exists():
            self.LOG_DIR.mkdir(parents=True, exist_ok=True)
        return self.LOG_DIR

    @property
    def execution_context(self) -> str:
        """Return the execution context identifier."""
        return "ci" if os.environ.get("CI") else "terminal"

    def start(self, command: str, subcommand: Optional[str] = None, **kwargs):
        """Start tracking an interaction.

        Args:
            command: The main command (e.g., 'search', 'config')
            subcommand: The subcommand (e.g., 'parse', 'req')
            **kwargs: Additional context to log (query, kinds, etc.)
        """
        self._start_time = time.perf_counter()
        self._context = {
            "command": command,
            "subcommand": subcommand,
            **kwargs
        }

    def finish(
        self,
        result_count: Optional[int] = None,
        error: Optional[str] = None,
        **extra
    ):
        """Complete and write the interaction log entry.

        Args:
            result_count: Number of items produced, if meaningful
            error: Error message if command failed, None on success
            **extra: Additional fields to include in log entry
        """
        if self._start_time is None:
            return

        duration_ms = int((time.perf_counter() - self._start_time) * 1000)

        entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "context": self.execution_context,
            "duration_ms": duration_ms,
            "cwd": str(Path.cwd()),
            "error": error,
            **self._context,
            **extra,
        }

        if result_count is not None:
            entry["result_count"] = result_count

        self._write_entry(entry)
        self._reset()

    def _get_log_filename(self) -> str:
        """Get date-based log filename (UTC)."""
        today = datetime.now(timezone.utc).strftime("%Y-%m-%d")
        return self.LOG_FILENAME_TEMPLATE.format(date=today)

    def _write_entry(self, entry: dict[str, Any]):
        """Append entry to log file."""
        if self._disabled:
            return
        try:
            log_file = self._get_log_dir() / self._get_log_filename()
            with open(log_file, "a") as f:
                f.write(json.dumps(entry, default=str) + "\n")
        except OSError:
            # Logging must never break the CLI
            pass

    def _reset(self):
        """Reset internal state."""
        self._start_time = None
        self._context = {}

    @contextmanager
    def track(self, command: str, subcommand: Optional[str] = None, **kwargs):
        """Context manager for tracking interactions.

        Usage:
            with interaction_logger.track("search", "req", query="test") as result:
                ...
                result["result_count"] = 1
        """
        self.start(command, subcommand, **kwargs)
        result = {"result_count": None, "error": None}
        try:
            yield result
        except Exception as e:
            result["error"] = str(e)
            raise
        finally:
            self.finish(
                result_count=result.get("result_count"),
                error=result.get("error")
            )


# Global logger instance
interaction_logger = InteractionLogger()
