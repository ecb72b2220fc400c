"""Logger - leveled, timestamped log lines to the console or a queued file."""
from __future__ import annotations

import sys
from dataclasses import replace
from pathlib import Path
from typing import TextIO

from safe_log.config import LogConfig
from safe_log.formatter import LineFormatter
from safe_log.palette import Severity
from safe_log.queue import LogQueue


class Logger:
    """Writes one multi-line record per call.

    ``author`` is kept for callers only; it does not appear in records.

    Records go to ``stream`` (``sys.stdout`` by default) until a sink path is
    configured, either in ``config`` or later with :meth:`log_to`. From then
    on records are queued to that file and colour stays off for the life of
    the instance.
    """

    def __init__(
        self,
        author: str,
        app_name: str,
        major: str,
        minor: str,
        patch: str,
        config: LogConfig | None = None,
        stream: TextIO | None = None,
    ) -> None:
        self.author = author
        self.app_name = app_name
        self._config = LogConfig() if config is None else replace(config)
        self._formatter = LineFormatter(app_name, major, minor, patch)
        self._stream = stream
        self._queue: LogQueue | None = None
        if self._config.sink_path is not None:
            self._queue = LogQueue(self._config.sink_path, self._config.max_pending)

    @property
    def config(self) -> LogConfig:
        return self._config

    @property
    def use_color(self) -> bool:
        return self._config.color

    @property
    def queue(self) -> LogQueue | None:
        return self._queue

    def log_to(self, path: str | Path) -> None:
        """Send every later record to ``path`` and disable colour.

        Repeating the current path keeps the existing queue. Switching to a
        new path waits for the old queue to finish its backlog first, so one
        writer owns each file at a time.
        """
        path = Path(path)
        self._config.color = False
        if self._queue is not None:
            if self._queue.path.absolute() == path.absolute():
                return
            self._queue.flush()
        self._config.sink_path = path
        self._queue = LogQueue(path, self._config.max_pending)

    def info_msg(self, msg: str, tag: str = "") -> Logger:
        return self.log(Severity.INFO, msg, tag)

    def safe_msg(self, msg: str, tag: str = "") -> Logger:
        return self.log(Severity.SAFE, msg, tag)

    def critical_msg(self, msg: str, tag: str = "") -> Logger:
        return self.log(Severity.CRITICAL, msg, tag)

    def log(self, severity: Severity, msg: str, tag: str = "") -> Logger:
        self.emit(self._formatter.format(severity, msg, tag, color=self._config.color))
        return self

    def emit(self, line: str) -> None:
        if self._queue is not None:
            self._queue.emit(line)
            return
        stream = sys.stdout if self._stream is None else self._stream
        stream.write(line + "\n")
        stream.flush()

    def flush(self, timeout: float | None = None) -> bool:
        """Wait for queued records to reach the file. True when nothing is pending."""
        if self._queue is None:
            return True
        return self._queue.flush(timeout)
