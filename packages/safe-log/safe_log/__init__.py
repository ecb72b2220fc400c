"""safe-log - Colourised, timestamped log lines with a serialized file queue."""
from __future__ import annotations

from safe_log.config import LogConfig
from safe_log.formatter import LineFormatter, iso_timestamp
from safe_log.logger import Logger
from safe_log.palette import Palette, Severity, paint
from safe_log.queue import LogQueue

__all__ = [
    "Logger",
    "LogConfig",
    "LogQueue",
    "LineFormatter",
    "Severity",
    "Palette",
    "paint",
    "iso_timestamp",
]
