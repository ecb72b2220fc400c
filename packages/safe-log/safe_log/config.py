"""Logger configuration."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

TRACE_ENV_KEYS = ("STATE", "state")
TRACE_ENV_VALUE = "show"


@dataclass
class LogConfig:
    """Settings for a Logger.

    ``sink_path`` switches output from the console to a queued file and turns
    colour off. ``trace_transitions`` asks the owner to log every committed
    transition. ``max_pending`` caps the file queue backlog (None = unbounded).
    """

    sink_path: Path | None = None
    color: bool = True
    trace_transitions: bool = False
    max_pending: int | None = None

    def __post_init__(self) -> None:
        if self.sink_path is not None:
            self.sink_path = Path(self.sink_path)
            self.color = False
        if self.max_pending is not None and self.max_pending < 1:
            raise ValueError(f"max_pending must be >= 1, got {self.max_pending}")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None, **overrides) -> LogConfig:
        """Build a config with ``trace_transitions`` taken from ``STATE``/``state``.

        Either variable set to ``show`` (any case) turns tracing on.
        """
        env = os.environ if environ is None else environ
        trace = any(
            env.get(key, "").lower() == TRACE_ENV_VALUE for key in TRACE_ENV_KEYS
        )
        overrides.setdefault("trace_transitions", trace)
        return cls(**overrides)
