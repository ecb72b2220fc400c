"""LogQueue - FIFO of formatted lines drained to a file by one writer."""
from __future__ import annotations

import logging
import threading
from collections import deque
from pathlib import Path

logger = logging.getLogger(__name__)


class LogQueue:
    """Serializes appends of log lines to ``path``.

    ``emit`` never blocks on the file: it enqueues and, if no drain is
    running, starts one on a daemon thread. At most one drain is active per
    queue, so lines reach the file whole and in submission order. A failed
    append is logged and skipped. Lines still queued when the interpreter
    exits may be lost.

    ``max_pending`` caps the backlog; when full, the oldest waiting line is
    dropped. The default is no cap.
    """

    def __init__(self, path: str | Path, max_pending: int | None = None) -> None:
        if max_pending is not None and max_pending < 1:
            raise ValueError(f"max_pending must be >= 1, got {max_pending}")
        self._path = Path(path)
        self._max_pending = max_pending
        self._pending: deque[str] = deque()
        self._lock = threading.Lock()
        self._writing = False
        self._idle = threading.Event()
        self._idle.set()
        self._dropped = 0

    @property
    def path(self) -> Path:
        return self._path

    @property
    def is_writing(self) -> bool:
        return self._writing

    @property
    def dropped(self) -> int:
        """Number of lines discarded because the backlog was full."""
        return self._dropped

    def pending(self) -> int:
        """Return the number of lines waiting to be written."""
        with self._lock:
            return len(self._pending)

    def emit(self, line: str) -> None:
        with self._lock:
            if self._max_pending is not None and len(self._pending) >= self._max_pending:
                self._pending.popleft()
                self._dropped += 1
                logger.warning("Log queue for %s is full; dropped oldest line", self._path)
            self._pending.append(line)
            if self._writing:
                return
            self._writing = True
            self._idle.clear()
        threading.Thread(target=self._drain, name=f"log-drain:{self._path.name}", daemon=True).start()

    def flush(self, timeout: float | None = None) -> bool:
        """Block until the queue is empty and idle. False if ``timeout`` expired."""
        return self._idle.wait(timeout)

    def _drain(self) -> None:
        try:
            while True:
                with self._lock:
                    if not self._pending:
                        self._writing = False
                        self._idle.set()
                        return
                    line = self._pending.popleft()
                self._append(line)
        except BaseException:
            with self._lock:
                self._writing = False
                self._idle.set()
            raise

    def _append(self, line: str) -> None:
        try:
            with self._path.open("a", encoding="utf-8") as fh:
                fh.write(line + "\n")
        except (OSError, ValueError) as e:
            # ValueError covers unencodable text and NUL bytes in the path.
            logger.error("Failed to write log to file %s: %s", self._path, e)
