"""LineFormatter - renders one log call into one multi-line string."""
from __future__ import annotations

from datetime import datetime, timezone

from safe_log.palette import Severity, paint


def iso_timestamp(moment: datetime | None = None) -> str:
    """UTC ISO-8601 with milliseconds and a ``Z`` suffix."""
    moment = datetime.now(timezone.utc) if moment is None else moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class LineFormatter:
    """Builds ``<timestamp> <App>(v<major>.<minor>.<patch>) [<tag>]:`` headed lines.

    Every line of the message body is indented by two spaces and, with
    colour on, painted on its own so that splitting the output never leaves
    an open escape sequence.
    """

    def __init__(self, app_name: str, major: str, minor: str, patch: str) -> None:
        self._app_name = app_name
        self._version = f"{major}.{minor}.{patch}"

    @property
    def header(self) -> str:
        return f"{self._app_name}(v{self._version})"

    def format(
        self,
        severity: Severity,
        message: str,
        tag: str = "",
        *,
        color: bool = True,
        moment: datetime | None = None,
    ) -> str:
        palette = severity.value
        timestamp = iso_timestamp(moment)
        header = self.header
        label = tag
        body = [f"  {line}" for line in str(message).split("\n")]
        if color:
            timestamp = paint(timestamp, palette.timestamp())
            header = paint(header, palette.title())
            if tag:
                label = paint(tag, palette.tag)
            body = [f"  {paint(line, palette.message)}" for line in str(message).split("\n")]
        return f"{timestamp} {header} [{label}]: \n" + "\n".join(body)
