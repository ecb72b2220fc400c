"""Severity levels and their colour triples."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from rich.color import ColorSystem
from rich.style import Style


@dataclass(frozen=True, slots=True)
class Palette:
    header: Style
    message: Style
    tag: Style

    def timestamp(self) -> Style:
        return self.header + Style(bold=True, italic=True)

    def title(self) -> Style:
        return self.header + Style(bold=True)


class Severity(Enum):
    INFO = Palette(Style(color="blue"), Style(color="bright_blue"), Style(color="bright_cyan"))
    SAFE = Palette(Style(color="cyan"), Style(color="bright_cyan"), Style(color="bright_green"))
    CRITICAL = Palette(
        Style(color="yellow"),
        Style(color="bright_red"),
        Style(color="bright_yellow", blink=True),
    )


def paint(text: str, style: Style) -> str:
    """Wrap ``text`` in 16-colour ANSI codes for ``style``."""
    return style.render(text, color_system=ColorSystem.STANDARD)
