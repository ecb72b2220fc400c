"""Core data types and error kinds for the state machine."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable

Guard = Callable[[], bool]
Action = Callable[[], None]


class Phase(str, Enum):
    BEFORE = "before"
    ON = "on"
    AFTER = "after"


@dataclass(frozen=True, slots=True)
class Transition:
    """A legal move: ``event`` takes the machine from ``source`` to ``target``."""

    event: str
    source: str
    target: str


class TransitionError(Exception):
    """Base class for failures that strict machines raise instead of absorbing."""


class InvalidEventError(TransitionError):
    """Raised for reserved event names or events unknown at fire time."""

    def __init__(self, event: str, message: str) -> None:
        self.event = event
        super().__init__(message)


class DuplicateTransitionError(TransitionError):
    """Raised when the event name or the (source, target) pair is already taken."""


class InvalidStateSeedError(TransitionError):
    """Raised when seeding an unknown state or seeding a second time."""


class UnresolvedHookError(TransitionError):
    """Raised when a hook given by name does not resolve to a callable."""
