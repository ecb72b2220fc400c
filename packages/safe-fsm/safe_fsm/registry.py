"""TransitionRegistry class."""
from __future__ import annotations

import logging

from safe_fsm.naming import is_valid_event
from safe_fsm.types import DuplicateTransitionError, InvalidEventError, Transition

logger = logging.getLogger(__name__)


class TransitionRegistry:
    """Stores legal transitions in insertion order. Grows only; nothing is removed.

    A transition is refused when its event is reserved, when its event name is
    already used, or when its (source, target) pair is already used. The first
    registration wins.
    """

    def __init__(self) -> None:
        self._transitions: list[Transition] = []
        self._states: set[str] = set()
        self._events: set[str] = set()
        self._pairs: set[tuple[str, str]] = set()

    def define(self, event: str, source: str, target: str, *, strict: bool = False) -> bool:
        """Add a transition. Returns False (or raises when ``strict``) if refused."""
        if not is_valid_event(event) or not source or not target:
            logger.debug("Ignoring invalid transition %r: %r -> %r", event, source, target)
            if strict:
                raise InvalidEventError(event, f"Invalid event name {event!r}")
            return False
        if (source, target) in self._pairs or event in self._events:
            logger.debug("Ignoring duplicate transition %r: %r -> %r", event, source, target)
            if strict:
                raise DuplicateTransitionError(
                    f"Transition {event!r} ({source} -> {target}) is already defined"
                )
            return False

        self._transitions.append(Transition(event, source, target))
        self._pairs.add((source, target))
        self._states.add(source)
        self._states.add(target)
        self._events.add(event)
        return True

    def find(self, event: str, source: str | None) -> Transition | None:
        """Return the transition for ``event`` leaving ``source``, if any."""
        for transition in self._transitions:
            if transition.event == event and transition.source == source:
                return transition
        return None

    def has_state(self, name: str) -> bool:
        return name in self._states

    def has_event(self, name: str) -> bool:
        return name in self._events

    def states(self) -> list[str]:
        """All state names, sorted."""
        return sorted(self._states)

    def events(self) -> list[str]:
        """All event names, sorted."""
        return sorted(self._events)

    def transitions(self) -> list[Transition]:
        """Return a copy of the transitions in insertion order."""
        return list(self._transitions)
