"""Hook table and hook providers."""
from __future__ import annotations

from typing import Any, Callable, Protocol

from safe_fsm.naming import method_name
from safe_fsm.types import Action, Guard, Phase


class HookProvider(Protocol):
    """Single-slot hooks looked up by event name, one per phase."""

    def before_hook(self, event: str) -> Guard | None: ...

    def on_hook(self, event: str) -> Action | None: ...

    def after_hook(self, event: str) -> Action | None: ...


class ConventionHooks:
    """HookProvider filled from methods named ``before_<event>``, ``on_<event>``, ``after_<event>``.

    ``bind(event)`` resolves the three names on ``owner`` once, when the event
    is defined. Later lookups only read the resulting mapping.
    """

    def __init__(self, owner: Any, exclude: Callable[[str], bool] | None = None) -> None:
        self._owner = owner
        self._exclude = exclude
        self._slots: dict[tuple[Phase, str], Callable[..., Any]] = {}

    def bind(self, event: str) -> None:
        for phase in Phase:
            name = method_name(phase.value, event)
            if self._exclude is not None and self._exclude(name):
                continue
            fn = getattr(self._owner, name, None)
            if callable(fn):
                self._slots[(phase, event)] = fn

    def before_hook(self, event: str) -> Guard | None:
        return self._slots.get((Phase.BEFORE, event))

    def on_hook(self, event: str) -> Action | None:
        return self._slots.get((Phase.ON, event))

    def after_hook(self, event: str) -> Action | None:
        return self._slots.get((Phase.AFTER, event))


class HookTable:
    """Explicitly registered hooks: one append-only list per (phase, event)."""

    def __init__(self) -> None:
        self._hooks: dict[Phase, dict[str, list[Callable[..., Any]]]] = {
            phase: {} for phase in Phase
        }

    def add(self, phase: Phase, event: str, fn: Callable[..., Any]) -> None:
        self._hooks[phase].setdefault(event, []).append(fn)

    def get(self, phase: Phase, event: str) -> list[Callable[..., Any]]:
        """Hooks for ``event`` in registration order (a copy)."""
        return list(self._hooks[phase].get(event, ()))

    def count(self, phase: Phase, event: str) -> int:
        return len(self._hooks[phase].get(event, ()))

    def check(self, event: str) -> bool:
        """Run every before hook for ``event``; True only if all returned True.

        All hooks run even after one has vetoed, so side effects are not skipped.
        """
        results = [hook() for hook in self.get(Phase.BEFORE, event)]
        return all(results)

    def run(self, phase: Phase, event: str) -> None:
        for hook in self.get(phase, event):
            hook()
