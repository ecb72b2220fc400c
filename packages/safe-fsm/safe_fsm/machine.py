"""StateMachine - registry, hooks and the fire protocol."""
from __future__ import annotations

import functools
import logging
from typing import Any, Callable

from safe_fsm.hooks import ConventionHooks, HookProvider, HookTable
from safe_fsm.naming import method_name
from safe_fsm.registry import TransitionRegistry
from safe_fsm.types import (
    Action,
    InvalidEventError,
    InvalidStateSeedError,
    Phase,
    Transition,
    UnresolvedHookError,
)

logger = logging.getLogger(__name__)

CommitCallback = Callable[["StateMachine"], None]


class StateMachine:
    """Finite state machine driven by named events.

    Every defined event also becomes a zero-argument shortcut, so after
    ``machine.transition("condense", "GAS", "LIQUID")`` calling
    ``machine.condense()`` is the same as ``machine.fire("condense")``.

    Hooks resolve against ``owner`` (the machine itself by default): methods
    named ``before_<event>``, ``on_<event>`` and ``after_<event>`` run
    automatically, and the ``before``/``on``/``after`` registration methods
    accept either a callable or the name of a method on ``owner``.
    Convention methods are looked up when the event is defined; one added to
    ``owner`` later runs once it is registered by its convention name.

    Invalid input is absorbed silently unless ``strict`` is set, in which case
    the matching :class:`~safe_fsm.types.TransitionError` is raised.

    ``fire`` is not reentrant: calling ``fire`` on the same machine from
    inside one of its hooks is unsupported.
    """

    def __init__(
        self,
        owner: Any = None,
        *,
        hooks: HookProvider | None = None,
        on_commit: CommitCallback | None = None,
        strict: bool = False,
    ) -> None:
        self._owner = self if owner is None else owner
        self._registry = TransitionRegistry()
        self._table = HookTable()
        self._shortcuts: dict[str, str] = {}
        self._convention = ConventionHooks(self._owner, exclude=self._is_shortcut)
        self._provider: HookProvider = self._convention if hooks is None else hooks
        self._on_commit = on_commit
        self._strict = strict

        self._state: str | None = None
        self._transition_name = ""
        self._from_state: str | None = ""
        self._to_state = ""
        self._next_state = ""

    def __getattr__(self, name: str) -> Callable[[], None]:
        shortcuts = self.__dict__.get("_shortcuts", {})
        if name in shortcuts:
            return functools.partial(self.fire, shortcuts[name])
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    # --- registry ---

    def transition(self, event: str, from_state: str, to_state: str) -> None:
        """Define ``event`` as the move from ``from_state`` to ``to_state``."""
        if not self._registry.define(event, from_state, to_state, strict=self._strict):
            return
        self._shortcuts.setdefault(method_name(event), event)
        self._convention.bind(event)

    def states(self) -> list[str]:
        return self._registry.states()

    def events(self) -> list[str]:
        return self._registry.events()

    def transitions(self) -> list[Transition]:
        return self._registry.transitions()

    def has_state(self, name: str) -> bool:
        return self._registry.has_state(name)

    def has_event(self, name: str) -> bool:
        return self._registry.has_event(name)

    def shortcut(self, name: str) -> Callable[[], None] | None:
        """Return the zero-argument trigger for an event or its method name, or None."""
        event = self._shortcuts.get(method_name(name))
        if event is None:
            return None
        return functools.partial(self.fire, event)

    def shortcut_names(self) -> list[str]:
        """Attribute names that trigger events, e.g. ``["condense", "freeze"]``."""
        return list(self._shortcuts)

    # --- state ---

    @property
    def state(self) -> str | None:
        return self._state

    def set_initial(self, state: str) -> None:
        """Seed the current state once. Always returns None, even on success."""
        if self._state is not None or not self._registry.has_state(state):
            logger.debug("Ignoring seed %r (current state %r)", state, self._state)
            if self._strict:
                raise InvalidStateSeedError(
                    f"Cannot seed {state!r}: current state is {self._state!r}"
                )
            return None
        self._state = state
        return None

    @property
    def transition_name(self) -> str:
        return self._transition_name

    @property
    def from_state(self) -> str | None:
        return self._from_state

    @property
    def to_state(self) -> str:
        return self._to_state

    @property
    def next_state(self) -> str:
        return self._next_state

    # --- hooks ---

    def before(self, event: str, hook: Callable[[], bool] | str) -> None:
        """Register a guard. Any guard returning False blocks the transition."""
        self._register(Phase.BEFORE, event, hook)

    def on(self, event: str, hook: Action | str) -> None:
        """Register an action run before the state is committed."""
        self._register(Phase.ON, event, hook)

    def after(self, event: str, hook: Action | str) -> None:
        """Register an action run after the state is committed."""
        self._register(Phase.AFTER, event, hook)

    def _register(self, phase: Phase, event: str, hook: Callable[..., Any] | str) -> None:
        if isinstance(hook, str):
            if hook == method_name(phase.value, event) and self._provider is self._convention:
                # Runs as the convention hook; pick up methods added since definition.
                self._convention.bind(event)
                return
            fn = None if self._is_shortcut(hook) else getattr(self._owner, hook, None)
            if not callable(fn):
                logger.debug("Ignoring %s hook %r for %r: not callable", phase.value, hook, event)
                if self._strict:
                    raise UnresolvedHookError(f"{hook!r} does not name a method")
                return
            hook = fn
        self._table.add(phase, event, hook)

    def _is_shortcut(self, name: str) -> bool:
        return name in self._shortcuts

    # --- firing ---

    def fire(self, event: str) -> None:
        """Run ``event``: guards, on hooks, commit, after hooks.

        Unknown events and events with no transition from the current state
        leave the machine unchanged. The transition context is cleared when
        the cycle ends, whether or not the state changed.
        """
        if not self._registry.has_event(event):
            logger.debug("Ignoring unknown event %r", event)
            if self._strict:
                raise InvalidEventError(event, f"Unknown event {event!r}")
            return

        transition = self._registry.find(event, self._state)
        self._transition_name = event
        self._from_state = self._state
        if transition is not None:
            self._to_state = transition.target
        self._next_state = ""
        try:
            if self._guards_pass(event) and transition is not None:
                self._commit(event, transition)
        finally:
            self._clear_context()

    def _guards_pass(self, event: str) -> bool:
        derived = self._provider.before_hook(event)
        derived_ok = True if derived is None else bool(derived())
        explicit_ok = self._table.check(event)
        return derived_ok and explicit_ok

    def _commit(self, event: str, transition: Transition) -> None:
        self._next_state = transition.target

        on_hook = self._provider.on_hook(event)
        if on_hook is not None:
            on_hook()
        self._table.run(Phase.ON, event)

        self._state = transition.target
        self._next_state = ""
        if self._on_commit is not None:
            self._on_commit(self)

        after_hook = self._provider.after_hook(event)
        if after_hook is not None:
            after_hook()
        self._table.run(Phase.AFTER, event)

    def _clear_context(self) -> None:
        self._transition_name = ""
        self._from_state = ""
        self._to_state = ""
        self._next_state = ""
