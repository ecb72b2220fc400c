"""StateSafe - a state machine and a logger held side by side."""
from __future__ import annotations

from pathlib import Path
from typing import Callable, TextIO

from safe_fsm import StateMachine, Transition
from safe_log import LogConfig, Logger

STATE_CHANGED_TAG = "STATE CHANGED"


class StateSafe:
    """Application base that owns one :class:`StateMachine` and one :class:`Logger`.

    Subclasses define transitions and hooks in ``__init__``. Methods named
    ``before_<event>``, ``on_<event>`` and ``after_<event>`` on the subclass
    run automatically, and named hooks resolve against the subclass too::

        class Door(StateSafe):
            def __init__(self):
                super().__init__("me", "Door", "1", "0", "0")
                self.transition("open", "CLOSED", "OPEN")
                self.after("open", "announce")

            def announce(self):
                self.safe_msg("Door opened", "OPEN")

    With ``config.trace_transitions`` on, each committed transition is also
    logged as ``Transition (<event>) : [<from>] -> [<to>]``. Without a config,
    tracing follows the ``STATE``/``state`` environment variables.
    """

    version = "1.0.2"

    def __init__(
        self,
        author: str,
        app_name: str,
        major: str,
        minor: str,
        patch: str,
        config: LogConfig | None = None,
        stream: TextIO | None = None,
        *,
        strict: bool = False,
    ) -> None:
        config = LogConfig.from_env() if config is None else config
        self.logger = Logger(author, app_name, major, minor, patch, config, stream)
        self.machine = StateMachine(owner=self, on_commit=self._committed, strict=strict)

    def __getattr__(self, name: str) -> Callable[[], None]:
        machine = self.__dict__.get("machine")
        if machine is not None and name in machine.shortcut_names():
            return machine.shortcut(name)
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    # --- state machine ---

    def transition(self, event: str, from_state: str, to_state: str) -> None:
        self.machine.transition(event, from_state, to_state)

    def states(self) -> list[str]:
        return self.machine.states()

    def events(self) -> list[str]:
        return self.machine.events()

    def transitions(self) -> list[Transition]:
        return self.machine.transitions()

    @property
    def state(self) -> str | None:
        return self.machine.state

    def set_initial(self, state: str) -> None:
        return self.machine.set_initial(state)

    def fire(self, event: str) -> None:
        self.machine.fire(event)

    def before(self, event: str, hook: Callable[[], bool] | str) -> None:
        self.machine.before(event, hook)

    def on(self, event: str, hook: Callable[[], None] | str) -> None:
        self.machine.on(event, hook)

    def after(self, event: str, hook: Callable[[], None] | str) -> None:
        self.machine.after(event, hook)

    @property
    def transition_name(self) -> str:
        return self.machine.transition_name

    @property
    def from_state(self) -> str | None:
        return self.machine.from_state

    @property
    def to_state(self) -> str:
        return self.machine.to_state

    @property
    def next_state(self) -> str:
        return self.machine.next_state

    def notify_state_changed(self, context: str = "") -> None:
        """Log the transition in progress when tracing is enabled."""
        if not self.logger.config.trace_transitions:
            return
        where = f" in {context}" if context else ""
        self.logger.info_msg(
            f"Transition ({self.transition_name or ''}{where}) : "
            f"[{self.from_state or ''}] -> [{self.to_state or ''}]",
            STATE_CHANGED_TAG,
        )

    def _committed(self, machine: StateMachine) -> None:
        self.notify_state_changed()

    # --- logging ---

    def log_to(self, path: str | Path) -> None:
        self.logger.log_to(path)

    def info_msg(self, msg: str, tag: str = "") -> StateSafe:
        self.logger.info_msg(msg, tag)
        return self

    def safe_msg(self, msg: str, tag: str = "") -> StateSafe:
        self.logger.safe_msg(msg, tag)
        return self

    def critical_msg(self, msg: str, tag: str = "") -> StateSafe:
        self.logger.critical_msg(msg, tag)
        return self

    def flush(self, timeout: float | None = None) -> bool:
        return self.logger.flush(timeout)
