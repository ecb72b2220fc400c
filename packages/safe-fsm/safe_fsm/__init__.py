"""safe-fsm - Forgiving finite state machine with before/on/after hooks."""
from __future__ import annotations

from safe_fsm.hooks import ConventionHooks, HookProvider, HookTable
from safe_fsm.machine import StateMachine
from safe_fsm.naming import RESERVED_WORDS, is_valid_event, method_name
from safe_fsm.registry import TransitionRegistry
from safe_fsm.types import (
    DuplicateTransitionError,
    InvalidEventError,
    InvalidStateSeedError,
    Phase,
    Transition,
    TransitionError,
    UnresolvedHookError,
)

__all__ = [
    "StateMachine",
    "TransitionRegistry",
    "HookTable",
    "HookProvider",
    "ConventionHooks",
    "Transition",
    "Phase",
    "RESERVED_WORDS",
    "is_valid_event",
    "method_name",
    "TransitionError",
    "InvalidEventError",
    "DuplicateTransitionError",
    "InvalidStateSeedError",
    "UnresolvedHookError",
]
