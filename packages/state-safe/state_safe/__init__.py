"""state-safe - Forgiving state machine with built-in structured logging."""
from __future__ import annotations

from state_safe.core import STATE_CHANGED_TAG, StateSafe

__all__ = ["StateSafe", "STATE_CHANGED_TAG"]
