"""Pause — управление pause flag token ledger.

- Два состояния ACTIVE / PAUSED
- Переходы только по действию owner
- Повторные запросы — no-op
"""

from .state_machine import (
    PauseAction,
    PauseStateMachine,
    PauseTransitionResult,
)

__all__ = [
    "PauseAction",
    "PauseStateMachine",
    "PauseTransitionResult",
]
