"""Pause State Machine — управление pause flag экземпляра token ledger.

- Состояния: ACTIVE / PAUSED, начальное ACTIVE, терминального нет
- Переходы: ACTIVE --pause--> PAUSED, PAUSED --unpause--> ACTIVE
- Повторный pause/unpause в целевом состоянии — no-op (transition_occurred=False)
- Авторизация owner проверяется до state machine (GATE 0)
"""

from dataclasses import dataclass
from enum import Enum

from src.core.domain.token_state import PauseState


class PauseAction(str, Enum):
    """Запрошенное действие над pause flag."""

    PAUSE = "pause"
    UNPAUSE = "unpause"


@dataclass(frozen=True)
class PauseTransitionResult:
    """Результат перехода pause state."""

    new_state: PauseState
    previous_state: PauseState

    # Диагностика
    transition_occurred: bool
    transition_reason: str

    # Для отладки
    details: str


class PauseStateMachine:
    """Pause State Machine.

    States:
    - ACTIVE: transfer / mint / burn разрешены
    - PAUSED: transfer / mint / burn запрещены; withdraw, pause, unpause доступны
    """

    _TARGETS = {
        PauseAction.PAUSE: PauseState.PAUSED,
        PauseAction.UNPAUSE: PauseState.ACTIVE,
    }

    def evaluate_transition(
        self,
        current_state: PauseState,
        action: PauseAction,
    ) -> PauseTransitionResult:
        """Оценка перехода pause state.

        Args:
            current_state: текущее состояние
            action: запрошенное действие

        Returns:
            PauseTransitionResult с новым состоянием
        """
        target_state = self._TARGETS[action]

        # 1. Уже в целевом состоянии → no-op
        if current_state == target_state:
            return PauseTransitionResult(
                new_state=current_state,
                previous_state=current_state,
                transition_occurred=False,
                transition_reason=f"already_{current_state.value.lower()}",
                details=f"{action.value} requested in {current_state.value}: no-op",
            )

        # 2. Переход
        return PauseTransitionResult(
            new_state=target_state,
            previous_state=current_state,
            transition_occurred=True,
            transition_reason=f"{action.value}_{current_state.value}_to_{target_state.value}",
            details=f"Transition: {current_state.value} → {target_state.value}",
        )

    @staticmethod
    def allows_balance_mutation(state: PauseState) -> bool:
        """True если изменения token-балансов разрешены."""
        return state == PauseState.ACTIVE
