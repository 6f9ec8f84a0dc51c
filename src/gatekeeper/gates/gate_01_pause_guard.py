"""GATE 1: Pause Guard

- Единый guard для всех изменений token-балансов: transfer, transfer_from,
  mint, burn, burn_from
- withdraw (native currency), pause, unpause через этот gate не проходят
"""

from dataclasses import dataclass

from src.core.domain.token_state import PauseState
from src.core.errors import ContractPaused
from src.pause.state_machine import PauseStateMachine


@dataclass(frozen=True)
class Gate01Result:
    """Результат GATE 1."""

    allowed: bool
    block_reason: str

    pause_state: PauseState
    operation: str

    details: str


class Gate01PauseGuard:
    """GATE 1: Pause guard (stateless)."""

    def evaluate(self, pause_state: PauseState, operation: str) -> Gate01Result:
        if not PauseStateMachine.allows_balance_mutation(pause_state):
            return Gate01Result(
                allowed=False,
                block_reason=ContractPaused.reason,
                pause_state=pause_state,
                operation=operation,
                details=f"{operation} blocked: contract is {pause_state.value}",
            )

        return Gate01Result(
            allowed=True,
            block_reason="",
            pause_state=pause_state,
            operation=operation,
            details=f"PASS: {operation} in {pause_state.value}",
        )
