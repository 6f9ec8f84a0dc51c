"""GATE 0: Ownership

- Capability check is_owner(caller)
- Защищает pause / unpause / withdraw / transfer_ownership / renounce_ownership
- После renounce owner = None: ни один caller не проходит
"""

from dataclasses import dataclass
from typing import Optional

from src.core.errors import Unauthorized


@dataclass(frozen=True)
class Gate00Result:
    """Результат GATE 0."""

    allowed: bool
    block_reason: str

    # Входные параметры для диагностики
    caller: Optional[str]
    owner: Optional[str]
    operation: str

    # Детали
    details: str


class Gate00Ownership:
    """GATE 0: Ownership check."""

    @staticmethod
    def is_owner(caller: Optional[str], owner: Optional[str]) -> bool:
        return owner is not None and caller == owner

    def evaluate(
        self,
        caller: Optional[str],
        owner: Optional[str],
        operation: str,
    ) -> Gate00Result:
        """Оценка GATE 0.

        Args:
            caller: идентификатор вызывающего
            owner: текущий owner (None после renounce)
            operation: имя защищаемой операции (для диагностики)

        Returns:
            Gate00Result с решением о допуске
        """
        if not self.is_owner(caller, owner):
            return Gate00Result(
                allowed=False,
                block_reason=Unauthorized.reason,
                caller=caller,
                owner=owner,
                operation=operation,
                details=f"{operation}: caller {caller!r} is not owner",
            )

        return Gate00Result(
            allowed=True,
            block_reason="",
            caller=caller,
            owner=owner,
            operation=operation,
            details=f"PASS: {operation} by owner",
        )
