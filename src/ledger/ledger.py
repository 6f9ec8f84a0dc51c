"""Ledger — балансовый substrate токена.

Контракт collaborator-а, который policy engine считает заданным:
- credit / debit / transfer атомарны и не применяются частично
- debit сверх баланса → InsufficientFunds
- zero address не может быть ни отправителем, ни получателем

InMemoryLedger — эталонная in-memory реализация с checkpoint/restore
для транзакционной обёртки engine.
"""

import logging
from typing import Dict, Optional, Protocol, Tuple, runtime_checkable

from src.core.domain.units import MAX_UINT256, is_zero_address, validate_amount
from src.core.errors import InsufficientAllowance, InsufficientFunds, InvalidAccount

logger = logging.getLogger(__name__)


@runtime_checkable
class Ledger(Protocol):
    """Storage interface for token balances and allowances."""

    def credit(self, account: str, amount: int) -> None:
        """Increase balance and total supply."""

    def debit(self, account: str, amount: int) -> None:
        """Decrease balance and total supply."""

    def transfer(self, sender: str, recipient: str, amount: int) -> None:
        """Move balance between accounts, supply unchanged."""

    def balance_of(self, account: str) -> int:
        """Current balance (0 for unknown accounts)."""

    def total_supply(self) -> int:
        """Sum of all balances."""

    def balances(self) -> Dict[str, int]:
        """All known accounts, zero balances included."""

    def approve(self, owner: str, spender: str, amount: int) -> None:
        """Set allowance of spender over owner's balance."""

    def allowance(self, owner: str, spender: str) -> int:
        """Current allowance."""

    def spend_allowance(self, owner: str, spender: str, amount: int) -> None:
        """Consume allowance; MAX_UINT256 is never decremented."""


@runtime_checkable
class Checkpointable(Protocol):
    """Collaborator state that can be captured and rolled back."""

    def checkpoint(self) -> object:
        """Capture state."""

    def restore(self, checkpoint: object) -> None:
        """Roll state back to a captured checkpoint."""


class InMemoryLedger:
    """In-memory ledger: dict балансов + dict allowances.

    Счёт создаётся неявно при первом credit; нулевой баланс не удаляется.
    """

    def __init__(self):
        self._balances: Dict[str, int] = {}
        self._allowances: Dict[Tuple[str, str], int] = {}
        self._total_supply: int = 0

    # -------------------------------------------------------------------------
    # Balances
    # -------------------------------------------------------------------------

    def credit(self, account: str, amount: int) -> None:
        require_account(account, "receiver")
        validate_amount(amount)

        self._balances[account] = self._balances.get(account, 0) + amount
        self._total_supply += amount

    def debit(self, account: str, amount: int) -> None:
        require_account(account, "sender")
        validate_amount(amount)

        balance = self._balances.get(account, 0)
        if balance < amount:
            raise InsufficientFunds(
                f"Balance of {account} is {balance}, needed {amount}",
                account=account,
                balance=balance,
                needed=amount,
            )

        self._balances[account] = balance - amount
        self._total_supply -= amount

    def transfer(self, sender: str, recipient: str, amount: int) -> None:
        require_account(sender, "sender")
        require_account(recipient, "receiver")
        validate_amount(amount)

        sender_balance = self._balances.get(sender, 0)
        if sender_balance < amount:
            raise InsufficientFunds(
                f"Balance of {sender} is {sender_balance}, needed {amount}",
                account=sender,
                balance=sender_balance,
                needed=amount,
            )

        # Обе записи после проверки: частичного применения нет
        self._balances[sender] = sender_balance - amount
        self._balances[recipient] = self._balances.get(recipient, 0) + amount

    def balance_of(self, account: str) -> int:
        return self._balances.get(account, 0)

    def total_supply(self) -> int:
        return self._total_supply

    def balances(self) -> Dict[str, int]:
        """Копия всех балансов (включая нулевые)."""
        return dict(self._balances)

    # -------------------------------------------------------------------------
    # Allowances
    # -------------------------------------------------------------------------

    def approve(self, owner: str, spender: str, amount: int) -> None:
        require_account(owner, "approver")
        require_account(spender, "spender")
        validate_amount(amount)

        self._allowances[(owner, spender)] = amount

    def allowance(self, owner: str, spender: str) -> int:
        return self._allowances.get((owner, spender), 0)

    def spend_allowance(self, owner: str, spender: str, amount: int) -> None:
        validate_amount(amount)

        current = self.allowance(owner, spender)
        if current == MAX_UINT256:
            return

        if current < amount:
            raise InsufficientAllowance(
                f"Allowance of {spender} over {owner} is {current}, needed {amount}",
                owner=owner,
                spender=spender,
                allowance=current,
                needed=amount,
            )

        self._allowances[(owner, spender)] = current - amount

    # -------------------------------------------------------------------------
    # Checkpoint
    # -------------------------------------------------------------------------

    def checkpoint(self) -> object:
        return (dict(self._balances), dict(self._allowances), self._total_supply)

    def restore(self, checkpoint: object) -> None:
        balances, allowances, total_supply = checkpoint
        self._balances = dict(balances)
        self._allowances = dict(allowances)
        self._total_supply = total_supply
        logger.debug("Ledger restored to checkpoint: total_supply=%d", total_supply)


def require_account(account: Optional[str], role: str) -> None:
    if not isinstance(account, str) or is_zero_address(account):
        raise InvalidAccount(f"Invalid {role}: {account!r}", role=role, account=account)
