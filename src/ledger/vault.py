"""Vault — хранилище native currency, принятой через mint.

Контракт collaborator-а:
- deposit(amount) — приём оплаты, приложенной к mint
- withdraw(to, amount) -> bool — перевод получателю; False если получатель
  отклонил перевод (состояние vault при этом не меняется)
- withdraw сверх баланса → InsufficientFunds
"""

import logging
from typing import Dict, Protocol, Set, runtime_checkable

from src.core.domain.units import validate_amount
from src.core.errors import InsufficientFunds

logger = logging.getLogger(__name__)


@runtime_checkable
class Vault(Protocol):
    """Native currency holder owned exclusively by one engine instance."""

    def deposit(self, amount: int) -> None:
        """Accept attached payment."""

    def withdraw(self, to: str, amount: int) -> bool:
        """Send native currency; False when the recipient rejects it."""

    def balance(self) -> int:
        """Accumulated native currency."""


class InMemoryVault:
    """In-memory vault.

    Внешние native-балансы получателей ведутся в `_external_balances`;
    получатели из `_rejecting` отклоняют любой входящий перевод.
    """

    def __init__(self):
        self._balance: int = 0
        self._external_balances: Dict[str, int] = {}
        self._rejecting: Set[str] = set()

    def deposit(self, amount: int) -> None:
        validate_amount(amount)
        self._balance += amount

    def withdraw(self, to: str, amount: int) -> bool:
        validate_amount(amount)

        if amount > self._balance:
            raise InsufficientFunds(
                f"Vault balance is {self._balance}, requested {amount}",
                balance=self._balance,
                needed=amount,
            )

        if to in self._rejecting:
            logger.warning("Recipient %s rejected native transfer of %d", to, amount)
            return False

        self._balance -= amount
        self._external_balances[to] = self._external_balances.get(to, 0) + amount
        return True

    def balance(self) -> int:
        return self._balance

    def native_balance_of(self, account: str) -> int:
        """Native currency, полученная счётом из vault."""
        return self._external_balances.get(account, 0)

    def reject_transfers_to(self, account: str, reject: bool = True) -> None:
        """Пометить получателя как отклоняющего (или снять пометку)."""
        if reject:
            self._rejecting.add(account)
        else:
            self._rejecting.discard(account)

    def checkpoint(self) -> object:
        return (self._balance, dict(self._external_balances))

    def restore(self, checkpoint: object) -> None:
        balance, external = checkpoint
        self._balance = balance
        self._external_balances = dict(external)
        logger.debug("Vault restored to checkpoint: balance=%d", balance)
