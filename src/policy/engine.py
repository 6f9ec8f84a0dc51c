"""Token Policy Engine — policy-слой поверх token ledger.

Поток данных: caller → gates → Ledger (balance delta) → Vault (native currency).

Политики:
- Ownership: pause / unpause / withdraw / ownership-операции только owner (GATE 0)
- Pause: все изменения token-балансов блокируются в PAUSED (GATE 1);
  withdraw native currency не блокируется
- Mint: window → price → owner exclusion → pause (GATE 2)

Атомарность:
- Каждая публичная операция выполняется под per-instance RLock
- Collaborators с checkpoint()/restore() откатываются при любой ошибке
- Для ledger без checkpoint() каждая мутация регистрирует компенсацию
  (credit↔debit, обратный transfer, re-approve прежнего allowance),
  которая проигрывается в обратном порядке при ошибке
- Vault-мутация всегда последний шаг операции
- Ошибки не подавляются: typed exception уходит вызывающему
"""

import logging
import threading
from contextlib import contextmanager
from typing import Callable, Iterator, List, Optional, Tuple

from src.core.domain.events import EventType, TokenEvent
from src.core.domain.token_state import (
    MintWindow,
    PauseState,
    TokenMetadata,
    TokenStateSnapshot,
)
from src.core.domain.units import ZERO_ADDRESS, is_zero_address, validate_amount
from src.core.errors import (
    ERRORS_BY_REASON,
    InsufficientFunds,
    InvalidOwner,
    TransferFailed,
)
from src.gatekeeper.gates.gate_00_ownership import Gate00Ownership
from src.gatekeeper.gates.gate_01_pause_guard import Gate01PauseGuard
from src.gatekeeper.gates.gate_02_mint_eligibility import Gate02MintEligibility
from src.ledger.clock import Clock, SystemClock
from src.ledger.ledger import Checkpointable, InMemoryLedger, Ledger, require_account
from src.ledger.vault import InMemoryVault, Vault
from src.pause.state_machine import PauseAction, PauseStateMachine, PauseTransitionResult
from src.policy.config import TokenPolicyConfig

logger = logging.getLogger(__name__)


class TokenPolicyEngine:
    """Token Policy Engine.

    Construct:
    - owner задаётся явно; deployer (по умолчанию = owner) получает
      initial allocation
    - mint_end_time = clock.now() + mint_duration_sec, не меняется
    - pause state = ACTIVE
    """

    def __init__(
        self,
        owner: str,
        ledger: Optional[Ledger] = None,
        vault: Optional[Vault] = None,
        clock: Optional[Clock] = None,
        config: Optional[TokenPolicyConfig] = None,
        deployer: Optional[str] = None,
    ):
        """
        Args:
            owner: идентификатор owner
            ledger: балансовый substrate (default: InMemoryLedger)
            vault: хранилище native currency (default: InMemoryVault)
            clock: источник времени (default: SystemClock)
            config: конфигурация (default: TokenPolicyConfig())
            deployer: получатель initial allocation (default: owner)

        Raises:
            InvalidOwner: если owner пустой или zero address
        """
        if not isinstance(owner, str) or is_zero_address(owner):
            raise InvalidOwner(f"Invalid owner: {owner!r}", owner=owner)

        self.config = config or TokenPolicyConfig()
        self._ledger = ledger if ledger is not None else InMemoryLedger()
        self._vault = vault if vault is not None else InMemoryVault()
        self._clock = clock or SystemClock()

        self._ownership_gate = Gate00Ownership()
        self._pause_guard = Gate01PauseGuard()
        self._mint_gate = Gate02MintEligibility(self._pause_guard)
        self._pause_state_machine = PauseStateMachine()

        self._lock = threading.RLock()
        self._events: List[TokenEvent] = []
        self._compensations: List[Callable[[], None]] = []
        self._atomic_depth = 0
        self._ledger_restorable = isinstance(self._ledger, Checkpointable)

        self._owner: Optional[str] = owner
        self._pause_state = PauseState.ACTIVE
        self._mint_end_time = self._clock.now() + self.config.mint_duration_sec

        with self._atomic():
            self._emit(EventType.OWNERSHIP_TRANSFERRED, None, owner)
            self._update(None, deployer or owner, self.config.initial_allocation, "construct")

        logger.info(
            "Token %s deployed: owner=%s, initial_allocation=%d, mint_end_time=%d",
            self.config.symbol,
            owner,
            self.config.initial_allocation,
            self._mint_end_time,
        )

    # =========================================================================
    # READ-ONLY ACCESSORS
    # =========================================================================

    def owner(self) -> Optional[str]:
        return self._owner

    def is_owner(self, account: Optional[str]) -> bool:
        return Gate00Ownership.is_owner(account, self._owner)

    def paused(self) -> bool:
        return self._pause_state == PauseState.PAUSED

    def pause_state(self) -> PauseState:
        return self._pause_state

    def mint_end_time(self) -> int:
        return self._mint_end_time

    def mint_price(self) -> int:
        return self.config.mint_price_wei

    def name(self) -> str:
        return self.config.name

    def symbol(self) -> str:
        return self.config.symbol

    def decimals(self) -> int:
        return self.config.decimals

    def balance_of(self, account: str) -> int:
        return self._ledger.balance_of(account)

    def total_supply(self) -> int:
        return self._ledger.total_supply()

    def allowance(self, owner: str, spender: str) -> int:
        return self._ledger.allowance(owner, spender)

    def vault_balance(self) -> int:
        return self._vault.balance()

    @property
    def events(self) -> Tuple[TokenEvent, ...]:
        return tuple(self._events)

    def snapshot(self) -> TokenStateSnapshot:
        """Снапшот persisted-состояния (под lock, консистентный)."""
        with self._lock:
            return TokenStateSnapshot(
                ts_utc_sec=self._clock.now(),
                metadata=TokenMetadata(
                    name=self.config.name,
                    symbol=self.config.symbol,
                    decimals=self.config.decimals,
                ),
                owner=self._owner,
                pause_state=self._pause_state,
                mint_window=MintWindow(
                    mint_end_time=self._mint_end_time,
                    mint_price_wei=self.config.mint_price_wei,
                ),
                total_supply=self._ledger.total_supply(),
                vault_balance_wei=self._vault.balance(),
                balances=self._ledger.balances(),
            )

    # =========================================================================
    # OWNER OPERATIONS
    # =========================================================================

    def pause(self, caller: str) -> PauseTransitionResult:
        """Выставить pause flag. Повторный вызов — no-op."""
        return self._set_pause(caller, PauseAction.PAUSE)

    def unpause(self, caller: str) -> PauseTransitionResult:
        """Снять pause flag. Повторный вызов — no-op."""
        return self._set_pause(caller, PauseAction.UNPAUSE)

    def withdraw(self, caller: str, amount: int) -> None:
        """Вывод native currency из vault owner-у.

        Не блокируется pause flag.

        Raises:
            Unauthorized: caller не owner
            InsufficientFunds: amount > vault balance
            TransferFailed: owner отклонил перевод (vault не списан)
        """
        with self._atomic():
            self._require_owner(caller, "withdraw")
            validate_amount(amount)

            available = self._vault.balance()
            if amount > available:
                logger.warning("withdraw blocked: requested %d, vault holds %d", amount, available)
                raise InsufficientFunds(
                    f"Vault balance is {available}, requested {amount}",
                    balance=available,
                    needed=amount,
                )

            if not self._vault.withdraw(caller, amount):
                logger.warning("withdraw of %d to %s failed: recipient rejected", amount, caller)
                raise TransferFailed(
                    f"Native transfer of {amount} to {caller} failed",
                    recipient=caller,
                    amount=amount,
                )

            self._emit(EventType.WITHDRAWAL, ZERO_ADDRESS, caller, amount)

        logger.info("Owner %s withdrew %d wei", caller, amount)

    def transfer_ownership(self, caller: str, new_owner: str) -> None:
        """Передать ownership.

        Raises:
            Unauthorized: caller не owner
            InvalidOwner: new_owner пустой или zero address
        """
        with self._atomic():
            self._require_owner(caller, "transfer_ownership")
            if not isinstance(new_owner, str) or is_zero_address(new_owner):
                raise InvalidOwner(f"Invalid owner: {new_owner!r}", owner=new_owner)

            previous = self._owner
            self._owner = new_owner
            self._emit(EventType.OWNERSHIP_TRANSFERRED, previous, new_owner)

        logger.info("Ownership transferred: %s → %s", previous, new_owner)

    def renounce_ownership(self, caller: str) -> None:
        """Отказаться от ownership: owner-операции становятся недоступны навсегда."""
        with self._atomic():
            self._require_owner(caller, "renounce_ownership")
            previous = self._owner
            self._owner = None
            self._emit(EventType.OWNERSHIP_TRANSFERRED, previous, None)

        logger.info("Ownership renounced by %s", previous)

    # =========================================================================
    # PUBLIC OPERATIONS
    # =========================================================================

    def mint(self, caller: str, payment_wei: int) -> int:
        """Публичный payable mint.

        Args:
            caller: вызывающий
            payment_wei: приложенная оплата

        Returns:
            Количество mint (smallest units)

        Raises:
            MintingPeriodOver, InsufficientEther, OwnerCannotMint, ContractPaused
        """
        with self._atomic():
            validate_amount(payment_wei)

            result = self._mint_gate.evaluate(
                caller=caller,
                payment_wei=payment_wei,
                owner=self._owner,
                now=self._clock.now(),
                mint_end_time=self._mint_end_time,
                mint_price_wei=self.config.mint_price_wei,
                pause_state=self._pause_state,
                decimals=self.config.decimals,
            )
            if not result.allowed:
                self._raise_blocked("mint", result.block_reason, result.details)

            self._update(None, caller, result.mint_amount, "mint")
            self._vault.deposit(payment_wei)

        logger.debug(
            "Minted %d to %s for %d wei (retained remainder %d)",
            result.mint_amount,
            caller,
            payment_wei,
            result.payment_remainder_wei,
        )
        return result.mint_amount

    def transfer(self, caller: str, to: str, amount: int) -> bool:
        with self._atomic():
            self._require_unpaused("transfer")
            require_account(caller, "sender")
            self._update(caller, to, amount, "transfer")
        return True

    def transfer_from(self, caller: str, sender: str, to: str, amount: int) -> bool:
        """Перевод от имени sender за счёт allowance caller-а."""
        with self._atomic():
            self._require_unpaused("transfer_from")
            require_account(sender, "sender")
            self._spend_allowance(sender, caller, amount)
            self._update(sender, to, amount, "transfer_from")
        return True

    def approve(self, caller: str, spender: str, amount: int) -> bool:
        """Установить allowance. Не блокируется pause (балансы не меняются)."""
        with self._atomic():
            previous = self._ledger.allowance(caller, spender)
            self._ledger.approve(caller, spender, amount)
            self._compensate(lambda: self._ledger.approve(caller, spender, previous))
            self._emit(EventType.APPROVAL, caller, spender, amount)
        return True

    def burn(self, caller: str, amount: int) -> None:
        with self._atomic():
            self._require_unpaused("burn")
            require_account(caller, "sender")
            self._update(caller, None, amount, "burn")

    def burn_from(self, caller: str, account: str, amount: int) -> None:
        """Burn с баланса account за счёт allowance caller-а."""
        with self._atomic():
            self._require_unpaused("burn_from")
            require_account(account, "sender")
            self._spend_allowance(account, caller, amount)
            self._update(account, None, amount, "burn_from")

    # =========================================================================
    # INTERNALS
    # =========================================================================

    def _update(
        self,
        sender: Optional[str],
        recipient: Optional[str],
        amount: int,
        operation: str,
    ) -> None:
        """Единая точка изменения token-балансов: pause guard → ledger.

        sender=None — mint (credit), recipient=None — burn (debit).
        ZERO_ADDRESS от вызывающего уходит в ledger.transfer и отклоняется им.
        """
        self._require_unpaused(operation)

        if sender is None:
            self._ledger.credit(recipient, amount)
            self._compensate(lambda: self._ledger.debit(recipient, amount))
        elif recipient is None:
            self._ledger.debit(sender, amount)
            self._compensate(lambda: self._ledger.credit(sender, amount))
        else:
            self._ledger.transfer(sender, recipient, amount)
            self._compensate(lambda: self._ledger.transfer(recipient, sender, amount))

        source = ZERO_ADDRESS if sender is None else sender
        target = ZERO_ADDRESS if recipient is None else recipient
        self._emit(EventType.TRANSFER, source, target, amount)
        logger.debug("%s: %s → %s amount=%d", operation, source, target, amount)

    def _set_pause(self, caller: str, action: PauseAction) -> PauseTransitionResult:
        with self._atomic():
            self._require_owner(caller, action.value)

            result = self._pause_state_machine.evaluate_transition(self._pause_state, action)
            if result.transition_occurred:
                self._pause_state = result.new_state
                event_type = EventType.PAUSED if action == PauseAction.PAUSE else EventType.UNPAUSED
                self._emit(event_type, caller, None)

        if result.transition_occurred:
            logger.info("%s by %s: %s", action.value, caller, result.details)
        else:
            logger.debug("%s by %s: %s", action.value, caller, result.details)
        return result

    def _require_owner(self, caller: str, operation: str) -> None:
        result = self._ownership_gate.evaluate(caller, self._owner, operation)
        if not result.allowed:
            self._raise_blocked(operation, result.block_reason, result.details)

    def _require_unpaused(self, operation: str) -> None:
        result = self._pause_guard.evaluate(self._pause_state, operation)
        if not result.allowed:
            self._raise_blocked(operation, result.block_reason, result.details)

    @staticmethod
    def _raise_blocked(operation: str, block_reason: str, details: str) -> None:
        logger.warning("%s blocked: %s (%s)", operation, block_reason, details)
        raise ERRORS_BY_REASON[block_reason](details)

    def _emit(
        self,
        event_type: EventType,
        source: Optional[str],
        target: Optional[str],
        amount: int = 0,
    ) -> None:
        self._events.append(
            TokenEvent(
                seq=len(self._events),
                event_type=event_type,
                ts_utc_sec=self._clock.now(),
                source=source,
                target=target,
                amount=amount,
            )
        )

    @contextmanager
    def _atomic(self) -> Iterator[None]:
        """Транзакционная граница операции.

        Под lock; при ошибке проигрываются компенсации (ledger без
        checkpoint), откатываются collaborators с checkpoint/restore,
        owner, pause state и журнал событий.
        """
        with self._lock:
            checkpoints = [
                (collaborator, collaborator.checkpoint())
                for collaborator in (self._ledger, self._vault)
                if isinstance(collaborator, Checkpointable)
            ]
            owner = self._owner
            pause_state = self._pause_state
            events_len = len(self._events)
            compensations_len = len(self._compensations)

            self._atomic_depth += 1
            try:
                yield
            except Exception:
                pending = self._compensations[compensations_len:]
                del self._compensations[compensations_len:]
                for undo in reversed(pending):
                    undo()
                for collaborator, checkpoint in checkpoints:
                    collaborator.restore(checkpoint)
                self._owner = owner
                self._pause_state = pause_state
                del self._events[events_len:]
                raise
            finally:
                self._atomic_depth -= 1
                if self._atomic_depth == 0:
                    self._compensations.clear()

    def _compensate(self, undo: Callable[[], None]) -> None:
        """Зарегистрировать обратное действие для ledger без checkpoint()."""
        if not self._ledger_restorable:
            self._compensations.append(undo)

    def _spend_allowance(self, owner: str, spender: str, amount: int) -> None:
        previous = self._ledger.allowance(owner, spender)
        self._ledger.spend_allowance(owner, spender, amount)
        self._compensate(lambda: self._ledger.approve(owner, spender, previous))
