"""GATE 2: Mint Eligibility (публичный mint)

Порядок проверок фиксирован, первый заблокировавший побеждает:
1. now > mint_end_time → minting_period_over
2. payment < mint_price → insufficient_ether
3. caller == owner → owner_cannot_mint
4. PAUSED → contract_paused (тот же guard, что у transfer — GATE 1)

При PASS рассчитывается mint_amount = floor(payment / price) * 10**decimals.
Вся оплата (включая остаток) уходит в vault.
"""

from dataclasses import dataclass
from typing import Optional

from src.core.domain.token_state import PauseState
from src.core.domain.units import mint_amount_for_payment, payment_remainder
from src.core.errors import InsufficientEther, MintingPeriodOver, OwnerCannotMint
from src.gatekeeper.gates.gate_00_ownership import Gate00Ownership
from src.gatekeeper.gates.gate_01_pause_guard import Gate01PauseGuard


@dataclass(frozen=True)
class Gate02Result:
    """Результат GATE 2."""

    allowed: bool
    block_reason: str

    # Расчёт mint (0 при блокировке)
    mint_amount: int
    payment_wei: int
    payment_remainder_wei: int

    # Диагностика
    now: int
    mint_end_time: int

    details: str


class Gate02MintEligibility:
    """GATE 2: Mint window / price / owner exclusion / pause."""

    def __init__(self, pause_guard: Optional[Gate01PauseGuard] = None):
        self.pause_guard = pause_guard or Gate01PauseGuard()

    def evaluate(
        self,
        caller: str,
        payment_wei: int,
        owner: Optional[str],
        now: int,
        mint_end_time: int,
        mint_price_wei: int,
        pause_state: PauseState,
        decimals: int,
    ) -> Gate02Result:
        """Оценка GATE 2.

        Args:
            caller: вызывающий mint
            payment_wei: приложенная оплата
            owner: текущий owner
            now: текущее время (unix, секунды)
            mint_end_time: deadline mint window
            mint_price_wei: цена целого токена
            pause_state: текущее состояние pause
            decimals: десятичные знаки токена

        Returns:
            Gate02Result с решением и рассчитанным mint_amount
        """
        # 1. Mint window
        if now > mint_end_time:
            return self._blocked(
                MintingPeriodOver.reason,
                payment_wei,
                now,
                mint_end_time,
                f"Minting ended at {mint_end_time}, now={now}",
            )

        # 2. Price
        if payment_wei < mint_price_wei:
            return self._blocked(
                InsufficientEther.reason,
                payment_wei,
                now,
                mint_end_time,
                f"Payment {payment_wei} below mint price {mint_price_wei}",
            )

        # 3. Owner exclusion
        if Gate00Ownership.is_owner(caller, owner):
            return self._blocked(
                OwnerCannotMint.reason,
                payment_wei,
                now,
                mint_end_time,
                "Owner is excluded from public mint",
            )

        # 4. Pause
        pause_result = self.pause_guard.evaluate(pause_state, "mint")
        if not pause_result.allowed:
            return self._blocked(
                pause_result.block_reason,
                payment_wei,
                now,
                mint_end_time,
                pause_result.details,
            )

        # 5. PASS
        mint_amount = mint_amount_for_payment(payment_wei, mint_price_wei, decimals)
        remainder = payment_remainder(payment_wei, mint_price_wei)

        return Gate02Result(
            allowed=True,
            block_reason="",
            mint_amount=mint_amount,
            payment_wei=payment_wei,
            payment_remainder_wei=remainder,
            now=now,
            mint_end_time=mint_end_time,
            details=f"PASS: mint {mint_amount} for {payment_wei} wei (remainder={remainder})",
        )

    @staticmethod
    def _blocked(
        block_reason: str,
        payment_wei: int,
        now: int,
        mint_end_time: int,
        details: str,
    ) -> Gate02Result:
        return Gate02Result(
            allowed=False,
            block_reason=block_reason,
            mint_amount=0,
            payment_wei=payment_wei,
            payment_remainder_wei=0,
            now=now,
            mint_end_time=mint_end_time,
            details=details,
        )
