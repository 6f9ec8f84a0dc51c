"""
Errors — Типизированные ошибки Token Policy Engine

Каждая ошибка прерывает операцию целиком (без частичных изменений состояния).
Никакие ошибки не подавляются и не ретраятся внутри engine.

Атрибут `reason` — стабильный машинно-читаемый код, совпадающий с
`block_reason` соответствующего gate.
"""

from typing import ClassVar


# =============================================================================
# BASE
# =============================================================================


class TokenPolicyError(Exception):
    """Базовая ошибка policy-слоя."""

    reason: ClassVar[str] = "token_policy_error"

    def __init__(self, message: str = "", **context):
        self.context = context
        super().__init__(message or self.reason)


# =============================================================================
# POLICY ERRORS
# =============================================================================


class Unauthorized(TokenPolicyError):
    """Вызывающий не является owner."""

    reason = "unauthorized"


class ContractPaused(TokenPolicyError):
    """Изменение token-балансов при выставленном pause flag."""

    reason = "contract_paused"


class MintingPeriodOver(TokenPolicyError):
    """Mint после окончания mint window."""

    reason = "minting_period_over"


class InsufficientEther(TokenPolicyError):
    """Оплата mint ниже mint price."""

    reason = "insufficient_ether"


class OwnerCannotMint(TokenPolicyError):
    """Owner исключён из публичного mint."""

    reason = "owner_cannot_mint"


# =============================================================================
# LEDGER / VAULT ERRORS
# =============================================================================


class InsufficientFunds(TokenPolicyError):
    """Debit или withdraw превышает доступный баланс."""

    reason = "insufficient_funds"


class InsufficientAllowance(TokenPolicyError):
    """Списание через allowance превышает разрешённую сумму."""

    reason = "insufficient_allowance"


class TransferFailed(TokenPolicyError):
    """Получатель не принял native currency."""

    reason = "transfer_failed"


class InvalidAccount(TokenPolicyError):
    """Пустой или zero-address идентификатор счёта."""

    reason = "invalid_account"


class InvalidOwner(TokenPolicyError):
    """Недопустимый идентификатор owner (пустой или zero address)."""

    reason = "invalid_owner"


class InvalidAmount(TokenPolicyError, ValueError):
    """Отрицательная или нецелая сумма."""

    reason = "invalid_amount"


ERRORS_BY_REASON: dict[str, type[TokenPolicyError]] = {
    cls.reason: cls
    for cls in (
        Unauthorized,
        ContractPaused,
        MintingPeriodOver,
        InsufficientEther,
        OwnerCannotMint,
        InsufficientFunds,
        InsufficientAllowance,
        TransferFailed,
        InvalidAccount,
        InvalidOwner,
        InvalidAmount,
    )
}
