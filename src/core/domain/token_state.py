"""
TokenState — Модель снапшота состояния token ledger

Immutable Pydantic модель, представляющая снапшот persisted-состояния
экземпляра engine. Полная совместимость с JSON Schema
(contracts/schema/token_state.json).
"""

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator, model_validator


# =============================================================================
# ENUMS
# =============================================================================


class PauseState(str, Enum):
    """
    Состояние pause flag.

    ACTIVE — изменения балансов разрешены, PAUSED — запрещены.
    """

    ACTIVE = "ACTIVE"
    PAUSED = "PAUSED"


# =============================================================================
# NESTED MODELS
# =============================================================================


class TokenMetadata(BaseModel):
    """Метаданные токена, фиксируются при construct."""

    name: str = Field(..., min_length=1, description="Имя токена")
    symbol: str = Field(..., min_length=1, description="Тикер токена")
    decimals: int = Field(..., ge=0, le=77, description="Десятичные знаки")

    model_config = {"frozen": True}


class MintWindow(BaseModel):
    """Параметры публичного mint."""

    mint_end_time: int = Field(..., ge=0, description="Deadline mint (unix, секунды)")
    mint_price_wei: int = Field(..., gt=0, description="Цена целого токена (wei)")

    model_config = {"frozen": True}


# =============================================================================
# TOKEN STATE SNAPSHOT
# =============================================================================


class TokenStateSnapshot(BaseModel):
    """
    Снапшот состояния token ledger.

    Immutable модель (frozen=True). Содержит:
    - Метаданные снапшота (schema_version, ts_utc_sec)
    - Метаданные токена
    - Owner и pause state
    - Mint window
    - Total supply, vault balance, балансы
    """

    schema_version: str = Field("1", pattern="^1$", description="Версия схемы")
    ts_utc_sec: int = Field(..., ge=0, description="Время снапшота (unix, секунды)")

    metadata: TokenMetadata = Field(..., description="Метаданные токена")
    owner: Optional[str] = Field(None, description="Owner (None после renounce)")
    pause_state: PauseState = Field(..., description="Состояние pause flag")
    mint_window: MintWindow = Field(..., description="Параметры mint")

    total_supply: int = Field(..., ge=0, description="Total supply (smallest units)")
    vault_balance_wei: int = Field(..., ge=0, description="Накопленная оплата (wei)")
    balances: Dict[str, int] = Field(
        default_factory=dict, description="Балансы счетов (smallest units)"
    )

    model_config = {"frozen": True}

    @field_validator("balances")
    @classmethod
    def validate_non_negative_balances(cls, v: Dict[str, int]) -> Dict[str, int]:
        """Балансы беззнаковые."""
        for account, amount in v.items():
            if amount < 0:
                raise ValueError(f"balance of {account} is negative: {amount}")
        return v

    @model_validator(mode="after")
    def validate_supply_invariant(self) -> "TokenStateSnapshot":
        """
        Инвариант: сумма балансов == total supply.
        """
        total = sum(self.balances.values())
        if total != self.total_supply:
            raise ValueError(
                f"sum of balances {total} != total_supply {self.total_supply}"
            )
        return self

    @property
    def paused(self) -> bool:
        return self.pause_state == PauseState.PAUSED

    def to_contract(self) -> Dict[str, Any]:
        """Сериализация в dict, валидный против token_state JSON Schema."""
        return self.model_dump(mode="json")
