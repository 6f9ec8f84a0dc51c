"""
TokenPolicyConfig — Конфигурация экземпляра Token Policy Engine

Immutable Pydantic модель. Все параметры фиксируются при construct и
не меняются в течение жизни экземпляра.

Переменные окружения (from_env):
- TOKEN_NAME, TOKEN_SYMBOL
- TOKEN_DECIMALS
- TOKEN_MINT_PRICE_WEI
- TOKEN_MINT_DURATION_SEC
- TOKEN_INITIAL_ALLOCATION (целые токены)
"""

import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from src.core.domain.units import (
    DEFAULT_DECIMALS,
    DEFAULT_MINT_PRICE_WEI,
    INITIAL_ALLOCATION_TOKENS,
    MINT_WINDOW_DURATION_SEC,
    tokens_to_units,
)


_ENV_FIELDS = {
    "TOKEN_NAME": "name",
    "TOKEN_SYMBOL": "symbol",
    "TOKEN_DECIMALS": "decimals",
    "TOKEN_MINT_PRICE_WEI": "mint_price_wei",
    "TOKEN_MINT_DURATION_SEC": "mint_duration_sec",
    "TOKEN_INITIAL_ALLOCATION": "initial_allocation_tokens",
}


class TokenPolicyConfig(BaseModel):
    """
    Конфигурация token policy.

    Immutable модель (frozen=True).
    """

    # Метаданные
    name: str = Field("Policy Token", min_length=1, description="Имя токена")
    symbol: str = Field("PTK", min_length=1, max_length=11, description="Тикер")
    decimals: int = Field(DEFAULT_DECIMALS, ge=0, le=36, description="Десятичные знаки")

    # Mint
    mint_price_wei: int = Field(
        DEFAULT_MINT_PRICE_WEI, gt=0, description="Цена одного целого токена (wei)"
    )
    mint_duration_sec: int = Field(
        MINT_WINDOW_DURATION_SEC, ge=0, description="Длительность mint window"
    )

    # Начальная аллокация deployer-у
    initial_allocation_tokens: int = Field(
        INITIAL_ALLOCATION_TOKENS, ge=0, description="Аллокация deployer-у (целые токены)"
    )

    model_config = {"frozen": True}

    @field_validator("symbol")
    @classmethod
    def validate_symbol(cls, v: str) -> str:
        """Тикер без пробелов."""
        if any(ch.isspace() for ch in v):
            raise ValueError(f"symbol must not contain whitespace: {v!r}")
        return v

    @property
    def scale_factor(self) -> int:
        return 10**self.decimals

    @property
    def initial_allocation(self) -> int:
        """Начальная аллокация в smallest units."""
        return tokens_to_units(self.initial_allocation_tokens, self.decimals)

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "TokenPolicyConfig":
        """
        Загрузка конфигурации из переменных окружения.

        Отсутствующие переменные → значения по умолчанию.

        Raises:
            ValueError: Если значение некорректно
        """
        source = os.environ if env is None else env

        values = {}
        for env_name, field_name in _ENV_FIELDS.items():
            raw = source.get(env_name, "").strip()
            if raw:
                values[field_name] = raw

        try:
            return cls(**values)
        except ValidationError as exc:
            raise ValueError(f"Invalid token policy configuration: {exc}") from exc
