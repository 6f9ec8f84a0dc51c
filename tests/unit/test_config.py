"""
Tests for TokenPolicyConfig

Покрывает:
- Значения по умолчанию
- Валидация (Pydantic constraints)
- Immutability (frozen=True)
- Загрузка из переменных окружения
"""

import pytest
from pydantic import ValidationError

from src.policy.config import TokenPolicyConfig


class TestDefaults:
    """Значения по умолчанию"""

    def test_defaults(self):
        config = TokenPolicyConfig()

        assert config.decimals == 18
        assert config.scale_factor == 10**18
        assert config.mint_price_wei == 10**16
        assert config.mint_duration_sec == 30 * 24 * 3600
        assert config.initial_allocation_tokens == 10_000
        assert config.initial_allocation == 10_000 * 10**18

    def test_frozen(self):
        config = TokenPolicyConfig()
        with pytest.raises(ValidationError):
            config.mint_price_wei = 1


class TestValidation:
    """Валидация"""

    def test_zero_price_rejected(self):
        with pytest.raises(ValidationError):
            TokenPolicyConfig(mint_price_wei=0)

    def test_negative_duration_rejected(self):
        with pytest.raises(ValidationError):
            TokenPolicyConfig(mint_duration_sec=-1)

    def test_symbol_whitespace_rejected(self):
        with pytest.raises(ValidationError, match="whitespace"):
            TokenPolicyConfig(symbol="P TK")

    def test_custom_decimals(self):
        config = TokenPolicyConfig(decimals=6, initial_allocation_tokens=5)
        assert config.initial_allocation == 5_000_000


class TestFromEnv:
    """Загрузка из окружения"""

    def test_empty_env_gives_defaults(self):
        assert TokenPolicyConfig.from_env({}) == TokenPolicyConfig()

    def test_env_values(self):
        config = TokenPolicyConfig.from_env(
            {
                "TOKEN_NAME": "Gate Token",
                "TOKEN_SYMBOL": "GATE",
                "TOKEN_DECIMALS": "6",
                "TOKEN_MINT_PRICE_WEI": "1000",
                "TOKEN_MINT_DURATION_SEC": "3600",
                "TOKEN_INITIAL_ALLOCATION": "42",
            }
        )

        assert config.name == "Gate Token"
        assert config.symbol == "GATE"
        assert config.decimals == 6
        assert config.mint_price_wei == 1000
        assert config.mint_duration_sec == 3600
        assert config.initial_allocation == 42 * 10**6

    def test_blank_values_ignored(self):
        config = TokenPolicyConfig.from_env({"TOKEN_MINT_PRICE_WEI": "   "})
        assert config.mint_price_wei == 10**16

    def test_invalid_env_raises_value_error(self):
        with pytest.raises(ValueError, match="Invalid token policy configuration"):
            TokenPolicyConfig.from_env({"TOKEN_MINT_PRICE_WEI": "free"})

    def test_reads_os_environ(self, monkeypatch):
        monkeypatch.setenv("TOKEN_SYMBOL", "ENV")
        assert TokenPolicyConfig.from_env().symbol == "ENV"
