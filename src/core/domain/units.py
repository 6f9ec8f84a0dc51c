"""
TokenUnits — Централизованный модуль конверсии единиц токена

Единственный допустимый способ преобразований между:
- whole tokens (целые токены)
- smallest units (минимальные неделимые единицы, 10**decimals за токен)
- native payment (wei) → количество mint

ЗАПРЕЩЕНО делать конверсии float-арифметикой: все суммы — int.
"""

from typing import Final

from src.core.errors import InvalidAmount


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Десятичные знаки токена (scale factor = 10**DECIMALS)
DEFAULT_DECIMALS: Final[int] = 18

# Начальная аллокация deployer-у (целые токены)
INITIAL_ALLOCATION_TOKENS: Final[int] = 10_000

# Длительность mint window
MINT_WINDOW_DURATION_SEC: Final[int] = 30 * 24 * 60 * 60

# Цена mint одного целого токена (wei)
DEFAULT_MINT_PRICE_WEI: Final[int] = 10**16

# Сумма, трактуемая как бесконечный allowance (не уменьшается при списании)
MAX_UINT256: Final[int] = 2**256 - 1

# Нулевой адрес: источник mint и приёмник burn
ZERO_ADDRESS: Final[str] = "0x" + "0" * 40


# =============================================================================
# БАЗОВЫЕ КОНВЕРТЕРЫ
# =============================================================================


def scale_factor(decimals: int = DEFAULT_DECIMALS) -> int:
    """Множитель whole token → smallest units."""
    if decimals < 0:
        raise ValueError(f"decimals cannot be negative: {decimals}")
    return 10**decimals


def tokens_to_units(tokens: int, decimals: int = DEFAULT_DECIMALS) -> int:
    """
    Конверсия: целые токены → smallest units

    Args:
        tokens: Количество целых токенов
        decimals: Десятичные знаки токена

    Returns:
        tokens * 10**decimals
    """
    validate_amount(tokens)
    return tokens * scale_factor(decimals)


def units_to_tokens(units: int, decimals: int = DEFAULT_DECIMALS) -> int:
    """Конверсия smallest units → целые токены (floor)."""
    validate_amount(units)
    return units // scale_factor(decimals)


def mint_amount_for_payment(
    payment_wei: int, mint_price_wei: int, decimals: int = DEFAULT_DECIMALS
) -> int:
    """
    Конверсия: оплата в wei → количество mint в smallest units

    amount = floor(payment / price) * 10**decimals

    Остаток оплаты сверх кратного цене не даёт дополнительных токенов.

    Args:
        payment_wei: Приложенная оплата
        mint_price_wei: Цена одного целого токена (> 0)
        decimals: Десятичные знаки токена

    Returns:
        Количество mint в smallest units

    Raises:
        ValueError: Если mint_price_wei <= 0
        InvalidAmount: Если payment_wei отрицательный
    """
    validate_amount(payment_wei)
    if mint_price_wei <= 0:
        raise ValueError(f"mint_price_wei must be positive, got {mint_price_wei}")

    return (payment_wei // mint_price_wei) * scale_factor(decimals)


def payment_remainder(payment_wei: int, mint_price_wei: int) -> int:
    """Часть оплаты, не конвертированная в токены (остаётся в vault)."""
    validate_amount(payment_wei)
    if mint_price_wei <= 0:
        raise ValueError(f"mint_price_wei must be positive, got {mint_price_wei}")
    return payment_wei % mint_price_wei


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_amount(amount: int) -> None:
    """
    Проверка, что сумма — неотрицательный int.

    Raises:
        InvalidAmount: Если сумма не int (bool тоже отклоняется) или < 0
    """
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise InvalidAmount(f"Amount must be int, got {type(amount).__name__}")

    if amount < 0:
        raise InvalidAmount(f"Amount cannot be negative: {amount}")


def is_zero_address(account) -> bool:
    """True для пустого идентификатора или ZERO_ADDRESS."""
    if account is None:
        return True
    if not isinstance(account, str):
        return False
    return not account.strip() or account.lower() == ZERO_ADDRESS
