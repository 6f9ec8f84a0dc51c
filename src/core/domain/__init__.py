"""
Domain models and value objects.

Contains fundamental domain entities like TokenUnits, TokenStateSnapshot, TokenEvent.
"""

from src.core.domain.events import EventType, TokenEvent
from src.core.domain.token_state import (
    MintWindow,
    PauseState,
    TokenMetadata,
    TokenStateSnapshot,
)
from src.core.domain.units import (
    DEFAULT_DECIMALS,
    DEFAULT_MINT_PRICE_WEI,
    INITIAL_ALLOCATION_TOKENS,
    MAX_UINT256,
    MINT_WINDOW_DURATION_SEC,
    ZERO_ADDRESS,
    is_zero_address,
    mint_amount_for_payment,
    payment_remainder,
    scale_factor,
    tokens_to_units,
    units_to_tokens,
    validate_amount,
)

__all__ = [
    # Units module
    "DEFAULT_DECIMALS",
    "DEFAULT_MINT_PRICE_WEI",
    "INITIAL_ALLOCATION_TOKENS",
    "MAX_UINT256",
    "MINT_WINDOW_DURATION_SEC",
    "ZERO_ADDRESS",
    "is_zero_address",
    "mint_amount_for_payment",
    "payment_remainder",
    "scale_factor",
    "tokens_to_units",
    "units_to_tokens",
    "validate_amount",
    # Token state
    "MintWindow",
    "PauseState",
    "TokenMetadata",
    "TokenStateSnapshot",
    # Events
    "EventType",
    "TokenEvent",
]
