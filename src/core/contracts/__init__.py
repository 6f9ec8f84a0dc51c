"""
Contract Validation Module

Модуль для валидации JSON контрактов token ledger.
"""

from .validators import (
    ContractValidator,
    SchemaLoader,
    TokenEventValidator,
    TokenStateValidator,
    validate_token_event,
    validate_token_state,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "TokenStateValidator",
    "TokenEventValidator",
    # Functions
    "validate_token_state",
    "validate_token_event",
]
