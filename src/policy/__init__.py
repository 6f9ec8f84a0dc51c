"""Token Policy Engine — ownership, pause, mint window и vault поверх ledger.

- TokenPolicyEngine: публичная поверхность (mint, transfer, burn, withdraw, ...)
- TokenPolicyConfig: immutable конфигурация экземпляра
"""

from .config import TokenPolicyConfig
from .engine import TokenPolicyEngine

__all__ = [
    "TokenPolicyConfig",
    "TokenPolicyEngine",
]
