"""Ledger collaborators — балансовый substrate, vault и clock.

Policy engine потребляет их через Protocol-интерфейсы; in-memory
реализации служат эталоном и используются в тестах.
"""

from .clock import Clock, ManualClock, SystemClock
from .ledger import Checkpointable, InMemoryLedger, Ledger
from .vault import InMemoryVault, Vault

__all__ = [
    "Clock",
    "ManualClock",
    "SystemClock",
    "Checkpointable",
    "InMemoryLedger",
    "Ledger",
    "InMemoryVault",
    "Vault",
]
