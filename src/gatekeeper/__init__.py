"""Gatekeeper — система гейтов допуска вызовов token ledger.

- 3 gates с фиксированным порядком
- Gate не бросает исключений: engine переводит block_reason в typed error
"""

from .gates.gate_00_ownership import Gate00Ownership, Gate00Result
from .gates.gate_01_pause_guard import Gate01PauseGuard, Gate01Result
from .gates.gate_02_mint_eligibility import Gate02MintEligibility, Gate02Result

__all__ = [
    "Gate00Ownership",
    "Gate00Result",
    "Gate01PauseGuard",
    "Gate01Result",
    "Gate02MintEligibility",
    "Gate02Result",
]
