"""Gates — индивидуальные гейты Gatekeeper системы.

- GATE 0: Ownership (pause / unpause / withdraw / ownership)
- GATE 1: Pause guard (все изменения token-балансов)
- GATE 2: Mint eligibility (window → price → owner exclusion → pause)
"""

from .gate_00_ownership import Gate00Ownership, Gate00Result
from .gate_01_pause_guard import Gate01PauseGuard, Gate01Result
from .gate_02_mint_eligibility import Gate02MintEligibility, Gate02Result

__all__ = [
    "Gate00Ownership",
    "Gate00Result",
    "Gate01PauseGuard",
    "Gate01Result",
    "Gate02MintEligibility",
    "Gate02Result",
]
