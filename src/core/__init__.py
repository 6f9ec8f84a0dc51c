"""
Core domain models, unit conversions, errors and contracts.

This module contains the foundational building blocks that are independent
of the collaborators (ledger storage, vault, clock).
"""
