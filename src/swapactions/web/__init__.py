"""Web boundary layer for Solana swap actions.

SECURITY PRINCIPLES:
1. This layer never holds or derives private keys.
2. It never signs or broadcasts transactions.
3. Every POST returns an unsigned transaction that the caller's wallet
   signs and submits (non-custodial).
"""

__all__ = [
    "contracts",
    "services",
    "controllers",
]
