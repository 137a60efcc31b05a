"""
State management for pairpool: asset handles, claim-token supply, ids and pools.
"""

from .balances import Balance, BalanceTable, Coin
from .ids import IdAllocator
from .pools import PoolState, SwapDirection
from .supply import Supply

__all__ = [
    "Balance",
    "BalanceTable",
    "Coin",
    "IdAllocator",
    "PoolState",
    "SwapDirection",
    "Supply",
]
