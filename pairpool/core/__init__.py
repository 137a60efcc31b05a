"""
Pool operations
"""

from .liquidity import (
    create_pool,
    add_liquidity,
    remove_liquidity,
)
from .swap import quote_swap, swap, swap_x_to_y, swap_y_to_x
from .engine import Action, Command, Ledger, StepResult, step, step_or_raise

__all__ = [
    "create_pool",
    "add_liquidity",
    "remove_liquidity",
    "quote_swap",
    "swap",
    "swap_x_to_y",
    "swap_y_to_x",
    "Action",
    "Command",
    "Ledger",
    "StepResult",
    "step",
    "step_or_raise",
]
