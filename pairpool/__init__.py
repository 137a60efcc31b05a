"""
pairpool: a two-asset constant-product liquidity pool core.
"""

from .errors import (
    ArithmeticOverflow,
    AssetMismatch,
    DivisionByZero,
    ErrorKind,
    InsufficientFunds,
    InvalidAmount,
    InvalidCommand,
    InvariantViolation,
    PoolError,
    PoolExists,
    SlippageExceeded,
    UnknownPool,
    ZeroLiquidity,
)
from .config import PoolConfig
from .state import Balance, BalanceTable, Coin, IdAllocator, PoolState, SwapDirection, Supply
from .core import (
    Action,
    Command,
    Ledger,
    StepResult,
    add_liquidity,
    create_pool,
    quote_swap,
    remove_liquidity,
    step,
    step_or_raise,
    swap,
    swap_x_to_y,
    swap_y_to_x,
)

__version__ = "0.1.0"

__all__ = [
    "ArithmeticOverflow",
    "AssetMismatch",
    "DivisionByZero",
    "ErrorKind",
    "InsufficientFunds",
    "InvalidAmount",
    "InvalidCommand",
    "InvariantViolation",
    "PoolError",
    "PoolExists",
    "SlippageExceeded",
    "UnknownPool",
    "ZeroLiquidity",
    "PoolConfig",
    "Balance",
    "BalanceTable",
    "Coin",
    "IdAllocator",
    "PoolState",
    "SwapDirection",
    "Supply",
    "Action",
    "Command",
    "Ledger",
    "StepResult",
    "add_liquidity",
    "create_pool",
    "quote_swap",
    "remove_liquidity",
    "step",
    "step_or_raise",
    "swap",
    "swap_x_to_y",
    "swap_y_to_x",
]
