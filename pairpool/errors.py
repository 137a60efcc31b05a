"""Exception types for the pairpool core.

Every failure carries an ``ErrorKind`` with a stable numeric abort code.
Each class also derives from the closest builtin so callers that only know
``ValueError`` / ``OverflowError`` keep working.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Abort kinds with stable numeric codes."""

    INVALID_AMOUNT = 0
    ZERO_LIQUIDITY = 1
    DIVISION_BY_ZERO = 2
    ARITHMETIC_OVERFLOW = 3
    ASSET_MISMATCH = 4
    INSUFFICIENT_FUNDS = 5
    UNKNOWN_POOL = 6
    POOL_EXISTS = 7
    SLIPPAGE_EXCEEDED = 8
    INVALID_COMMAND = 9
    INVARIANT_VIOLATION = 10

    @property
    def code(self) -> int:
        return int(self.value)


class PoolError(Exception):
    """Base class for every abort raised by pairpool."""

    kind: ErrorKind

    def __init__(self, message: str = "") -> None:
        self.message = message or self.kind.name.lower()
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"{self.kind.name}: {self.message}"


class InvalidAmount(PoolError, ValueError):
    """Raised when a supplied amount is zero, negative or out of range."""

    kind = ErrorKind.INVALID_AMOUNT


class ZeroLiquidity(PoolError, ValueError):
    """Raised when a deposit would mint zero claim tokens."""

    kind = ErrorKind.ZERO_LIQUIDITY


class DivisionByZero(PoolError, ZeroDivisionError):
    """Raised when a formula would divide by a zero supply or deposit."""

    kind = ErrorKind.DIVISION_BY_ZERO


class ArithmeticOverflow(PoolError, OverflowError):
    """Raised when an intermediate or a result exceeds its integer width."""

    kind = ErrorKind.ARITHMETIC_OVERFLOW


class AssetMismatch(PoolError, ValueError):
    kind = ErrorKind.ASSET_MISMATCH


class InsufficientFunds(PoolError, ValueError):
    kind = ErrorKind.INSUFFICIENT_FUNDS


class UnknownPool(PoolError, KeyError):
    kind = ErrorKind.UNKNOWN_POOL

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return PoolError.__str__(self)


class PoolExists(PoolError, ValueError):
    kind = ErrorKind.POOL_EXISTS


class SlippageExceeded(PoolError, ValueError):
    kind = ErrorKind.SLIPPAGE_EXCEEDED


class InvalidCommand(PoolError, ValueError):
    """Raised when a ledger command is missing a field or names an unknown action."""

    kind = ErrorKind.INVALID_COMMAND


class InvariantViolation(PoolError, AssertionError):
    """Raised when a pool leaves its reserve or supply invariants."""

    kind = ErrorKind.INVARIANT_VIOLATION


_BY_KIND = {
    cls.kind: cls
    for cls in (
        InvalidAmount,
        ZeroLiquidity,
        DivisionByZero,
        ArithmeticOverflow,
        AssetMismatch,
        InsufficientFunds,
        UnknownPool,
        PoolExists,
        SlippageExceeded,
        InvalidCommand,
        InvariantViolation,
    )
}


def error_for_kind(kind: ErrorKind, message: str = "") -> PoolError:
    """Build the exception instance matching ``kind``."""
    return _BY_KIND[kind](message)
