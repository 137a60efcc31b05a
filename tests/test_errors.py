# [TESTER] v1

from __future__ import annotations

import pytest

from pairpool.errors import (
    ArithmeticOverflow,
    DivisionByZero,
    ErrorKind,
    InvalidAmount,
    InvalidCommand,
    InvariantViolation,
    PoolError,
    UnknownPool,
    ZeroLiquidity,
    error_for_kind,
)


def test_codes_are_stable() -> None:
    assert ErrorKind.INVALID_AMOUNT.code == 0
    assert ErrorKind.ZERO_LIQUIDITY.code == 1
    assert ErrorKind.DIVISION_BY_ZERO.code == 2
    assert ErrorKind.ARITHMETIC_OVERFLOW.code == 3
    assert ErrorKind.INVALID_COMMAND.code == 9
    assert ErrorKind.INVARIANT_VIOLATION.code == 10


def test_errors_are_catchable_as_builtins() -> None:
    assert issubclass(InvalidAmount, ValueError)
    assert issubclass(ZeroLiquidity, ValueError)
    assert issubclass(DivisionByZero, ZeroDivisionError)
    assert issubclass(ArithmeticOverflow, OverflowError)
    assert issubclass(UnknownPool, KeyError)
    assert issubclass(InvalidCommand, ValueError)
    assert issubclass(InvariantViolation, AssertionError)


def test_message_includes_kind() -> None:
    exc = InvalidAmount("deposit_x must be positive")
    assert exc.kind is ErrorKind.INVALID_AMOUNT
    assert str(exc) == "INVALID_AMOUNT: deposit_x must be positive"
    assert str(UnknownPool("no pool")) == "UNKNOWN_POOL: no pool"


@pytest.mark.parametrize("kind", list(ErrorKind))
def test_error_for_kind_round_trips(kind: ErrorKind) -> None:
    exc = error_for_kind(kind, "boom")
    assert isinstance(exc, PoolError)
    assert exc.kind is kind
    assert exc.message == "boom"
