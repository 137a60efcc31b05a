"""
Width-checked integer arithmetic.

Amounts are u64 and every product of two amount-scale values is computed in a
u128 intermediate. Python ints never wrap, so the widths are enforced
explicitly: exceeding a width raises `ArithmeticOverflow` instead of wrapping.

All helpers use `//` (floor) for division.
"""

from __future__ import annotations

from ...errors import ArithmeticOverflow, DivisionByZero, InvalidAmount


U64_MAX = (1 << 64) - 1
U128_MAX = (1 << 128) - 1


def require_int(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int")


def require_u64(name: str, value: int) -> None:
    """Type- and range-check an amount."""
    require_int(name, value)
    if value < 0:
        raise InvalidAmount(f"{name} must be non-negative: {value}")
    if value > U64_MAX:
        raise ArithmeticOverflow(f"{name} exceeds u64: {value}")


def require_positive(name: str, value: int) -> None:
    require_u64(name, value)
    if value == 0:
        raise InvalidAmount(f"{name} must be positive")


def _check_width(name: str, value: int, limit: int) -> int:
    if value > limit:
        raise ArithmeticOverflow(f"{name} overflows {limit.bit_length()} bits: {value}")
    return value


def checked_add(a: int, b: int, *, limit: int = U64_MAX) -> int:
    return _check_width("sum", a + b, limit)


def checked_sub(a: int, b: int) -> int:
    if b > a:
        raise ArithmeticOverflow(f"subtraction underflow: {a} - {b}")
    return a - b


def checked_mul(a: int, b: int, *, limit: int = U128_MAX) -> int:
    """Multiply in a u128 intermediate (or a caller-chosen limit)."""
    return _check_width("product", a * b, limit)


def mul_div_floor(a: int, b: int, denominator: int, *, limit: int = U64_MAX) -> int:
    """
    Compute `floor(a * b / denominator)`.

    The product is held in u128; the quotient must fit `limit` (u64 by default).
    """
    if denominator == 0:
        raise DivisionByZero(f"mul_div_floor({a}, {b}, 0)")
    product = checked_mul(a, b)
    return _check_width("quotient", product // denominator, limit)
