"""
Constant-product swap kernel.

Pricing with the fee applied to the gross input before the curve:

    effective_in = amount_in * fee_numerator              (997 by default)
    amount_out   = floor(effective_in * reserve_out
                         / (reserve_in * fee_denominator + effective_in))

The whole `amount_in` (fee included) is credited to the input reserve, so the
fee stays in the pool and `k = reserve_in * reserve_out` never decreases.
"""

from __future__ import annotations

from dataclasses import dataclass

from ...errors import InvariantViolation, ZeroLiquidity
from .checked_math import (
    U128_MAX,
    checked_add,
    checked_mul,
    checked_sub,
    require_int,
    require_positive,
    require_u64,
)


FEE_NUMERATOR = 997
FEE_DENOMINATOR = 1000


@dataclass(frozen=True)
class SwapQuote:
    amount_in: int
    effective_in: int
    amount_out: int
    new_reserve_in: int
    new_reserve_out: int
    k_before: int
    k_after: int


def _require_fee(fee_numerator: int, fee_denominator: int) -> None:
    require_int("fee_numerator", fee_numerator)
    require_int("fee_denominator", fee_denominator)
    if not (0 < fee_numerator <= fee_denominator):
        raise ValueError(
            f"fee must satisfy 0 < numerator <= denominator: {fee_numerator}/{fee_denominator}"
        )


def compute_output(
    amount_in: int,
    reserve_in: int,
    reserve_out: int,
    *,
    fee_numerator: int = FEE_NUMERATOR,
    fee_denominator: int = FEE_DENOMINATOR,
) -> int:
    """
    Output amount for selling `amount_in` against `(reserve_in, reserve_out)`.

    Raises:
        InvalidAmount: `amount_in` is zero.
        ZeroLiquidity: either reserve is empty.
        ArithmeticOverflow: an intermediate exceeds u128.
    """
    require_positive("amount_in", amount_in)
    require_u64("reserve_in", reserve_in)
    require_u64("reserve_out", reserve_out)
    _require_fee(fee_numerator, fee_denominator)
    if reserve_in == 0 or reserve_out == 0:
        raise ZeroLiquidity(f"cannot swap against an empty reserve: ({reserve_in}, {reserve_out})")

    effective_in = checked_mul(amount_in, fee_numerator)
    numerator = checked_mul(effective_in, reserve_out)
    denominator = checked_add(checked_mul(reserve_in, fee_denominator), effective_in, limit=U128_MAX)
    return numerator // denominator


def quote_swap_exact_in(
    *,
    reserve_in: int,
    reserve_out: int,
    amount_in: int,
    fee_numerator: int = FEE_NUMERATOR,
    fee_denominator: int = FEE_DENOMINATOR,
) -> SwapQuote:
    """Exact-in quote plus the post-swap reserves."""
    amount_out = compute_output(
        amount_in,
        reserve_in,
        reserve_out,
        fee_numerator=fee_numerator,
        fee_denominator=fee_denominator,
    )

    new_reserve_in = checked_add(reserve_in, amount_in)
    new_reserve_out = checked_sub(reserve_out, amount_out)

    k_before = reserve_in * reserve_out
    k_after = new_reserve_in * new_reserve_out
    if k_after < k_before:
        raise InvariantViolation(f"k_after ({k_after}) < k_before ({k_before})")

    return SwapQuote(
        amount_in=amount_in,
        effective_in=amount_in * fee_numerator,
        amount_out=amount_out,
        new_reserve_in=new_reserve_in,
        new_reserve_out=new_reserve_out,
        k_before=k_before,
        k_after=k_after,
    )
