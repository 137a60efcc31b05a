"""
Liquidity math kernel: claim-token mint and burn amounts.

Rounding is always floor, so rounding dust stays with the pool.

Mint rule:

    empty pool (either reserve is 0):  mint = deposit_x
    otherwise:                         mint = min(floor(deposit_x * reserve_y / deposit_y),
                                                  floor(deposit_y * reserve_x / deposit_x))

The bootstrap mint uses the X-side deposit only, ignoring the Y side. This is
the pool's established behavior and is kept as is; see DESIGN.md.
"""

from __future__ import annotations

from dataclasses import dataclass

from ...errors import DivisionByZero, InvalidAmount
from .checked_math import checked_add, checked_sub, mul_div_floor, require_positive, require_u64


@dataclass(frozen=True)
class MintQuote:
    liquidity_minted: int
    new_reserve_x: int
    new_reserve_y: int
    new_lp_supply: int


@dataclass(frozen=True)
class BurnQuote:
    amount_x_out: int
    amount_y_out: int
    new_reserve_x: int
    new_reserve_y: int
    new_lp_supply: int


def initial_mint(*, deposit_x: int, deposit_y: int) -> int:
    """Claim tokens minted to the pool creator."""
    require_positive("deposit_x", deposit_x)
    require_positive("deposit_y", deposit_y)
    return deposit_x


def compute_mint(reserve_x: int, reserve_y: int, deposit_x: int, deposit_y: int) -> int:
    """
    Claim tokens for a deposit of `(deposit_x, deposit_y)`.

    May return 0; callers decide whether a zero mint is acceptable.

    Raises:
        DivisionByZero: a deposit side is zero while both reserves are non-zero.
        ArithmeticOverflow: a ratio does not fit in u64.
    """
    for name, v in (
        ("reserve_x", reserve_x),
        ("reserve_y", reserve_y),
        ("deposit_x", deposit_x),
        ("deposit_y", deposit_y),
    ):
        require_u64(name, v)

    if reserve_x == 0 or reserve_y == 0:
        return deposit_x

    if deposit_x == 0 or deposit_y == 0:
        raise DivisionByZero(f"deposit side is zero: ({deposit_x}, {deposit_y})")

    x_ratio = mul_div_floor(deposit_x, reserve_y, deposit_y)
    y_ratio = mul_div_floor(deposit_y, reserve_x, deposit_x)
    return min(x_ratio, y_ratio)


def compute_burn(lp_amount: int, reserve_x: int, reserve_y: int, lp_supply: int) -> tuple[int, int]:
    """
    Amounts returned for burning `lp_amount` claim tokens.

        amount_i = floor(reserve_i * lp_amount / lp_supply)
    """
    require_positive("lp_amount", lp_amount)
    require_u64("reserve_x", reserve_x)
    require_u64("reserve_y", reserve_y)
    require_u64("lp_supply", lp_supply)
    if lp_supply == 0:
        raise DivisionByZero("lp_supply is zero")
    if lp_amount > lp_supply:
        raise InvalidAmount(f"cannot burn more than supply: {lp_amount} > {lp_supply}")

    amount_x = mul_div_floor(reserve_x, lp_amount, lp_supply)
    amount_y = mul_div_floor(reserve_y, lp_amount, lp_supply)
    return amount_x, amount_y


def quote_mint(*, reserve_x: int, reserve_y: int, lp_supply: int, deposit_x: int, deposit_y: int) -> MintQuote:
    require_positive("deposit_x", deposit_x)
    require_positive("deposit_y", deposit_y)
    require_u64("lp_supply", lp_supply)

    minted = compute_mint(reserve_x, reserve_y, deposit_x, deposit_y)
    return MintQuote(
        liquidity_minted=minted,
        new_reserve_x=checked_add(reserve_x, deposit_x),
        new_reserve_y=checked_add(reserve_y, deposit_y),
        new_lp_supply=checked_add(lp_supply, minted),
    )


def quote_burn(*, reserve_x: int, reserve_y: int, lp_supply: int, lp_amount: int) -> BurnQuote:
    amount_x, amount_y = compute_burn(lp_amount, reserve_x, reserve_y, lp_supply)
    return BurnQuote(
        amount_x_out=amount_x,
        amount_y_out=amount_y,
        new_reserve_x=checked_sub(reserve_x, amount_x),
        new_reserve_y=checked_sub(reserve_y, amount_y),
        new_lp_supply=checked_sub(lp_supply, lp_amount),
    )
