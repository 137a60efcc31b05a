"""
Swap operations against a single pool.

The core has no minimum-output guard; callers that need slippage protection
check the returned amount (see `pairpool.core.engine`).
"""

from __future__ import annotations

import logging

from ..errors import AssetMismatch
from ..kernels.python.cpmm_swap import SwapQuote, quote_swap_exact_in
from ..state.balances import Amount, Coin
from ..state.pools import PoolState, SwapDirection

logger = logging.getLogger(__name__)


def quote_swap(pool: PoolState, amount_in: Amount, direction: SwapDirection) -> SwapQuote:
    """Read-only quote; the pool is not modified."""
    reserve_in, reserve_out = pool.reserves_for(direction)
    return quote_swap_exact_in(
        reserve_in=reserve_in.value,
        reserve_out=reserve_out.value,
        amount_in=amount_in,
        fee_numerator=pool.config.fee_numerator,
        fee_denominator=pool.config.fee_denominator,
    )


def swap(pool: PoolState, coin_in: Coin, direction: SwapDirection) -> Coin:
    """
    Sell `coin_in` into the pool and return the bought asset.

    The full input, fee included, is credited to the input reserve.

    Raises:
        InvalidAmount: If the input coin is empty
        ZeroLiquidity: If either reserve is empty
        AssetMismatch: If the coin is not the asset sold in `direction`
        ArithmeticOverflow: If an intermediate exceeds u128
    """
    reserve_in, reserve_out = pool.reserves_for(direction)
    if coin_in.asset != reserve_in.asset:
        raise AssetMismatch(f"{direction.value} sells {reserve_in.asset}, got {coin_in.asset}")

    quote = quote_swap(pool, coin_in.value, direction)

    reserve_in.join(coin_in.into_balance())
    out = reserve_out.split(quote.amount_out)

    logger.debug(
        "pool %s swap %s: in=%d out=%d reserves=(%d, %d) k=%d->%d",
        pool.pool_id, direction.value, quote.amount_in, quote.amount_out,
        pool.reserve_x, pool.reserve_y, quote.k_before, quote.k_after,
    )
    return Coin.from_balance(out)


def swap_x_to_y(pool: PoolState, coin_x: Coin) -> Coin:
    return swap(pool, coin_x, SwapDirection.X_TO_Y)


def swap_y_to_x(pool: PoolState, coin_y: Coin) -> Coin:
    return swap(pool, coin_y, SwapDirection.Y_TO_X)
