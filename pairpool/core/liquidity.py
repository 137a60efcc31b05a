"""
Liquidity operations: create pool, add liquidity, remove liquidity.

Each operation computes every amount and runs every check before it touches the
pool, so a raised error leaves the pool exactly as it was.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from ..config import DEFAULT_CONFIG, PoolConfig
from ..errors import AssetMismatch, ZeroLiquidity
from ..kernels.python.lp_math import initial_mint, quote_burn, quote_mint
from ..state.balances import Coin
from ..state.ids import IdAllocator
from ..state.pools import PoolState, lp_asset_for
from ..state.supply import Supply

logger = logging.getLogger(__name__)


def create_pool(
    coin_x: Coin,
    coin_y: Coin,
    *,
    ids: IdAllocator,
    config: Optional[PoolConfig] = None,
) -> Tuple[PoolState, Coin]:
    """
    Create a pool from an initial two-sided deposit.

    The creator receives `deposit_x` claim tokens: the initial supply is taken
    from the X side only and ignores the Y deposit.

    Args:
        coin_x: Initial deposit of asset X (consumed)
        coin_y: Initial deposit of asset Y (consumed)
        ids: Allocator for the pool identifier
        config: Fee configuration, fixed for the pool's lifetime

    Returns:
        Tuple of (pool, claim-token coin)

    Raises:
        InvalidAmount: If either deposit is zero
        AssetMismatch: If both coins hold the same asset
    """
    if coin_x.asset == coin_y.asset:
        raise AssetMismatch(f"pool assets must differ: {coin_x.asset}")

    lp_minted = initial_mint(deposit_x=coin_x.value, deposit_y=coin_y.value)

    pool_id = ids.fresh()
    supply = Supply(asset=lp_asset_for(pool_id))
    lp_balance = supply.increase_supply(lp_minted)
    pool = PoolState(
        pool_id=pool_id,
        balance_x=coin_x.into_balance(),
        balance_y=coin_y.into_balance(),
        supply=supply,
        config=config or DEFAULT_CONFIG,
    )

    logger.info(
        "pool %s created: %s/%s reserves=(%d, %d) lp_supply=%d",
        pool_id, pool.asset_x, pool.asset_y, pool.reserve_x, pool.reserve_y, pool.lp_supply,
    )
    return pool, Coin.from_balance(lp_balance)


def add_liquidity(pool: PoolState, coin_x: Coin, coin_y: Coin) -> Coin:
    """
    Deposit both assets and mint claim tokens.

    The whole deposit is absorbed into reserves even when its ratio differs from
    the pool's; the imbalanced excess is not refunded.

    Raises:
        InvalidAmount: If either deposit is zero
        ZeroLiquidity: If the deposit would mint no claim tokens
        AssetMismatch: If a coin does not match its pool side
    """
    if coin_x.asset != pool.asset_x or coin_y.asset != pool.asset_y:
        raise AssetMismatch(
            f"expected ({pool.asset_x}, {pool.asset_y}), got ({coin_x.asset}, {coin_y.asset})"
        )

    quote = quote_mint(
        reserve_x=pool.reserve_x,
        reserve_y=pool.reserve_y,
        lp_supply=pool.lp_supply,
        deposit_x=coin_x.value,
        deposit_y=coin_y.value,
    )
    if quote.liquidity_minted <= 0:
        raise ZeroLiquidity(
            f"deposit ({coin_x.value}, {coin_y.value}) mints nothing against "
            f"reserves ({pool.reserve_x}, {pool.reserve_y})"
        )

    deposit_x, deposit_y = coin_x.value, coin_y.value
    pool.balance_x.join(coin_x.into_balance())
    pool.balance_y.join(coin_y.into_balance())
    lp_balance = pool.supply.increase_supply(quote.liquidity_minted)

    logger.debug(
        "pool %s add_liquidity: deposit=(%d, %d) minted=%d reserves=(%d, %d) lp_supply=%d",
        pool.pool_id, deposit_x, deposit_y, quote.liquidity_minted,
        pool.reserve_x, pool.reserve_y, pool.lp_supply,
    )
    return Coin.from_balance(lp_balance)


def remove_liquidity(pool: PoolState, lp_coin: Coin) -> Tuple[Coin, Coin]:
    """
    Burn claim tokens for a proportional share of both reserves.

    Outputs:
        amount_x = floor(reserve_x * lp_amount / lp_supply)
        amount_y = floor(reserve_y * lp_amount / lp_supply)

    Raises:
        InvalidAmount: If the coin is empty or exceeds the supply
        DivisionByZero: If the pool has no outstanding supply
        AssetMismatch: If the coin is not this pool's claim token
    """
    if lp_coin.asset != pool.lp_asset:
        raise AssetMismatch(f"{lp_coin.asset} is not the claim token of pool {pool.pool_id}")

    lp_amount = lp_coin.value
    quote = quote_burn(
        reserve_x=pool.reserve_x,
        reserve_y=pool.reserve_y,
        lp_supply=pool.lp_supply,
        lp_amount=lp_amount,
    )

    pool.supply.decrease_supply(lp_coin.into_balance())
    out_x = pool.balance_x.split(quote.amount_x_out)
    out_y = pool.balance_y.split(quote.amount_y_out)

    logger.debug(
        "pool %s remove_liquidity: burned=%d out=(%d, %d) reserves=(%d, %d) lp_supply=%d",
        pool.pool_id, lp_amount, out_x.value, out_y.value,
        pool.reserve_x, pool.reserve_y, pool.lp_supply,
    )
    return Coin.from_balance(out_x), Coin.from_balance(out_y)
