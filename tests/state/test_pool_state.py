# [TESTER] v1

from __future__ import annotations

import pytest

from pairpool.errors import AssetMismatch, InvalidCommand
from pairpool.state import Balance, IdAllocator, PoolState, Supply, SwapDirection
from pairpool.state.pools import lp_asset_for


def _pool(x: int = 1000, y: int = 2000, lp: int = 1000) -> PoolState:
    pool_id = IdAllocator().fresh()
    return PoolState(
        pool_id=pool_id,
        balance_x=Balance("X", x),
        balance_y=Balance("Y", y),
        supply=Supply(lp_asset_for(pool_id), lp),
    )


def test_id_allocator_is_unique_and_deterministic() -> None:
    a = IdAllocator()
    first, second = a.fresh(), a.fresh()
    assert first != second
    assert first.startswith("0x") and len(first) == 66
    assert IdAllocator().fresh() == first
    assert IdAllocator(namespace="other").fresh() != first
    assert a.allocated == 2


def test_accessors_report_reserves_and_supply() -> None:
    pool = _pool()
    assert (pool.reserve_x, pool.reserve_y, pool.lp_supply) == (1000, 2000, 1000)
    assert pool.get_amounts() == (1000, 2000, 1000)
    assert pool.price_ratio() == (1000, 2000)
    assert pool.get_constant_product() == 2_000_000
    assert pool.lp_asset == "LP:" + pool.pool_id
    assert pool.get_reserve("Y") == 2000


def test_accessors_do_not_mutate() -> None:
    pool = _pool()
    before = pool.get_amounts()
    for _ in range(3):
        pool.price_ratio()
        pool.get_constant_product()
        pool.verify_invariant()
        repr(pool)
    assert pool.get_amounts() == before


def test_pool_id_is_immutable() -> None:
    pool = _pool()
    with pytest.raises(AttributeError):
        pool.pool_id = "0x" + "00" * 32


def test_pool_requires_distinct_assets_and_own_supply() -> None:
    with pytest.raises(AssetMismatch):
        PoolState(pool_id="0xaa", balance_x=Balance("X", 1), balance_y=Balance("X", 1), supply=Supply("LP:0xaa", 1))
    with pytest.raises(AssetMismatch):
        PoolState(pool_id="0xaa", balance_x=Balance("X", 1), balance_y=Balance("Y", 1), supply=Supply("LP:0xbb", 1))


def test_reserves_for_direction_and_input_asset() -> None:
    pool = _pool()
    r_in, r_out = pool.reserves_for(SwapDirection.Y_TO_X)
    assert (r_in.asset, r_out.asset) == ("Y", "X")
    assert pool.direction_for_input("X") is SwapDirection.X_TO_Y
    with pytest.raises(AssetMismatch):
        pool.direction_for_input("Z")
    with pytest.raises(InvalidCommand):
        pool.reserves_for("X_TO_Y")  # type: ignore[arg-type]


def test_verify_invariant() -> None:
    assert _pool().verify_invariant()
    assert _pool(0, 0, 0).verify_invariant()
    assert not _pool(5, 0, 1).verify_invariant()
