"""Property tests for the pool operations.

Uses Hypothesis to drive random operation sequences and check the curve and
accounting invariants after every step.
"""

from __future__ import annotations

import importlib.util

import pytest

if importlib.util.find_spec("hypothesis") is None:  # pragma: no cover
    pytest.skip("hypothesis not installed", allow_module_level=True)

import hypothesis.strategies as st
from hypothesis import given, settings

from pairpool.core.liquidity import add_liquidity, create_pool, remove_liquidity
from pairpool.core.swap import swap
from pairpool.errors import PoolError
from pairpool.kernels.python.cpmm_swap import compute_output
from pairpool.state import Coin, IdAllocator, SwapDirection

AMOUNT = st.integers(min_value=1, max_value=10**12)
RESERVE = st.integers(min_value=1, max_value=10**15)


@given(amount=AMOUNT, delta=AMOUNT, reserve_in=RESERVE, reserve_out=RESERVE)
@settings(max_examples=300, deadline=None)
def test_output_is_monotone_and_bounded(amount: int, delta: int, reserve_in: int, reserve_out: int) -> None:
    out = compute_output(amount, reserve_in, reserve_out)
    assert 0 <= out < reserve_out
    assert compute_output(amount + delta, reserve_in, reserve_out) >= out
    assert compute_output(amount, reserve_in + delta, reserve_out) <= out
    assert compute_output(amount, reserve_in, reserve_out + delta) >= out


@given(reserve=RESERVE, amount=st.integers(min_value=1, max_value=10**9))
@settings(max_examples=200, deadline=None)
def test_output_strictly_increases_over_large_steps(reserve: int, amount: int) -> None:
    # Doubling the input on a balanced pool always moves the floored output
    # once the first output is at least 1.
    out = compute_output(amount, reserve, reserve)
    if out >= 1 and 2 * amount < reserve:
        assert compute_output(2 * amount, reserve, reserve) > out


OP = st.one_of(
    st.tuples(st.just("swap"), st.sampled_from(list(SwapDirection)), AMOUNT),
    st.tuples(st.just("add"), AMOUNT, AMOUNT),
    st.tuples(st.just("remove"), st.integers(min_value=1, max_value=100), st.just(0)),
)


@given(x=AMOUNT, y=AMOUNT, ops=st.lists(OP, max_size=25))
@settings(max_examples=200, deadline=None)
def test_random_sequences_preserve_invariants(x: int, y: int, ops: list) -> None:
    pool, lp = create_pool(Coin.mint_for_testing("X", x), Coin.mint_for_testing("Y", y), ids=IdAllocator())

    for op in ops:
        before = pool.get_amounts()
        k_before = pool.get_constant_product()
        try:
            if op[0] == "swap":
                direction, amount = op[1], op[2]
                asset = "X" if direction is SwapDirection.X_TO_Y else "Y"
                swap(pool, Coin.mint_for_testing(asset, amount), direction)
                assert pool.get_constant_product() >= k_before
                assert pool.lp_supply == before[2]
            elif op[0] == "add":
                lp.join(add_liquidity(pool, Coin.mint_for_testing("X", op[1]), Coin.mint_for_testing("Y", op[2])))
            else:
                burn = max(1, lp.value * op[1] // 100)
                rx, ry, supply = before
                out_x, out_y = remove_liquidity(pool, lp.split(burn))
                assert out_x.value * supply <= rx * burn
                assert out_y.value * supply <= ry * burn
        except PoolError:
            assert pool.get_amounts() == before
            continue

        assert pool.verify_invariant()
        assert lp.value == pool.lp_supply
