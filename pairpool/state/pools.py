"""
Pool record for two-asset constant-product pools.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple

from ..config import DEFAULT_CONFIG, PoolConfig
from ..errors import AssetMismatch, InvalidCommand
from .balances import Amount, AssetId, Balance
from .supply import Supply


LP_ASSET_PREFIX = "LP:"


class SwapDirection(Enum):
    """Which asset is being sold."""

    X_TO_Y = "X_TO_Y"
    Y_TO_X = "Y_TO_X"


def lp_asset_for(pool_id: str) -> AssetId:
    """Claim-token asset identifier scoped to `pool_id`."""
    return LP_ASSET_PREFIX + pool_id


@dataclass(repr=False)
class PoolState:
    """
    State of one liquidity pool.

    Attributes:
        pool_id: unique identifier, assigned once at creation
        balance_x: custodied reserve of asset X
        balance_y: custodied reserve of asset Y
        supply: claim-token supply; its value is the outstanding LP amount
        config: fee configuration fixed at creation

    Reserves and supply are changed only by the operations in
    `pairpool.core.liquidity` and `pairpool.core.swap`; the properties below are
    read-only views.
    """

    pool_id: str
    balance_x: Balance
    balance_y: Balance
    supply: Supply
    config: PoolConfig = field(default=DEFAULT_CONFIG)

    def __post_init__(self) -> None:
        if not isinstance(self.pool_id, str) or not self.pool_id:
            raise ValueError("pool_id must be a non-empty string")
        if self.balance_x.asset == self.balance_y.asset:
            raise AssetMismatch(f"pool assets must differ: {self.balance_x.asset}")
        if self.supply.asset != lp_asset_for(self.pool_id):
            raise AssetMismatch(f"supply asset {self.supply.asset} does not belong to pool {self.pool_id}")

    def __setattr__(self, name: str, value: object) -> None:
        if name == "pool_id" and "pool_id" in self.__dict__:
            raise AttributeError("pool_id is immutable")
        super().__setattr__(name, value)

    @property
    def asset_x(self) -> AssetId:
        return self.balance_x.asset

    @property
    def asset_y(self) -> AssetId:
        return self.balance_y.asset

    @property
    def lp_asset(self) -> AssetId:
        return self.supply.asset

    @property
    def reserve_x(self) -> Amount:
        return self.balance_x.value

    @property
    def reserve_y(self) -> Amount:
        return self.balance_y.value

    @property
    def lp_supply(self) -> Amount:
        return self.supply.value

    def get_amounts(self) -> Tuple[Amount, Amount, Amount]:
        """Return `(reserve_x, reserve_y, lp_supply)`."""
        return self.reserve_x, self.reserve_y, self.lp_supply

    def price_ratio(self) -> Tuple[Amount, Amount]:
        """Current price as the reserve pair `(reserve_x, reserve_y)`."""
        return self.reserve_x, self.reserve_y

    def get_constant_product(self) -> int:
        return self.reserve_x * self.reserve_y

    def reserves_for(self, direction: SwapDirection) -> Tuple[Balance, Balance]:
        """(input reserve, output reserve) handles for a swap direction."""
        if direction is SwapDirection.X_TO_Y:
            return self.balance_x, self.balance_y
        if direction is SwapDirection.Y_TO_X:
            return self.balance_y, self.balance_x
        raise InvalidCommand(f"unknown swap direction: {direction!r}")

    def direction_for_input(self, asset: AssetId) -> SwapDirection:
        if asset == self.asset_x:
            return SwapDirection.X_TO_Y
        if asset == self.asset_y:
            return SwapDirection.Y_TO_X
        raise AssetMismatch(f"asset {asset} not in pool {self.pool_id}")

    def get_reserve(self, asset: AssetId) -> Amount:
        if asset == self.asset_x:
            return self.reserve_x
        if asset == self.asset_y:
            return self.reserve_y
        raise AssetMismatch(f"asset {asset} not in pool {self.pool_id}")

    def verify_invariant(self) -> bool:
        """Reserves and supply are all positive, or all zero for a fully drained pool."""
        values = self.get_amounts()
        return all(v > 0 for v in values) or all(v == 0 for v in values)

    def __repr__(self) -> str:
        return (
            f"PoolState(pool_id={self.pool_id[:16]}..., "
            f"assets=({self.asset_x}, {self.asset_y}), "
            f"reserves=({self.reserve_x}, {self.reserve_y}), "
            f"lp_supply={self.lp_supply})"
        )
