"""
Claim-token supply.

A `Supply` is the only way to create or destroy claim tokens for its asset, so
its `value` always equals the quantity outstanding.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..errors import AssetMismatch, InvalidAmount
from ..kernels.python.checked_math import checked_add, require_u64
from .balances import Amount, AssetId, Balance


@dataclass
class Supply:
    asset: AssetId
    value: Amount = 0

    def __post_init__(self) -> None:
        require_u64("value", self.value)

    def increase_supply(self, amount: Amount) -> Balance:
        """Mint `amount` claim tokens."""
        require_u64("amount", amount)
        self.value = checked_add(self.value, amount)
        return Balance(asset=self.asset, value=amount)

    def decrease_supply(self, balance: Balance) -> Amount:
        """Burn `balance`, which is consumed. Returns the new supply."""
        if balance.asset != self.asset:
            raise AssetMismatch(f"cannot burn {balance.asset} against supply of {self.asset}")
        if balance.value > self.value:
            raise InvalidAmount(f"burn {balance.value} exceeds supply {self.value}")
        self.value -= balance.value
        balance.value = 0
        return self.value
