"""
Asset handles and caller holdings.

- `Balance` is a pool-custodied quantity of one asset.
- `Coin` is the caller-held handle for the same quantity; it converts to and
  from a `Balance` without changing the value.
- `BalanceTable` maps (owner, asset) -> amount for callers outside the pool.

Joining consumes the other handle (its value drops to zero), so a quantity
can never be counted twice.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

from ..errors import AssetMismatch, InsufficientFunds
from ..kernels.python.checked_math import checked_add, require_u64


# Type aliases
Owner = str
AssetId = str
Amount = int  # u64


@dataclass
class Balance:
    asset: AssetId
    value: Amount = 0

    def __post_init__(self) -> None:
        if not isinstance(self.asset, str) or not self.asset:
            raise ValueError("asset must be a non-empty string")
        require_u64("value", self.value)

    def _require_same_asset(self, other: "Balance") -> None:
        if other.asset != self.asset:
            raise AssetMismatch(f"cannot combine {other.asset} into {self.asset}")

    def join(self, other: "Balance") -> Amount:
        """Move all of `other` into this balance. Returns the new value."""
        self._require_same_asset(other)
        self.value = checked_add(self.value, other.value)
        other.value = 0
        return self.value

    def split(self, amount: Amount) -> "Balance":
        """Take `amount` out of this balance as a new handle."""
        require_u64("amount", amount)
        if amount > self.value:
            raise InsufficientFunds(f"split {amount} exceeds balance {self.value} of {self.asset}")
        self.value -= amount
        return Balance(asset=self.asset, value=amount)

    def withdraw_all(self) -> "Balance":
        return self.split(self.value)


@dataclass
class Coin:
    """Caller-held asset handle."""

    balance: Balance

    @classmethod
    def from_balance(cls, balance: Balance) -> "Coin":
        return cls(balance=balance)

    @classmethod
    def mint_for_testing(cls, asset: AssetId, value: Amount) -> "Coin":
        return cls(balance=Balance(asset=asset, value=value))

    @property
    def asset(self) -> AssetId:
        return self.balance.asset

    @property
    def value(self) -> Amount:
        return self.balance.value

    def into_balance(self) -> Balance:
        """Release the underlying balance; the coin is left empty."""
        return self.balance.withdraw_all()

    def join(self, other: "Coin") -> Amount:
        return self.balance.join(other.balance)

    def split(self, amount: Amount) -> "Coin":
        return Coin(balance=self.balance.split(amount))


class BalanceTable:
    """
    Balance table mapping (owner, asset) -> amount.

    Zero balances are omitted to keep the table sparse. Do not rely on dict
    iteration order; sort keys explicitly where order matters.
    """

    def __init__(self) -> None:
        self._balances: Dict[Tuple[Owner, AssetId], Amount] = {}

    def get(self, owner: Owner, asset: AssetId) -> Amount:
        """Get balance for (owner, asset). Returns 0 if not found."""
        return self._balances.get((owner, asset), 0)

    def set(self, owner: Owner, asset: AssetId, amount: Amount) -> None:
        require_u64("amount", amount)
        if amount == 0:
            self._balances.pop((owner, asset), None)
        else:
            self._balances[(owner, asset)] = amount

    def add(self, owner: Owner, asset: AssetId, delta: Amount) -> None:
        require_u64("delta", delta)
        self.set(owner, asset, checked_add(self.get(owner, asset), delta))

    def subtract(self, owner: Owner, asset: AssetId, delta: Amount) -> None:
        require_u64("delta", delta)
        current = self.get(owner, asset)
        if delta > current:
            raise InsufficientFunds(f"{owner} holds {current} of {asset}, needs {delta}")
        self.set(owner, asset, current - delta)

    def withdraw(self, owner: Owner, asset: AssetId, amount: Amount) -> Coin:
        """Debit the owner and hand the amount out as a coin."""
        self.subtract(owner, asset, amount)
        return Coin(balance=Balance(asset=asset, value=amount))

    def deposit(self, owner: Owner, coin: Coin) -> None:
        """Credit the owner with the coin's full value, consuming the coin."""
        balance = coin.into_balance()
        self.add(owner, balance.asset, balance.value)

    def copy(self) -> "BalanceTable":
        """Independent table with the same rows."""
        table = BalanceTable()
        table._balances = dict(self._balances)
        return table

    def get_all_balances(self) -> Dict[Tuple[Owner, AssetId], Amount]:
        return dict(self._balances)

    def get_balances_for_asset(self, asset: AssetId) -> Dict[Owner, Amount]:
        return {owner: amount for (owner, a), amount in self._balances.items() if a == asset}

    def total_supply(self, asset: AssetId) -> Amount:
        return sum(self.get_balances_for_asset(asset).values())

    def __repr__(self) -> str:
        return f"BalanceTable({len(self._balances)} entries)"
