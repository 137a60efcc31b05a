"""Dispatch-table engine hosting pools for a set of account holders.

``step(ledger, command)`` is the single entry point. It:

1. Forks the ledger: holder balances and the id allocator are copied, and
   only the pool named by the command is deep-copied. Other pool records
   are shared with the input ledger.
2. Dispatches to the handler for the command's action, which moves coins
   between holder balances and the pool operations.
3. Checks the touched pool's invariant.
4. Returns a ``StepResult``: the next ledger and an effect dict, or a
   rejection with its ``ErrorKind``.

The input ledger is never modified, so a rejected command has no effect on
holder balances or pools. Pool records reachable from a ledger are owned by
the engine; mutate them only through ``step``.
"""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Optional

from ..config import DEFAULT_CONFIG, PoolConfig
from ..errors import (
    ErrorKind,
    InvalidCommand,
    InvariantViolation,
    PoolError,
    PoolExists,
    SlippageExceeded,
    UnknownPool,
    error_for_kind,
)
from ..state.balances import AssetId, BalanceTable, Owner
from ..state.ids import IdAllocator
from ..state.pools import PoolState, SwapDirection
from .liquidity import add_liquidity, create_pool, remove_liquidity
from .swap import swap

logger = logging.getLogger(__name__)


class Action(Enum):
    CREATE_POOL = "create_pool"
    ADD_LIQUIDITY = "add_liquidity"
    SWAP = "swap"
    REMOVE_LIQUIDITY = "remove_liquidity"


@dataclass(frozen=True)
class Command:
    """
    One request from `sender`.

    Field use per action:
        CREATE_POOL:      asset_x, asset_y, amount_x, amount_y
        ADD_LIQUIDITY:    pool_id, amount_x, amount_y
        SWAP:             pool_id, direction, amount_in, min_amount_out
        REMOVE_LIQUIDITY: pool_id, lp_amount
    """

    action: Action
    sender: Owner
    pool_id: Optional[str] = None
    asset_x: Optional[AssetId] = None
    asset_y: Optional[AssetId] = None
    amount_x: int = 0
    amount_y: int = 0
    direction: SwapDirection = SwapDirection.X_TO_Y
    amount_in: int = 0
    min_amount_out: int = 0
    lp_amount: int = 0


@dataclass
class Ledger:
    balances: BalanceTable = field(default_factory=BalanceTable)
    pools: Dict[str, PoolState] = field(default_factory=dict)
    ids: IdAllocator = field(default_factory=IdAllocator)
    config: PoolConfig = DEFAULT_CONFIG

    def get_pool(self, pool_id: Optional[str]) -> PoolState:
        pool = self.pools.get(pool_id) if pool_id is not None else None
        if pool is None:
            raise UnknownPool(f"no pool with id {pool_id}")
        return pool

    def find_pool(self, asset_a: AssetId, asset_b: AssetId) -> Optional[PoolState]:
        """Pool for the unordered pair, if any."""
        pair = {asset_a, asset_b}
        for pool in self.pools.values():
            if {pool.asset_x, pool.asset_y} == pair:
                return pool
        return None

    def fork(self, pool_id: Optional[str] = None) -> "Ledger":
        """Copy that `step` may mutate; only `pool_id`'s record is deep-copied."""
        pools = dict(self.pools)
        if pool_id in pools:
            pools[pool_id] = copy.deepcopy(pools[pool_id])
        return Ledger(
            balances=self.balances.copy(),
            pools=pools,
            ids=copy.copy(self.ids),
            config=self.config,
        )


@dataclass(frozen=True)
class StepResult:
    accepted: bool
    ledger: Optional[Ledger] = None
    effect: Optional[Dict[str, Any]] = None
    rejection: Optional[ErrorKind] = None
    message: Optional[str] = None


def _create_pool(ledger: Ledger, cmd: Command) -> Dict[str, Any]:
    if cmd.asset_x is None or cmd.asset_y is None:
        raise InvalidCommand("create_pool requires asset_x and asset_y")
    existing = ledger.find_pool(cmd.asset_x, cmd.asset_y)
    if existing is not None:
        raise PoolExists(f"pool {existing.pool_id} already trades {cmd.asset_x}/{cmd.asset_y}")

    coin_x = ledger.balances.withdraw(cmd.sender, cmd.asset_x, cmd.amount_x)
    coin_y = ledger.balances.withdraw(cmd.sender, cmd.asset_y, cmd.amount_y)
    pool, lp_coin = create_pool(coin_x, coin_y, ids=ledger.ids, config=ledger.config)
    ledger.pools[pool.pool_id] = pool
    lp_minted = lp_coin.value
    ledger.balances.deposit(cmd.sender, lp_coin)
    return {"pool_id": pool.pool_id, "lp_minted": lp_minted}


def _add_liquidity(ledger: Ledger, cmd: Command) -> Dict[str, Any]:
    pool = ledger.get_pool(cmd.pool_id)
    coin_x = ledger.balances.withdraw(cmd.sender, pool.asset_x, cmd.amount_x)
    coin_y = ledger.balances.withdraw(cmd.sender, pool.asset_y, cmd.amount_y)
    lp_coin = add_liquidity(pool, coin_x, coin_y)
    lp_minted = lp_coin.value
    ledger.balances.deposit(cmd.sender, lp_coin)
    return {"pool_id": pool.pool_id, "lp_minted": lp_minted}


def _swap(ledger: Ledger, cmd: Command) -> Dict[str, Any]:
    pool = ledger.get_pool(cmd.pool_id)
    reserve_in, _ = pool.reserves_for(cmd.direction)
    coin_in = ledger.balances.withdraw(cmd.sender, reserve_in.asset, cmd.amount_in)
    coin_out = swap(pool, coin_in, cmd.direction)
    amount_out = coin_out.value
    if amount_out < cmd.min_amount_out:
        raise SlippageExceeded(f"amount_out ({amount_out}) < min_amount_out ({cmd.min_amount_out})")
    ledger.balances.deposit(cmd.sender, coin_out)
    return {"pool_id": pool.pool_id, "direction": cmd.direction.value, "amount_out": amount_out}


def _remove_liquidity(ledger: Ledger, cmd: Command) -> Dict[str, Any]:
    pool = ledger.get_pool(cmd.pool_id)
    lp_coin = ledger.balances.withdraw(cmd.sender, pool.lp_asset, cmd.lp_amount)
    coin_x, coin_y = remove_liquidity(pool, lp_coin)
    amount_x_out, amount_y_out = coin_x.value, coin_y.value
    ledger.balances.deposit(cmd.sender, coin_x)
    ledger.balances.deposit(cmd.sender, coin_y)
    return {"pool_id": pool.pool_id, "amount_x_out": amount_x_out, "amount_y_out": amount_y_out}


HandlerFn = Callable[[Ledger, Command], Dict[str, Any]]

_DISPATCH: Dict[Action, HandlerFn] = {
    Action.CREATE_POOL: _create_pool,
    Action.ADD_LIQUIDITY: _add_liquidity,
    Action.SWAP: _swap,
    Action.REMOVE_LIQUIDITY: _remove_liquidity,
}


def _check_pool(ledger: Ledger, effect: Dict[str, Any]) -> None:
    pool = ledger.pools[effect["pool_id"]]
    if not pool.verify_invariant():
        raise InvariantViolation(f"pool {pool.pool_id} left in state {pool.get_amounts()}")


def step(ledger: Ledger, command: Command) -> StepResult:
    """Execute one command against a fork of the ledger.

    Returns ``StepResult`` with ``accepted=True`` and the next ledger on
    success, or ``accepted=False`` with the ``ErrorKind`` on rejection.
    """
    handler = _DISPATCH.get(command.action)
    if handler is None:
        message = f"unknown action: {command.action!r}"
        logger.info("rejected command from %s: %s", command.sender, message)
        return StepResult(accepted=False, rejection=ErrorKind.INVALID_COMMAND, message=message)

    next_ledger = ledger.fork(command.pool_id)
    try:
        effect = handler(next_ledger, command)
        _check_pool(next_ledger, effect)
    except PoolError as exc:
        logger.info("rejected %s from %s: %s", command.action.value, command.sender, exc)
        return StepResult(accepted=False, rejection=exc.kind, message=exc.message)

    effect["action"] = command.action.value
    return StepResult(accepted=True, ledger=next_ledger, effect=effect)


def step_or_raise(ledger: Ledger, command: Command) -> StepResult:
    """Like ``step()`` but raises the typed ``PoolError`` on rejection."""
    result = step(ledger, command)
    if result.accepted:
        return result
    assert result.rejection is not None
    raise error_for_kind(result.rejection, result.message or "")
