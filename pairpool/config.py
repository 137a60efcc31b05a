"""
Pool configuration.

`PoolConfig` is fixed at pool creation. The defaults give the 0.3% fee
(997/1000) applied to every swap input.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from .kernels.python.cpmm_swap import FEE_DENOMINATOR, FEE_NUMERATOR


ENV_FEE_NUMERATOR = "PAIRPOOL_FEE_NUMERATOR"
ENV_FEE_DENOMINATOR = "PAIRPOOL_FEE_DENOMINATOR"

MAX_FEE_DENOMINATOR = 1_000_000


def _env_int(name: str, default: int, *, lo: int, hi: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return int(default)
    try:
        v = int(raw.strip())
    except ValueError:
        return int(default)
    if v < lo:
        return int(lo)
    if v > hi:
        return int(hi)
    return int(v)


@dataclass(frozen=True)
class PoolConfig:
    """Fee applied to swap inputs, as `fee_numerator / fee_denominator` kept by the trader."""

    fee_numerator: int = FEE_NUMERATOR
    fee_denominator: int = FEE_DENOMINATOR

    def __post_init__(self) -> None:
        for name, v in (
            ("fee_numerator", self.fee_numerator),
            ("fee_denominator", self.fee_denominator),
        ):
            if not isinstance(v, int) or isinstance(v, bool):
                raise TypeError(f"{name} must be an int")
        if not (0 < self.fee_denominator <= MAX_FEE_DENOMINATOR):
            raise ValueError(f"fee_denominator must be in (0, {MAX_FEE_DENOMINATOR}]: {self.fee_denominator}")
        if not (0 < self.fee_numerator <= self.fee_denominator):
            raise ValueError(
                f"fee_numerator must be in (0, fee_denominator]: {self.fee_numerator}/{self.fee_denominator}"
            )

    @property
    def fee_bps(self) -> int:
        """Fee charged, rounded down to basis points (30 for the default)."""
        return ((self.fee_denominator - self.fee_numerator) * 10_000) // self.fee_denominator

    @classmethod
    def from_env(cls) -> "PoolConfig":
        """
        Load the fee from `PAIRPOOL_FEE_NUMERATOR` / `PAIRPOOL_FEE_DENOMINATOR`.

        Missing or unparsable values fall back to the defaults; out-of-range
        values are clamped.
        """
        denominator = _env_int(ENV_FEE_DENOMINATOR, FEE_DENOMINATOR, lo=1, hi=MAX_FEE_DENOMINATOR)
        numerator = _env_int(ENV_FEE_NUMERATOR, FEE_NUMERATOR, lo=1, hi=denominator)
        return cls(fee_numerator=numerator, fee_denominator=denominator)


DEFAULT_CONFIG = PoolConfig()
