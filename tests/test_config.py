# [TESTER] v1

from __future__ import annotations

import pytest

from pairpool.config import ENV_FEE_DENOMINATOR, ENV_FEE_NUMERATOR, PoolConfig


def test_default_is_thirty_bps() -> None:
    cfg = PoolConfig()
    assert (cfg.fee_numerator, cfg.fee_denominator) == (997, 1000)
    assert cfg.fee_bps == 30


def test_rejects_invalid_fee() -> None:
    with pytest.raises(ValueError):
        PoolConfig(fee_numerator=0)
    with pytest.raises(ValueError):
        PoolConfig(fee_numerator=1001, fee_denominator=1000)
    with pytest.raises(TypeError):
        PoolConfig(fee_numerator=True)


def test_from_env_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(ENV_FEE_NUMERATOR, raising=False)
    monkeypatch.delenv(ENV_FEE_DENOMINATOR, raising=False)
    assert PoolConfig.from_env() == PoolConfig()


def test_from_env_reads_fee(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(ENV_FEE_NUMERATOR, "9975")
    monkeypatch.setenv(ENV_FEE_DENOMINATOR, "10000")
    cfg = PoolConfig.from_env()
    assert (cfg.fee_numerator, cfg.fee_denominator, cfg.fee_bps) == (9975, 10000, 25)


def test_from_env_falls_back_and_clamps(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(ENV_FEE_NUMERATOR, "not-a-number")
    monkeypatch.setenv(ENV_FEE_DENOMINATOR, " ")
    assert PoolConfig.from_env() == PoolConfig()

    monkeypatch.setenv(ENV_FEE_NUMERATOR, "5000")
    monkeypatch.setenv(ENV_FEE_DENOMINATOR, "1000")
    assert PoolConfig.from_env() == PoolConfig(fee_numerator=1000, fee_denominator=1000)

    monkeypatch.setenv(ENV_FEE_NUMERATOR, "0")
    assert PoolConfig.from_env().fee_numerator == 1
