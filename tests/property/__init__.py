# -*- coding: utf-8 -*-
"""
tests.property package bootstrap.

Shared configuration and strategies for property-based tests (Hypothesis).

What this does on import:
- Registers named Hypothesis profiles (dev/ci/fast/stress).
- Selects the active profile using HYPOTHESIS_PROFILE, otherwise "ci" on CI
  (CI env var present/truthy) and "dev" locally.
- Exposes strategies for the account types (u64 scalars, schedules, timings,
  token-symbol buffers).

Usage in tests:
    from tests.property import given, timings

    @given(timings())
    def test_something(t):
        ...

Environment knobs:
- HYPOTHESIS_PROFILE=dev|ci|fast|stress
- CI=true (auto-pick the 'ci' profile if HYPOTHESIS_PROFILE not set)
"""
from __future__ import annotations

import os
from typing import Final, Tuple

from hypothesis import HealthCheck, Verbosity, given, settings
from hypothesis import strategies as st

from ledger.types.timing import UNTIMED, TimedData, Timed
from ledger.types.token_symbol import TOKEN_SYMBOL_BYTES, TokenSymbol
from ledger.wire.v0 import TimedDataV0, Versioned

# ---- profile registry --------------------------------------------------------


def _hc(*items: HealthCheck) -> Tuple[HealthCheck, ...]:
    return items


settings.register_profile(
    "dev",
    settings(
        max_examples=100,
        deadline=None,
        suppress_health_check=_hc(HealthCheck.too_slow),
        verbosity=Verbosity.normal,
        derandomize=False,
    ),
)

settings.register_profile(
    "ci",
    settings(
        max_examples=300,
        deadline=None,
        suppress_health_check=_hc(HealthCheck.too_slow),
        verbosity=Verbosity.verbose,
        derandomize=True,
    ),
)

settings.register_profile(
    "fast",
    settings(max_examples=25, deadline=None, verbosity=Verbosity.normal),
)

settings.register_profile(
    "stress",
    settings(
        max_examples=2000,
        deadline=None,
        suppress_health_check=_hc(HealthCheck.too_slow, HealthCheck.data_too_large),
        derandomize=True,
    ),
)


def _env_truthy(name: str) -> bool:
    v = os.getenv(name)
    return (v or "").lower() not in ("", "0", "false", "no", "off")


_active: Final[str] = os.getenv("HYPOTHESIS_PROFILE") or (
    "ci" if _env_truthy("CI") else "dev"
)
settings.load_profile(_active)


def active_profile() -> str:
    return _active


# ---- domain strategies -------------------------------------------------------

U64_MAX = 2**64 - 1


def u64s():
    """Unsigned 64-bit ints, biased toward the 32-bit truncation boundary."""
    return st.one_of(
        st.integers(min_value=0, max_value=U64_MAX),
        st.integers(min_value=2**32 - 2, max_value=2**32 + 2),
        st.sampled_from([0, 1, U64_MAX]),
    )


def timed_data():
    return st.builds(
        TimedData,
        initial_minimum_balance=u64s(),
        cliff_time=u64s(),
        cliff_amount=u64s(),
        vesting_period=u64s(),
        vesting_increment=u64s(),
    )


def timings():
    return st.one_of(st.just(UNTIMED), timed_data().map(Timed))


def timed_data_v0_records():
    """Legacy wire records built directly from enveloped u64 scalars."""
    scalar = u64s().map(Versioned)
    return st.builds(
        TimedDataV0,
        initial_minimum_balance=scalar,
        cliff_time=scalar,
        cliff_amount=scalar,
        vesting_period=scalar,
        vesting_increment=scalar,
    ).map(Versioned)


def token_symbol_buffers():
    return st.binary(min_size=TOKEN_SYMBOL_BYTES, max_size=TOKEN_SYMBOL_BYTES)


def token_symbols():
    return token_symbol_buffers().map(TokenSymbol)


__all__ = [
    "st",
    "given",
    "active_profile",
    "timed_data",
    "timed_data_v0_records",
    "timings",
    "token_symbol_buffers",
    "token_symbols",
    "u64s",
]
