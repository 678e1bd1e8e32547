"""
Wire schema v0 (legacy): every scalar and every record travels inside a
``Versioned(version, t)`` envelope, as the legacy binary protocol did.

    TimedDataV0 { initial_minimum_balance: Versioned[int], cliff_time: Versioned[int], ... }
    TimingV0    = Versioned[UntimedV0 | TimedV0(Versioned[TimedDataV0])]

The only envelope version ever emitted is `ENVELOPE_VERSION` (1). Converters
reject anything else.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")

ENVELOPE_VERSION = 1


@dataclass(frozen=True)
class Versioned(Generic[T]):
    t: T
    version: int = ENVELOPE_VERSION


@dataclass(frozen=True)
class TimedDataV0:
    initial_minimum_balance: Versioned[int]
    cliff_time: Versioned[int]
    cliff_amount: Versioned[int]
    vesting_period: Versioned[int]
    vesting_increment: Versioned[int]


@dataclass(frozen=True)
class UntimedV0:
    pass


@dataclass(frozen=True)
class TimedV0:
    data: Versioned[TimedDataV0]


TimingV0 = Versioned[Union[UntimedV0, TimedV0]]
