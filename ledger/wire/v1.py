"""
Wire schema v1 (current): flat records of plain unsigned integers.

    TimedDataV1 { initial_minimum_balance, cliff_time, cliff_amount,
                  vesting_period, vesting_increment }
    TimingV1    = UntimedV1 | TimedV1(TimedDataV1)

Field order matches the hash-input order. Conversion to
and from the domain model lives in `ledger.wire.convert`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class TimedDataV1:
    initial_minimum_balance: int
    cliff_time: int
    cliff_amount: int
    vesting_period: int
    vesting_increment: int


@dataclass(frozen=True)
class UntimedV1:
    pass


@dataclass(frozen=True)
class TimedV1:
    data: TimedDataV1


TimingV1 = Union[UntimedV1, TimedV1]
