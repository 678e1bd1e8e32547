"""
Domain model ⇄ wire schema converters
=====================================

One explicit function per direction and per schema version; no structural
"it happens to line up" conversions. Every converter is lossless:

    timed_data_from_v1(timed_data_to_v1(x)) == x
    timed_data_to_v1(timed_data_from_v1(y)) == y

and likewise for v0 and for `Timing`. Wire records carry plain ints; the
domain constructors re-validate the unsigned 64-bit range, so an
out-of-range wire value surfaces as `WireFormatError`.
"""

from __future__ import annotations

from typing import Any, Callable, TypeVar

from ..errors import WireFormatError
from ..types.numbers import Amount, BlockTime
from ..types.timing import UNTIMED, TimedData, Timed, Timing, Untimed
from .v0 import ENVELOPE_VERSION, TimedDataV0, TimedV0, TimingV0, UntimedV0, Versioned
from .v1 import TimedDataV1, TimedV1, TimingV1, UntimedV1

R = TypeVar("R")


def _build(ctor: Callable[..., R], *args: Any, **kwargs: Any) -> R:
    try:
        return ctor(*args, **kwargs)
    except (TypeError, ValueError) as e:
        raise WireFormatError(str(e), record=getattr(ctor, "__name__", "?")) from e


# ---------------------------------------------------------------------------
# v1
# ---------------------------------------------------------------------------


def timed_data_from_v1(rec: TimedDataV1) -> TimedData:
    return _build(
        TimedData,
        initial_minimum_balance=_build(Amount, rec.initial_minimum_balance),
        cliff_time=_build(BlockTime, rec.cliff_time),
        cliff_amount=_build(Amount, rec.cliff_amount),
        vesting_period=_build(BlockTime, rec.vesting_period),
        vesting_increment=_build(Amount, rec.vesting_increment),
    )


def timed_data_to_v1(data: TimedData) -> TimedDataV1:
    return TimedDataV1(
        initial_minimum_balance=data.initial_minimum_balance.value,
        cliff_time=data.cliff_time.value,
        cliff_amount=data.cliff_amount.value,
        vesting_period=data.vesting_period.value,
        vesting_increment=data.vesting_increment.value,
    )


def timing_from_v1(rec: TimingV1) -> Timing:
    if isinstance(rec, UntimedV1):
        return UNTIMED
    if isinstance(rec, TimedV1):
        return Timed(timed_data_from_v1(rec.data))
    raise WireFormatError("unknown v1 timing variant", got=type(rec).__name__)


def timing_to_v1(timing: Timing) -> TimingV1:
    if isinstance(timing, Timed):
        return TimedV1(timed_data_to_v1(timing.data))
    if isinstance(timing, Untimed):
        return UntimedV1()
    raise TypeError(f"expected Untimed or Timed, got {type(timing).__name__}")


# ---------------------------------------------------------------------------
# v0
# ---------------------------------------------------------------------------


def _open(env: Any, what: str) -> Any:
    if not isinstance(env, Versioned):
        raise WireFormatError(f"{what}: expected a versioned envelope", got=type(env).__name__)
    if env.version != ENVELOPE_VERSION:
        raise WireFormatError(
            f"{what}: unsupported envelope version", expected=ENVELOPE_VERSION, got=env.version
        )
    return env.t


def timed_data_from_v0(rec: Versioned[TimedDataV0]) -> TimedData:
    inner = _open(rec, "TimedData")
    if not isinstance(inner, TimedDataV0):
        raise WireFormatError("TimedData: unexpected payload", got=type(inner).__name__)
    return _build(
        TimedData,
        initial_minimum_balance=_build(Amount, _open(inner.initial_minimum_balance, "initial_minimum_balance")),
        cliff_time=_build(BlockTime, _open(inner.cliff_time, "cliff_time")),
        cliff_amount=_build(Amount, _open(inner.cliff_amount, "cliff_amount")),
        vesting_period=_build(BlockTime, _open(inner.vesting_period, "vesting_period")),
        vesting_increment=_build(Amount, _open(inner.vesting_increment, "vesting_increment")),
    )


def timed_data_to_v0(data: TimedData) -> Versioned[TimedDataV0]:
    return Versioned(
        TimedDataV0(
            initial_minimum_balance=Versioned(data.initial_minimum_balance.value),
            cliff_time=Versioned(data.cliff_time.value),
            cliff_amount=Versioned(data.cliff_amount.value),
            vesting_period=Versioned(data.vesting_period.value),
            vesting_increment=Versioned(data.vesting_increment.value),
        )
    )


def timing_from_v0(rec: TimingV0) -> Timing:
    inner = _open(rec, "Timing")
    if isinstance(inner, UntimedV0):
        return UNTIMED
    if isinstance(inner, TimedV0):
        return Timed(timed_data_from_v0(inner.data))
    raise WireFormatError("unknown v0 timing variant", got=type(inner).__name__)


def timing_to_v0(timing: Timing) -> TimingV0:
    if isinstance(timing, Timed):
        return Versioned(TimedV0(timed_data_to_v0(timing.data)))
    if isinstance(timing, Untimed):
        return Versioned(UntimedV0())
    raise TypeError(f"expected Untimed or Timed, got {type(timing).__name__}")


__all__ = [
    "timed_data_from_v0",
    "timed_data_from_v1",
    "timed_data_to_v0",
    "timed_data_to_v1",
    "timing_from_v0",
    "timing_from_v1",
    "timing_to_v0",
    "timing_to_v1",
]
