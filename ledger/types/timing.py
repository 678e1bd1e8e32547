"""
ledger.types.timing
===================

Account timing: whether (and how) an account's balance is locked behind a
vesting schedule, typically for genesis allocations.

Model
-----
- `TimedData`: the vesting schedule (five unsigned 64-bit scalars).
- `Timing`:    a closed sum type with two variants, `Untimed` and
  `Timed(TimedData)`. The default is `Untimed`.

Hash input layout
-----------------
`TimedData` always contributes five atoms, in this order::

    field(initial_minimum_balance)
    packed(cliff_time  mod 2**32, 32)
    field(cliff_amount)
    packed(vesting_period mod 2**32, 32)
    field(vesting_increment)

`Timing` prepends one 1-bit tag (0 = Untimed, 1 = Timed). An `Untimed`
account still commits to the *default* schedule so both variants have the
same width. Both the truncation to 32 bits and the default-schedule padding
must match the account hash circuit exactly; neither is a bug to fix here.

GraphQL ingestion
-----------------
`TimedData.from_graphql_json` is strict and raises `GraphQLParseError`.
`Timing.from_graphql_json` is all-or-nothing: if any of the five fields is
missing or malformed the account is `Untimed`.
"""

from __future__ import annotations

import abc
from dataclasses import dataclass, field, fields
from typing import Any, ClassVar, Tuple

from roinput import ChunkedROInput, ROInputSink

from ..encoding.graphql import parse_u64_fields
from ..errors import GraphQLParseError
from ..logging import get_logger
from .numbers import Amount, BlockTime, as_amount, as_block_time

log = get_logger(__name__)

# (graphql key, attribute) in hash-input order.
GRAPHQL_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("initialMinimumBalance", "initial_minimum_balance"),
    ("cliffTime", "cliff_time"),
    ("cliffAmount", "cliff_amount"),
    ("vestingPeriod", "vesting_period"),
    ("vestingIncrement", "vesting_increment"),
)

TIMED_DATA_ATOMS = 5
TIMING_ATOMS = TIMED_DATA_ATOMS + 1


@dataclass(frozen=True)
class TimedData:
    """Vesting schedule carried by `Timed` accounts."""

    initial_minimum_balance: Amount = field(default_factory=Amount)
    cliff_time: BlockTime = field(default_factory=BlockTime)
    cliff_amount: Amount = field(default_factory=Amount)
    # A zero-length period is degenerate downstream, hence the default of 1.
    vesting_period: BlockTime = field(default_factory=lambda: BlockTime(1))
    vesting_increment: Amount = field(default_factory=Amount)

    def __post_init__(self) -> None:
        object.__setattr__(self, "initial_minimum_balance", as_amount(self.initial_minimum_balance))
        object.__setattr__(self, "cliff_time", as_block_time(self.cliff_time))
        object.__setattr__(self, "cliff_amount", as_amount(self.cliff_amount))
        object.__setattr__(self, "vesting_period", as_block_time(self.vesting_period))
        object.__setattr__(self, "vesting_increment", as_amount(self.vesting_increment))

    @classmethod
    def default(cls) -> "TimedData":
        return cls()

    @classmethod
    def from_graphql_json(cls, doc: Any) -> "TimedData":
        """Decode a GraphQL timing document; raises `GraphQLParseError`."""
        return cls(**parse_u64_fields(doc, GRAPHQL_FIELDS))

    def to_graphql_json(self) -> dict:
        return {key: str(int(getattr(self, attr))) for key, attr in GRAPHQL_FIELDS}

    def to_chunked_roinput(self) -> ChunkedROInput:
        ro = ChunkedROInput()
        encode_timed_data(self, ro)
        return ro


def encode_timed_data(data: TimedData, sink: ROInputSink) -> None:
    """Append the five schedule atoms of ``data`` to ``sink``."""
    sink.append_field(data.initial_minimum_balance.value)
    sink.append_packed(data.cliff_time.as_u32(), 32)
    sink.append_field(data.cliff_amount.value)
    sink.append_packed(data.vesting_period.as_u32(), 32)
    sink.append_field(data.vesting_increment.value)


class Timing(abc.ABC):
    """
    Base of the `Untimed` / `Timed` sum type. Not instantiated directly.
    """

    TAG: ClassVar[int]

    @property
    def is_timed(self) -> bool:
        return isinstance(self, Timed)

    @abc.abstractmethod
    def schedule(self) -> TimedData:
        """The schedule committed to by the hash (the default one if untimed)."""

    @staticmethod
    def default() -> "Timing":
        return UNTIMED

    @staticmethod
    def from_graphql_json(doc: Any) -> "Timing":
        """Decode a GraphQL timing document; any parse failure means `Untimed`."""
        try:
            return Timed(TimedData.from_graphql_json(doc))
        except GraphQLParseError as e:
            log.debug(
                "timing document not fully parseable; treating account as untimed",
                extra={"reason": e.message, "field": e.field},
            )
            return UNTIMED

    def to_chunked_roinput(self) -> ChunkedROInput:
        ro = ChunkedROInput()
        encode_timing(self, ro)
        return ro


@dataclass(frozen=True)
class Untimed(Timing):
    """Account does not have any timing limitations."""

    TAG: ClassVar[int] = 0

    def schedule(self) -> TimedData:
        return TimedData.default()


@dataclass(frozen=True)
class Timed(Timing):
    """Account balance vests according to ``data``."""

    TAG: ClassVar[int] = 1

    data: TimedData = field(default_factory=TimedData)

    def __post_init__(self) -> None:
        if not isinstance(self.data, TimedData):
            raise TypeError("Timed.data must be TimedData")

    def schedule(self) -> TimedData:
        return self.data


UNTIMED = Untimed()


def encode_timing(timing: Timing, sink: ROInputSink) -> None:
    """Append the tag atom and the (default or actual) schedule atoms."""
    if isinstance(timing, Timed):
        sink.append_packed(Timed.TAG, 1)
        encode_timed_data(timing.data, sink)
    elif isinstance(timing, Untimed):
        sink.append_packed(Untimed.TAG, 1)
        encode_timed_data(TimedData.default(), sink)
    else:
        raise TypeError(f"expected Untimed or Timed, got {type(timing).__name__}")


def timing_from_graphql_json(doc: Any) -> Timing:
    return Timing.from_graphql_json(doc)


def timed_data_field_names() -> Tuple[str, ...]:
    return tuple(f.name for f in fields(TimedData))


__all__ = [
    "GRAPHQL_FIELDS",
    "TIMED_DATA_ATOMS",
    "TIMING_ATOMS",
    "TimedData",
    "Timed",
    "Timing",
    "UNTIMED",
    "Untimed",
    "encode_timed_data",
    "encode_timing",
    "timed_data_field_names",
    "timing_from_graphql_json",
]
