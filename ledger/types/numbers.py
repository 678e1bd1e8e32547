"""
Unsigned 64-bit account scalars.

`Amount` and `BlockTime` are thin immutable wrappers around ints in
``[0, 2**64)``. They exist so that the hash-input layout of each field is
attached to its type rather than to every call site:

- an `Amount` contributes one full field element (chunk atom);
- a `BlockTime` is committed as a 32-bit packed value by the callers that
  need it (see `BlockTime.as_u32`), silently dropping the high bits.
"""

from __future__ import annotations

from dataclasses import dataclass

from roinput import ChunkedROInput

U64_MAX = 0xFFFFFFFFFFFFFFFF
U32_MASK = 0xFFFFFFFF


def _check_u64(value: int, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if not 0 <= value <= U64_MAX:
        raise ValueError(f"{name} must be in [0, 2**64), got {value}")


@dataclass(frozen=True, order=True)
class Amount:
    value: int = 0

    def __post_init__(self) -> None:
        _check_u64(self.value, "Amount")

    def __int__(self) -> int:
        return self.value

    def to_chunked_roinput(self) -> ChunkedROInput:
        return ChunkedROInput().append_field(self.value)


@dataclass(frozen=True, order=True)
class BlockTime:
    value: int = 0

    def __post_init__(self) -> None:
        _check_u64(self.value, "BlockTime")

    def __int__(self) -> int:
        return self.value

    def as_u32(self) -> int:
        """Low 32 bits. Values above 2**32 alias; the account hash relies on it."""
        return self.value & U32_MASK


def as_amount(x: "Amount | int") -> Amount:
    return x if isinstance(x, Amount) else Amount(x)


def as_block_time(x: "BlockTime | int") -> BlockTime:
    return x if isinstance(x, BlockTime) else BlockTime(x)
