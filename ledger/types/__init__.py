"""
ledger.types
============

Canonical dataclasses for account-level values:

- numbers:       Amount, BlockTime (unsigned 64-bit scalars)
- timing:        TimedData, Timing (Untimed | Timed)
- token_symbol:  TokenSymbol (32-byte buffer, 6-byte logical prefix)

To keep import order flexible, this module exposes **lazy re-exports**:
attributes resolve on first access.

Example
-------
>>> from ledger.types import Timed, TimedData
>>> len(Timed(TimedData()).to_chunked_roinput())
6
"""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING

__all__ = [
    # submodules
    "numbers",
    "timing",
    "token_symbol",
    # common re-exported symbols
    "Amount",
    "BlockTime",
    "TimedData",
    "Timing",
    "Timed",
    "Untimed",
    "UNTIMED",
    "TokenSymbol",
]

_SUBMODULES = {
    "numbers": "ledger.types.numbers",
    "timing": "ledger.types.timing",
    "token_symbol": "ledger.types.token_symbol",
}

_SYMBOLS = {
    "Amount": ("ledger.types.numbers", "Amount"),
    "BlockTime": ("ledger.types.numbers", "BlockTime"),
    "TimedData": ("ledger.types.timing", "TimedData"),
    "Timing": ("ledger.types.timing", "Timing"),
    "Timed": ("ledger.types.timing", "Timed"),
    "Untimed": ("ledger.types.timing", "Untimed"),
    "UNTIMED": ("ledger.types.timing", "UNTIMED"),
    "TokenSymbol": ("ledger.types.token_symbol", "TokenSymbol"),
}


def __getattr__(name: str):
    if name in _SUBMODULES:
        return importlib.import_module(_SUBMODULES[name])
    target = _SYMBOLS.get(name)
    if target:
        mod = importlib.import_module(target[0])
        return getattr(mod, target[1])
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__():
    base = set(globals().keys())
    return sorted(base | set(_SUBMODULES.keys()) | set(_SYMBOLS.keys()))


if TYPE_CHECKING:
    from .numbers import Amount, BlockTime  # noqa: F401
    from .timing import UNTIMED, TimedData, Timed, Timing, Untimed  # noqa: F401
    from .token_symbol import TokenSymbol  # noqa: F401
