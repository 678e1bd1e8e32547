"""
ledger.wire
===========

Historical wire schemas for account timing and their converters.

- v0.py:      legacy records, every value wrapped in a `Versioned` envelope
- v1.py:      current flat records
- convert.py: explicit domain ⇄ v0 / v1 converters (lossless both ways)
- codec.py:   plain-object shapes and canonical CBOR (cbor2)
"""

from __future__ import annotations

from .convert import (
    timed_data_from_v0,
    timed_data_from_v1,
    timed_data_to_v0,
    timed_data_to_v1,
    timing_from_v0,
    timing_from_v1,
    timing_to_v0,
    timing_to_v1,
)

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
