# roinput/__init__.py
"""
Hash-oracle input accumulator

This package owns the field arithmetic and the ordered atom builder that
account-level encoders feed. The sponge/permutation that consumes the packed
field elements lives outside this repo; here we only define *what* is
absorbed and in *which order*.

Modules
-------
- `roinput.field`    → Pallas base-field scalar `Fp` (little-endian reader)
- `roinput.chunked`  → `ChunkedROInput` builder, atoms, `ROInputSink` protocol

Usage
-----
>>> from roinput import ChunkedROInput
>>> ro = ChunkedROInput().append_field(1).append_packed(3, 2)
>>> len(ro.to_fields())
2
"""

from __future__ import annotations

from .chunked import (
    Atom,
    ChunkedROInput,
    FieldAtom,
    MAX_PACKED_BITS,
    PackedAtom,
    ROInputSink,
    ToChunkedROInput,
)
from .field import FP_BYTE_LEN, MODULUS_BIT_SIZE, P, Fp

__all__ = [
    "Atom",
    "ChunkedROInput",
    "FieldAtom",
    "FP_BYTE_LEN",
    "Fp",
    "MAX_PACKED_BITS",
    "MODULUS_BIT_SIZE",
    "P",
    "PackedAtom",
    "ROInputSink",
    "ToChunkedROInput",
]
