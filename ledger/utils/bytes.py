"""
ledger.utils.bytes
==================

Lightweight, dependency-free helpers around byte handling:

- Hex helpers: to_hex/from_hex, 0x-prefix management
- Bytes-like check: is_byteslike()
- Length guards: expect_len
- Fixed-width buffers: zero_pad

Examples
--------
>>> to_hex(b"\\x01\\x02")
'0x0102'
>>> from_hex('0xdeadbeef')
b'\\xde\\xad\\xbe\\xef'
>>> zero_pad(b"MINA", 8)
b'MINA\\x00\\x00\\x00\\x00'
"""

from __future__ import annotations

from typing import Union

BytesLike = Union[bytes, bytearray, memoryview]


def is_byteslike(x: object) -> bool:
    return isinstance(x, (bytes, bytearray, memoryview))


def strip0x(s: str) -> str:
    return s[2:] if s.startswith(("0x", "0X")) else s


def to_hex(data: BytesLike, *, prefix: bool = True) -> str:
    """Return lowercase hex string of data."""
    if not is_byteslike(data):
        raise TypeError("to_hex expects bytes-like")
    h = bytes(data).hex()
    return f"0x{h}" if prefix else h


def from_hex(h: str) -> bytes:
    """Parse hex string with or without 0x prefix; ignores surrounding whitespace."""
    if not isinstance(h, str):
        raise TypeError("from_hex expects str")
    h = strip0x(h.strip())
    if len(h) % 2 == 1:
        h = "0" + h
    try:
        return bytes.fromhex(h)
    except ValueError as e:
        raise ValueError(f"invalid hex string: {e}") from e


def expect_len(data: BytesLike, n: int, *, name: str = "bytes") -> bytes:
    """Return ``data`` as immutable bytes after validating exact length ``n``."""
    if not is_byteslike(data):
        raise TypeError(f"{name} must be bytes-like, got {type(data).__name__}")
    data_b = bytes(data)
    if len(data_b) != n:
        raise ValueError(f"{name} must be length {n}, got {len(data_b)}")
    return data_b


def zero_pad(data: BytesLike, n: int) -> bytes:
    """Right-pad ``data`` with zero bytes to exactly ``n`` bytes."""
    data_b = bytes(data)
    if len(data_b) > n:
        raise ValueError(f"cannot pad {len(data_b)} bytes into {n}")
    return data_b + bytes(n - len(data_b))


__all__ = ["BytesLike", "expect_len", "from_hex", "is_byteslike", "strip0x", "to_hex", "zero_pad"]
