"""
Account token symbol.

Storage is a fixed 32-byte buffer, but only the first `MAX_LENGTH` (6)
bytes are logical content. The hash input commits to exactly those bytes:
they are copied into a fresh zeroed 32-byte buffer, read as a field element
(little-endian, like every other field read on the hashing side) and
appended as one packed atom of `NUM_BITS` (48) bits. Anything stored at
index >= 6 never reaches the commitment.

A 6-byte value is always far below the field modulus, so the read cannot
fail for any buffer this type accepts.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from roinput import ChunkedROInput, Fp, ROInputSink

from ..utils.bytes import BytesLike, expect_len, to_hex, zero_pad

TOKEN_SYMBOL_BYTES = 32


@dataclass(frozen=True)
class TokenSymbol:
    data: bytes = bytes(TOKEN_SYMBOL_BYTES)

    MAX_LENGTH: ClassVar[int] = 6
    NUM_BITS: ClassVar[int] = 8 * 6

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", expect_len(self.data, TOKEN_SYMBOL_BYTES, name="TokenSymbol.data"))

    @classmethod
    def max_length(cls) -> int:
        return cls.MAX_LENGTH

    @classmethod
    def num_bits(cls) -> int:
        return cls.NUM_BITS

    @classmethod
    def from_str(cls, text: str) -> "TokenSymbol":
        """Build a symbol from UTF-8 text of at most `MAX_LENGTH` bytes."""
        raw = text.encode("utf-8")
        if len(raw) > cls.MAX_LENGTH:
            raise ValueError(f"token symbol must be at most {cls.MAX_LENGTH} bytes, got {len(raw)}")
        return cls(zero_pad(raw, TOKEN_SYMBOL_BYTES))

    @classmethod
    def from_bytes(cls, data: BytesLike) -> "TokenSymbol":
        return cls(bytes(data))

    def prefix(self) -> bytes:
        """The committed bytes."""
        return self.data[: self.MAX_LENGTH]

    def as_str(self) -> str:
        return self.prefix().rstrip(b"\x00").decode("utf-8", errors="replace")

    def has_clean_tail(self) -> bool:
        """True when every byte past the logical prefix is zero."""
        return not any(self.data[self.MAX_LENGTH :])

    def to_field(self) -> Fp:
        return Fp.read(zero_pad(self.prefix(), TOKEN_SYMBOL_BYTES))

    def to_chunked_roinput(self) -> ChunkedROInput:
        ro = ChunkedROInput()
        encode_token_symbol(self, ro)
        return ro

    def __bytes__(self) -> bytes:
        return self.data

    def __repr__(self) -> str:
        return f"TokenSymbol({to_hex(self.data)})"


def encode_token_symbol(symbol: TokenSymbol, sink: ROInputSink) -> None:
    """Append the single 48-bit packed atom for ``symbol``."""
    sink.append_packed(symbol.to_field(), TokenSymbol.NUM_BITS)


__all__ = ["TOKEN_SYMBOL_BYTES", "TokenSymbol", "encode_token_symbol"]
