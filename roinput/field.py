# Copyright
# SPDX-License-Identifier: Apache-2.0
"""
Pallas base field (Pasta curves): minimal, pure-Python helpers.

The hash input builder commits to elements of this field, so this module only
carries what the builder needs: a tiny immutable `Fp` class, the canonical
modulus, and the 32-byte *little-endian* reading convention used by the
hashing library (the same convention arkworks' `FromBytes::read` follows).

It is **not** constant-time and is not meant for secret-bearing computations.

Features:
- Canonical modulus `P` and its bit size.
- 32-byte little-endian (de)serialization with canonicality checks.
- Basic ring ops: +, *, pow, eq, int().
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

# Pallas base field prime: 2^254 + 45560315531419706090280762371685220353
P: int = 28948022309329048855892746252171976963363056481941560715954676764349967630337
FP_BYTE_LEN = 32
MODULUS_BIT_SIZE = P.bit_length()  # 255


def _to_int(x: Union[int, "Fp"]) -> int:
    return x.n if isinstance(x, Fp) else int(x)


def _red(x: int) -> int:
    """Reduce to canonical representative in [0, P)."""
    return x % P


@dataclass(frozen=True)
class Fp:
    """
    Small immutable wrapper for elements of F_p (Pallas base field).

        a = Fp.from_int(5)
        b = a * 7 + 1
    """

    n: int  # canonical representative in [0, P)

    def __post_init__(self) -> None:
        if not isinstance(self.n, int) or isinstance(self.n, bool):
            raise TypeError("Fp.n must be an int")
        if not 0 <= self.n < P:
            raise ValueError("Fp.n must be a canonical representative in [0, P)")

    # --- Constructors -----------------------------------------------------

    @staticmethod
    def from_int(x: int) -> "Fp":
        return Fp(_red(int(x)))

    @staticmethod
    def read(b: bytes) -> "Fp":
        """
        Read exactly 32 little-endian bytes. Values >= P are rejected rather
        than reduced, mirroring the hashing library's reader.
        """
        if len(b) != FP_BYTE_LEN:
            raise ValueError(f"Fp.read: expected {FP_BYTE_LEN} bytes, got {len(b)}")
        x = int.from_bytes(bytes(b), "little")
        if x >= P:
            raise ValueError("Fp.read: value is not a canonical field element")
        return Fp(x)

    # --- Serialization ----------------------------------------------------

    def to_bytes(self) -> bytes:
        return self.n.to_bytes(FP_BYTE_LEN, "little")

    def to_hex(self) -> str:
        return "0x" + format(self.n, "064x")

    # --- Basic number protocol -------------------------------------------

    def __int__(self) -> int:
        return self.n

    def __bool__(self) -> bool:
        return self.n != 0

    def __repr__(self) -> str:
        return f"Fp({self.n})"

    def __hash__(self) -> int:
        return hash(self.n)

    # --- Arithmetic -------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, (int, Fp)) or isinstance(other, bool):
            return False
        return self.n == _red(_to_int(other))

    def __add__(self, other: Union[int, "Fp"]) -> "Fp":
        return Fp(_red(self.n + _to_int(other)))

    def __radd__(self, other: Union[int, "Fp"]) -> "Fp":
        return self.__add__(other)

    def __mul__(self, other: Union[int, "Fp"]) -> "Fp":
        return Fp(_red(self.n * _to_int(other)))

    def __rmul__(self, other: Union[int, "Fp"]) -> "Fp":
        return self.__mul__(other)

    def __pow__(self, exponent: int, modulo=None) -> "Fp":
        if modulo is not None:
            raise ValueError("Fp.__pow__ does not support 3-arg pow")
        return Fp(pow(self.n, exponent, P))

    @staticmethod
    def zero() -> "Fp":
        return Fp(0)

    @staticmethod
    def one() -> "Fp":
        return Fp(1)


def is_canonical_bytes(b: bytes) -> bool:
    """Check if bytes represent a canonical Fp element (0 <= x < P) and length == 32."""
    if len(b) != FP_BYTE_LEN:
        return False
    return int.from_bytes(b, "little") < P


FP_ZERO = Fp.zero()
FP_ONE = Fp.one()
