# Copyright
# SPDX-License-Identifier: Apache-2.0
"""
roinput.chunked
===============

Ordered hash-oracle input builder ("chunked random-oracle input").

A builder records two kinds of atoms, strictly in append order:

- ``FieldAtom``:  a full field element consumed whole by the hash.
- ``PackedAtom``: a value committed with an explicit bit width smaller
  than a full field element.

Encoders depend only on the narrow ``ROInputSink`` protocol
(``append_field`` / ``append_packed``). ``ChunkedROInput`` is the concrete
builder; it can also fold its atoms into the field elements that the sponge
absorbs (``to_fields``).

Packing rule
------------
Field atoms come first, in order. Packed atoms are then folded left to right:

    acc = acc * 2**bits + value

as long as the running width stays below ``MODULUS_BIT_SIZE`` (255 for
Pallas), i.e. at most 254 bits per element. When the next value would reach
255 bits, the current accumulator is emitted and a new one starts with that
value. A non-empty trailing accumulator is emitted last.

Example
-------
>>> ro = ChunkedROInput().append_field(7).append_bool(True).append_u32(5)
>>> len(ro)
3
>>> [int(f) for f in ro.to_fields()]
[7, 4294967301]
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Protocol, Tuple, Union, runtime_checkable

from .field import MODULUS_BIT_SIZE, Fp

# Largest width a single packed element may carry.
MAX_PACKED_BITS = MODULUS_BIT_SIZE - 1

Scalar = Union[int, Fp]


@dataclass(frozen=True)
class FieldAtom:
    value: Fp


@dataclass(frozen=True)
class PackedAtom:
    value: Fp
    bits: int


Atom = Union[FieldAtom, PackedAtom]


@runtime_checkable
class ROInputSink(Protocol):
    """The two operations an encoder is allowed to perform on an accumulator."""

    def append_field(self, value: Scalar) -> "ROInputSink": ...

    def append_packed(self, value: Scalar, bits: int) -> "ROInputSink": ...


@runtime_checkable
class ToChunkedROInput(Protocol):
    def to_chunked_roinput(self) -> "ChunkedROInput": ...


def _as_fp(value: Scalar) -> Fp:
    if isinstance(value, Fp):
        return value
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected int or Fp, got {type(value).__name__}")
    return Fp.from_int(value)


class ChunkedROInput:
    """
    Mutable, chainable atom builder. Owned by a single encoding call.

    Equality compares the atom sequences, so two builders that received the
    same atoms in the same order are interchangeable as hash inputs.
    """

    __slots__ = ("_atoms",)

    def __init__(self, atoms: Iterable[Atom] = ()) -> None:
        self._atoms: List[Atom] = list(atoms)

    # --- appending --------------------------------------------------------

    def append_field(self, value: Scalar) -> "ChunkedROInput":
        self._atoms.append(FieldAtom(_as_fp(value)))
        return self

    def append_packed(self, value: Scalar, bits: int) -> "ChunkedROInput":
        if isinstance(bits, bool) or not isinstance(bits, int):
            raise TypeError("bits must be an int")
        if not 1 <= bits <= MAX_PACKED_BITS:
            raise ValueError(f"bits must be in [1, {MAX_PACKED_BITS}], got {bits}")
        f = _as_fp(value)
        if f.n.bit_length() > bits:
            raise ValueError(f"value does not fit in {bits} bits")
        self._atoms.append(PackedAtom(f, bits))
        return self

    def append_bool(self, value: bool) -> "ChunkedROInput":
        return self.append_packed(1 if value else 0, 1)

    def append_u32(self, value: int) -> "ChunkedROInput":
        if not 0 <= value <= 0xFFFFFFFF:
            raise ValueError("append_u32: value out of range")
        return self.append_packed(value, 32)

    def append_u64(self, value: int) -> "ChunkedROInput":
        if not 0 <= value <= 0xFFFFFFFFFFFFFFFF:
            raise ValueError("append_u64: value out of range")
        return self.append_packed(value, 64)

    def append_chunked(self, value: ToChunkedROInput) -> "ChunkedROInput":
        """Splice in the atoms produced by ``value.to_chunked_roinput()``."""
        other = value.to_chunked_roinput()
        if not isinstance(other, ChunkedROInput):
            raise TypeError("to_chunked_roinput() must return a ChunkedROInput")
        self._atoms.extend(other._atoms)
        return self

    # --- views ------------------------------------------------------------

    @property
    def atoms(self) -> Tuple[Atom, ...]:
        return tuple(self._atoms)

    @property
    def fields(self) -> Tuple[Fp, ...]:
        return tuple(a.value for a in self._atoms if isinstance(a, FieldAtom))

    @property
    def packed(self) -> Tuple[Tuple[Fp, int], ...]:
        return tuple((a.value, a.bits) for a in self._atoms if isinstance(a, PackedAtom))

    def to_fields(self) -> List[Fp]:
        """Fold the atoms into the field elements absorbed by the sponge."""
        out = list(self.fields)
        acc = 0
        acc_bits = 0
        for value, bits in self.packed:
            nxt = acc_bits + bits
            if nxt < MODULUS_BIT_SIZE:
                acc = (acc << bits) | value.n
                acc_bits = nxt
            else:
                out.append(Fp(acc))
                acc, acc_bits = value.n, bits
        if acc_bits > 0:
            out.append(Fp(acc))
        return out

    def __len__(self) -> int:
        return len(self._atoms)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ChunkedROInput):
            return NotImplemented
        return self._atoms == other._atoms

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ChunkedROInput(atoms={self._atoms!r})"


__all__ = [
    "Atom",
    "ChunkedROInput",
    "FieldAtom",
    "MAX_PACKED_BITS",
    "PackedAtom",
    "ROInputSink",
    "ToChunkedROInput",
]
