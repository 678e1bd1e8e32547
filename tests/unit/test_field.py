# SPDX-License-Identifier: Apache-2.0
"""Pallas base-field helpers used by the hash-input builder."""

from __future__ import annotations

import pytest

from roinput.field import FP_BYTE_LEN, MODULUS_BIT_SIZE, P, Fp, is_canonical_bytes


def test_modulus_shape():
    assert MODULUS_BIT_SIZE == 255
    assert P == 2**254 + 45560315531419706090280762371685220353


def test_read_is_little_endian():
    buf = bytes([0x4D, 0x49, 0x4E, 0x41]) + bytes(28)
    assert int(Fp.read(buf)) == 0x414E494D


def test_read_rejects_wrong_length_and_non_canonical():
    with pytest.raises(ValueError):
        Fp.read(bytes(31))
    with pytest.raises(ValueError):
        Fp.read(P.to_bytes(FP_BYTE_LEN, "little"))
    assert not is_canonical_bytes(P.to_bytes(FP_BYTE_LEN, "little"))
    assert is_canonical_bytes((P - 1).to_bytes(FP_BYTE_LEN, "little"))


def test_roundtrip_bytes():
    x = Fp.from_int(123456789)
    assert Fp.read(x.to_bytes()) == x


def test_arithmetic_reduces():
    assert Fp.from_int(P + 3) == 3
    assert Fp(P - 1) + 2 == 1
    assert Fp(2) * Fp(3) == 6
    assert Fp(2) ** 10 == 1024


def test_constructor_requires_canonical_value():
    with pytest.raises(ValueError):
        Fp(P)
    with pytest.raises(ValueError):
        Fp(-1)
