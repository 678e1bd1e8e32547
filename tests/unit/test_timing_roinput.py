# SPDX-License-Identifier: Apache-2.0
"""
Timing hash-input layout

TimedData  -> 5 atoms: F, P32, F, P32, F
Timing     -> 1-bit tag + the schedule atoms (default schedule when untimed)
"""

from __future__ import annotations

import pytest

from ledger.types.numbers import Amount, BlockTime
from ledger.types.timing import (
    TIMED_DATA_ATOMS,
    TIMING_ATOMS,
    UNTIMED,
    TimedData,
    Timed,
    Timing,
    Untimed,
    encode_timing,
    timed_data_field_names,
)
from roinput import ChunkedROInput
from tests.unit import atoms_of


def test_default_schedule_values():
    d = TimedData.default()
    assert d.initial_minimum_balance == Amount(0)
    assert d.cliff_time == BlockTime(0)
    assert d.cliff_amount == Amount(0)
    assert d.vesting_period == BlockTime(1)
    assert d.vesting_increment == Amount(0)
    assert Timing.default() is UNTIMED


def test_timed_data_atoms(schedule):
    assert atoms_of(schedule.to_chunked_roinput()) == [
        ("field", 5),
        ("packed", 10, 32),
        ("field", 2),
        ("packed", 3, 32),
        ("field", 1),
    ]
    assert len(schedule.to_chunked_roinput()) == TIMED_DATA_ATOMS


def test_timed_atoms(schedule):
    assert atoms_of(Timed(schedule).to_chunked_roinput()) == [
        ("packed", 1, 1),
        ("field", 5),
        ("packed", 10, 32),
        ("field", 2),
        ("packed", 3, 32),
        ("field", 1),
    ]


def test_untimed_commits_to_default_schedule():
    assert atoms_of(Untimed().to_chunked_roinput()) == [
        ("packed", 0, 1),
        ("field", 0),
        ("packed", 0, 32),
        ("field", 0),
        ("packed", 1, 32),
        ("field", 0),
    ]


def test_untimed_and_timed_default_differ_only_in_tag():
    u = atoms_of(UNTIMED.to_chunked_roinput())
    t = atoms_of(Timed(TimedData.default()).to_chunked_roinput())
    assert len(u) == len(t) == TIMING_ATOMS
    assert u[0] == ("packed", 0, 1)
    assert t[0] == ("packed", 1, 1)
    assert u[1:] == t[1:]


def test_block_times_truncate_to_32_bits():
    data = TimedData(cliff_time=2**32 + 7, vesting_period=2**33 + 1)
    atoms = atoms_of(data.to_chunked_roinput())
    assert atoms[1] == ("packed", 7, 32)
    assert atoms[3] == ("packed", 1, 32)
    # Same commitment as the already-truncated values.
    assert data.to_chunked_roinput() == TimedData(cliff_time=7, vesting_period=1).to_chunked_roinput()


def test_amounts_are_full_width_chunks():
    top = 2**64 - 1
    data = TimedData(initial_minimum_balance=top, cliff_amount=top, vesting_increment=top)
    ro = data.to_chunked_roinput()
    assert [int(f) for f in ro.fields] == [top, top, top]
    assert atoms_of(Amount(top).to_chunked_roinput()) == [("field", top)]


def test_timing_to_fields(schedule):
    fields = [int(f) for f in Timed(schedule).to_chunked_roinput().to_fields()]
    assert fields == [5, 2, 1, (1 << 64) | (10 << 32) | 3]


def test_encode_into_existing_sink_appends(schedule):
    ro = ChunkedROInput().append_field(42)
    encode_timing(Timed(schedule), ro)
    assert len(ro) == 1 + TIMING_ATOMS
    assert atoms_of(ro)[0] == ("field", 42)


def test_encode_rejects_foreign_timing_subclass():
    class Other(Timing):
        TAG = 2

        def schedule(self) -> TimedData:
            return TimedData.default()

    other = Other()
    with pytest.raises(TypeError):
        encode_timing(other, ChunkedROInput())


def test_timing_base_is_abstract():
    with pytest.raises(TypeError):
        Timing()  # type: ignore[abstract]

    class Partial(Timing):
        TAG = 3

    with pytest.raises(TypeError):
        Partial()  # type: ignore[abstract]


def test_timed_requires_schedule():
    with pytest.raises(TypeError):
        Timed({"cliff_time": 1})  # type: ignore[arg-type]


def test_scalar_ranges_enforced():
    with pytest.raises(ValueError):
        TimedData(initial_minimum_balance=2**64)
    with pytest.raises(ValueError):
        TimedData(cliff_time=-1)
    with pytest.raises(TypeError):
        TimedData(cliff_amount="1")  # type: ignore[arg-type]


def test_variant_helpers(schedule):
    assert not UNTIMED.is_timed
    assert Timed(schedule).is_timed
    assert UNTIMED.schedule() == TimedData.default()
    assert Timed(schedule).schedule() is schedule
    assert Untimed() == UNTIMED


def test_field_enumeration_matches_graphql_shape():
    assert timed_data_field_names() == (
        "initial_minimum_balance",
        "cliff_time",
        "cliff_amount",
        "vesting_period",
        "vesting_increment",
    )
