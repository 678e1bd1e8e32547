# SPDX-License-Identifier: Apache-2.0
"""
tests.unit
==========

Small shared helpers for unit-test modules:

    from tests.unit import read_json_fixture, atoms_of

Paths
-----
- Repository root is inferred relative to this file.
- Fixtures live under `tests/fixtures/`.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, Tuple

from roinput import ChunkedROInput, FieldAtom, PackedAtom

# tests/unit/__init__.py -> tests -> <root>
ROOT: Path = Path(__file__).resolve().parents[2]
FIXTURES: Path = ROOT / "tests" / "fixtures"

__all__ = [
    "ROOT",
    "FIXTURES",
    "atoms_of",
    "read_json_fixture",
]


def read_json_fixture(relpath: str) -> Any:
    """Load a JSON fixture from `tests/fixtures/<relpath>`."""
    with open((FIXTURES / relpath).resolve(), "r", encoding="utf-8") as f:
        return json.load(f)


def atoms_of(ro: ChunkedROInput) -> List[Tuple]:
    """
    Flatten a builder into comparable tuples:
      ("field", value) / ("packed", value, bits)
    """
    out: List[Tuple] = []
    for a in ro.atoms:
        if isinstance(a, FieldAtom):
            out.append(("field", int(a.value)))
        elif isinstance(a, PackedAtom):
            out.append(("packed", int(a.value), a.bits))
    return out
