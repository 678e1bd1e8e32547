"""
ledger.wire.codec

Plain-object shapes and canonical CBOR for versioned timing records.

Object shapes
-------------
Variants are encoded as tagged lists, records as maps keyed by field name:

    v1:  ["Untimed"]
         ["Timed", {"initial_minimum_balance": 5, "cliff_time": 10, ...}]

    v0:  {"version": 1, "t": ["Timed", {"version": 1, "t": {
             "initial_minimum_balance": {"version": 1, "t": 5}, ...}}]}

CBOR
----
We use cbor2 with ``canonical=True`` so map keys are emitted in RFC 8949
deterministic order; equal records always produce identical bytes.

Public API
----------
- timing_to_obj(t, version) / timing_from_obj(obj, version)
- dumps_timing(t, version=None) -> bytes
- loads_timing(data, version=None) -> Timing

``version=None`` selects `ledger.config.load().wire_version`.
"""

from __future__ import annotations

from dataclasses import fields
from typing import Any, Dict, Mapping, Optional

import cbor2

from ..config import SUPPORTED_WIRE_VERSIONS, load as load_config
from ..errors import WireFormatError
from ..logging import get_logger
from ..types.timing import Timing
from . import convert
from .v0 import TimedDataV0, TimedV0, UntimedV0, Versioned
from .v1 import TimedDataV1, TimedV1, TimingV1, UntimedV1

log = get_logger(__name__)

_UNTIMED = "Untimed"
_TIMED = "Timed"

_RECORD_FIELDS = tuple(f.name for f in fields(TimedDataV1))


# ---------------------------------------------------------------------------
# shape helpers
# ---------------------------------------------------------------------------


def _record(obj: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(obj, Mapping):
        raise WireFormatError(f"{what}: expected a map", got=type(obj).__name__)
    missing = [k for k in _RECORD_FIELDS if k not in obj]
    extra = sorted(map(repr, set(obj) - set(_RECORD_FIELDS)))
    if missing or extra:
        raise WireFormatError(f"{what}: field mismatch", missing=missing, extra=extra)
    return obj


def _uint(v: Any, what: str) -> int:
    if isinstance(v, bool) or not isinstance(v, int):
        raise WireFormatError(f"{what}: expected an unsigned integer", got=type(v).__name__)
    return v


def _variant(obj: Any, what: str) -> tuple:
    if not isinstance(obj, (list, tuple)) or not obj or obj[0] not in (_UNTIMED, _TIMED):
        raise WireFormatError(f"{what}: expected ['Untimed'] or ['Timed', record]")
    expected_len = 1 if obj[0] == _UNTIMED else 2
    if len(obj) != expected_len:
        raise WireFormatError(f"{what}: wrong arity for {obj[0]}", got=len(obj))
    return tuple(obj)


def _envelope_to_obj(env: Versioned, inner: Any) -> Dict[str, Any]:
    return {"version": env.version, "t": inner}


def _envelope_from_obj(obj: Any, what: str) -> tuple:
    if not isinstance(obj, Mapping) or set(obj) != {"version", "t"}:
        raise WireFormatError(f"{what}: expected {{'version', 't'}} envelope")
    return _uint(obj["version"], f"{what}.version"), obj["t"]


# ---------------------------------------------------------------------------
# v1 objects
# ---------------------------------------------------------------------------


def _v1_to_obj(rec: TimingV1) -> list:
    if isinstance(rec, UntimedV1):
        return [_UNTIMED]
    return [_TIMED, {k: getattr(rec.data, k) for k in _RECORD_FIELDS}]


def _v1_from_obj(obj: Any) -> TimingV1:
    variant = _variant(obj, "TimingV1")
    if variant[0] == _UNTIMED:
        return UntimedV1()
    rec = _record(variant[1], "TimedDataV1")
    return TimedV1(TimedDataV1(**{k: _uint(rec[k], k) for k in _RECORD_FIELDS}))


# ---------------------------------------------------------------------------
# v0 objects
# ---------------------------------------------------------------------------


def _v0_to_obj(rec: Versioned) -> Dict[str, Any]:
    inner = rec.t
    if isinstance(inner, UntimedV0):
        return _envelope_to_obj(rec, [_UNTIMED])
    data_env = inner.data
    record = {}
    for k in _RECORD_FIELDS:
        scalar = getattr(data_env.t, k)
        record[k] = _envelope_to_obj(scalar, scalar.t)
    return _envelope_to_obj(rec, [_TIMED, _envelope_to_obj(data_env, record)])


def _v0_from_obj(obj: Any) -> Versioned:
    version, body = _envelope_from_obj(obj, "TimingV0")
    variant = _variant(body, "TimingV0")
    if variant[0] == _UNTIMED:
        return Versioned(UntimedV0(), version)
    data_version, record = _envelope_from_obj(variant[1], "TimedDataV0")
    rec = _record(record, "TimedDataV0")
    scalars = {}
    for k in _RECORD_FIELDS:
        v, t = _envelope_from_obj(rec[k], k)
        scalars[k] = Versioned(_uint(t, k), v)
    return Versioned(TimedV0(Versioned(TimedDataV0(**scalars), data_version)), version)


# ---------------------------------------------------------------------------
# public API
# ---------------------------------------------------------------------------


def _resolve_version(version: Optional[int]) -> int:
    v = load_config().wire_version if version is None else version
    if isinstance(v, bool) or v not in SUPPORTED_WIRE_VERSIONS:
        raise ValueError(f"unsupported wire version {v!r}")
    return v


def timing_to_obj(timing: Timing, version: Optional[int] = None) -> Any:
    v = _resolve_version(version)
    if v == 0:
        return _v0_to_obj(convert.timing_to_v0(timing))
    return _v1_to_obj(convert.timing_to_v1(timing))


def timing_from_obj(obj: Any, version: Optional[int] = None) -> Timing:
    v = _resolve_version(version)
    if v == 0:
        return convert.timing_from_v0(_v0_from_obj(obj))
    return convert.timing_from_v1(_v1_from_obj(obj))


def dumps_timing(timing: Timing, version: Optional[int] = None) -> bytes:
    return cbor2.dumps(timing_to_obj(timing, version), canonical=True)


def loads_timing(data: bytes, version: Optional[int] = None) -> Timing:
    try:
        obj = cbor2.loads(data)
    except cbor2.CBORDecodeError as e:
        log.debug("timing CBOR decode failed", extra={"size": len(data)})
        raise WireFormatError("invalid CBOR", size=len(data)) from e
    return timing_from_obj(obj, version)


__all__ = ["dumps_timing", "loads_timing", "timing_from_obj", "timing_to_obj"]
