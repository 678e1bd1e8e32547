"""
ledger.errors
-------------

A small, consistent error system for the account encoding layer.

Design goals
------------
- One root `LedgerError` with machine-friendly `code` and optional `data`.
- Concrete subclasses for the domains that can actually fail here:
  configuration, document ingestion and wire-format decoding.
- Safe JSON representation (`to_dict`) suitable for logs.

Hash-input encoders never raise: every value that reaches them is valid by
construction. Errors only surface at the edges (config, documents, wire).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional


class LedgerErrorCode(str, Enum):
    INTERNAL = "LEDGER/INTERNAL"
    CONFIG = "LEDGER/CONFIG"
    DESERIALIZATION = "LEDGER/DESERIALIZATION"
    GRAPHQL_PARSE = "LEDGER/GRAPHQL_PARSE"
    WIRE_FORMAT = "LEDGER/WIRE_FORMAT"


@dataclass(eq=False)
class LedgerError(Exception):
    """
    Root error for ledger components.

    Attributes
    ----------
    code: str
        Machine-stable error code (see LedgerErrorCode).
    message: str
        Human hint suitable for logs.
    data: dict
        Optional machine data. Must be JSON-serializable.
    cause: Optional[BaseException]
        Wrapped original exception; not part of the JSON view by default.
    """

    code: str
    message: str
    data: Dict[str, Any] = field(default_factory=dict)
    cause: Optional[BaseException] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        super().__init__(f"{_code_str(self.code)}: {self.message}")

    def with_context(self, **ctx: Any) -> "LedgerError":
        """Return a *new* error with extra context merged (does not mutate)."""
        err = self._clone()
        err.data = {**self.data, **_jsonmap(ctx)}
        return err

    def with_cause(self, exc: BaseException) -> "LedgerError":
        err = self._clone()
        err.cause = exc
        err.__cause__ = exc
        return err

    def _clone(self) -> "LedgerError":
        err = type(self).__new__(type(self))
        err.__dict__.update(self.__dict__)
        err.args = self.args
        return err

    def to_dict(self, include_cause: bool = False) -> Dict[str, Any]:
        """JSON-safe shape suitable for logs."""
        out: Dict[str, Any] = {
            "code": _code_str(self.code),
            "message": self.message,
            "data": _jsonmap(self.data),
        }
        if include_cause and self.cause is not None:
            out["cause"] = {
                "type": type(self.cause).__name__,
                "message": str(self.cause),
            }
        return out

    def __str__(self) -> str:
        parts = [f"{_code_str(self.code)}: {self.message}"]
        if self.data:
            preview = ", ".join(f"{k}={_preview(v)}" for k, v in self.data.items())
            parts.append(f"[{preview}]")
        return " ".join(parts)


class InternalError(LedgerError):
    def __init__(self, message="internal error", **data: Any) -> None:
        super().__init__(code=LedgerErrorCode.INTERNAL, message=message, data=_jsonmap(data))


class ConfigError(LedgerError):
    def __init__(self, message="invalid configuration", **data: Any) -> None:
        super().__init__(code=LedgerErrorCode.CONFIG, message=message, data=_jsonmap(data))


class DeserializationError(LedgerError):
    def __init__(
        self,
        message="deserialization failed",
        *,
        code: LedgerErrorCode = LedgerErrorCode.DESERIALIZATION,
        **data: Any,
    ) -> None:
        super().__init__(code=code, message=message, data=_jsonmap(data))


class GraphQLParseError(DeserializationError):
    """A GraphQL-style JSON document could not be decoded into a typed value."""

    def __init__(self, message="graphql document parse failed", *, field: Optional[str] = None, **data: Any) -> None:
        super().__init__(message, code=LedgerErrorCode.GRAPHQL_PARSE, field=field, **data)

    @property
    def field(self) -> Optional[str]:
        return self.data.get("field")


class WireFormatError(DeserializationError):
    """A versioned wire record (or its CBOR encoding) is malformed."""

    def __init__(self, message="malformed wire record", **data: Any) -> None:
        super().__init__(message, code=LedgerErrorCode.WIRE_FORMAT, **data)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _code_str(code: Any) -> str:
    return code.value if isinstance(code, Enum) else str(code)


def _jsonmap(data: Mapping[str, Any]) -> Dict[str, Any]:
    return {k: _coerce_json(v) for k, v in data.items()}


def _coerce_json(v: Any) -> Any:
    # Keep JSON primitives; stringify the rest; hex-encode bytes.
    if v is None or isinstance(v, (bool, int, float, str, list, dict)):
        return v
    if isinstance(v, (bytes, bytearray)):
        return bytes(v).hex()
    return str(v)


def _preview(v: Any, limit: int = 96) -> str:
    s = str(_coerce_json(v))
    return s if len(s) <= limit else s[:limit] + "…"


__all__ = [
    "ConfigError",
    "DeserializationError",
    "GraphQLParseError",
    "InternalError",
    "LedgerError",
    "LedgerErrorCode",
    "WireFormatError",
]
