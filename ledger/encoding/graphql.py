"""
GraphQL document ingestion helpers
==================================

Account queries answered over GraphQL return scalar fields as *strings* of
decimal digits, e.g.::

    {"initialMinimumBalance": "5", "cliffTime": "10", ...}

The helpers here turn such loosely typed documents into plain ints, raising
`GraphQLParseError` on anything else:

- a missing key, or a value that is not a JSON string;
- a string that is not ``[+]?[0-9]+`` (no ``-``, whitespace, ``_``, or empty);
- a value that does not fit in an unsigned 64-bit integer.

A document may be a mapping or JSON text (str/bytes). Typed decoders built
on top of these helpers live next to their types (`TimedData.from_graphql_json`,
`Timing.from_graphql_json`).
"""

from __future__ import annotations

import json
import re
from typing import Any, Dict, Iterable, Mapping, Tuple

from ..errors import GraphQLParseError

U64_MAX = 0xFFFFFFFFFFFFFFFF

_U64_RE = re.compile(r"\+?[0-9]+")


def as_document(doc: Any) -> Mapping[str, Any]:
    """Return ``doc`` as a mapping, decoding JSON text when needed."""
    if isinstance(doc, (bytes, bytearray)):
        try:
            doc = bytes(doc).decode("utf-8")
        except UnicodeDecodeError as e:
            raise GraphQLParseError("document is not valid UTF-8") from e
    if isinstance(doc, str):
        try:
            doc = json.loads(doc)
        except (json.JSONDecodeError, RecursionError) as e:
            raise GraphQLParseError("document is not valid JSON") from e
    if not isinstance(doc, Mapping):
        raise GraphQLParseError("document must be a JSON object", got=type(doc).__name__)
    return doc


def parse_u64(doc: Mapping[str, Any], key: str) -> int:
    """Parse the decimal string under ``key`` as an unsigned 64-bit integer."""
    if key not in doc:
        raise GraphQLParseError(f"missing field {key!r}", field=key)
    raw = doc[key]
    if not isinstance(raw, str):
        raise GraphQLParseError(
            f"field {key!r} must be a decimal string", field=key, got=type(raw).__name__
        )
    if not _U64_RE.fullmatch(raw):
        raise GraphQLParseError(f"field {key!r} is not an unsigned integer", field=key, value=raw)
    value = int(raw)
    if value > U64_MAX:
        raise GraphQLParseError(f"field {key!r} overflows u64", field=key, value=raw)
    return value


def parse_u64_fields(doc: Any, keys: Iterable[Tuple[str, str]]) -> Dict[str, int]:
    """
    Parse every ``(graphql_key, attr_name)`` pair; all-or-nothing.

    Returns a dict keyed by ``attr_name``.
    """
    mapping = as_document(doc)
    return {attr: parse_u64(mapping, key) for key, attr in keys}


__all__ = ["as_document", "parse_u64", "parse_u64_fields"]
