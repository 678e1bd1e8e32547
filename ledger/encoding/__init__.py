"""
ledger.encoding
===============

Ingestion of loosely typed external documents:

- graphql.py: GraphQL-style JSON documents with decimal-string scalars

Typed decoders (`TimedData.from_graphql_json`, `Timing.from_graphql_json`)
are defined next to their types and build on these helpers.
"""

from __future__ import annotations

from .graphql import as_document, parse_u64, parse_u64_fields

__all__ = ["as_document", "parse_u64", "parse_u64_fields"]
