"""
Ledger account-value encoding.

This package turns account-level values (vesting timing, token symbols) into
the exact hash-oracle input consumed by the account hash, ingests them from
GraphQL-style documents, and converts them from/to historical wire schemas.

Only re-exports the version here to keep import-time side effects near zero.
"""

from __future__ import annotations

from .version import __version__


def get_version() -> str:
    """Return the version string for this package."""
    return __version__


__all__ = ["__version__", "get_version"]
