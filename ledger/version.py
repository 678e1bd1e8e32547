"""
Version helpers for the ledger package.

- Exposes __version__ (PEP 440–compatible when possible).
- Best-effort detection from:
    1) LEDGER_VERSION env var (authoritative override)
    2) installed distribution metadata
    3) fallback DEFAULT_VERSION

This module has **no external dependencies** and is safe to import very early.
"""

from __future__ import annotations

import os
from importlib.metadata import PackageNotFoundError, version as _dist_version

DEFAULT_VERSION = "0.1.0"
DIST_NAME = "ledger-roinput"


def resolve_version() -> str:
    env = os.getenv("LEDGER_VERSION")
    if env:
        return env.strip()
    try:
        return _dist_version(DIST_NAME)
    except PackageNotFoundError:
        return DEFAULT_VERSION


__version__ = resolve_version()


if __name__ == "__main__":
    print(__version__)
