"""
Ledger encoding configuration loader.

Goals
-----
- Zero external deps (stdlib only).
- Layered config with clear precedence:
    1) Explicit overrides passed to `load()` (highest)
    2) Environment variables (LEDGER_*)
    3) Config file (TOML or JSON), from `path` or $LEDGER_CONFIG
    4) Built-in defaults (lowest)
- A small typed dataclass with validation.

Nothing here can change what the hash-input encoders emit: the atom layout
is fixed by the verification circuit. Configuration only covers the edges:
logging and the default wire-schema version used by `ledger.wire.codec`.
"""

from __future__ import annotations

import json
import os
import sys
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

try:  # py311+
    import tomllib as _toml
except Exception:  # pragma: no cover - py310
    _toml = None  # type: ignore[assignment]

from .errors import ConfigError
from .logging import configure_from_config, get_logger

log = get_logger("ledger.config")

# ------------------------------
# Defaults & helpers
# ------------------------------

SUPPORTED_WIRE_VERSIONS = (0, 1)
DEFAULT_WIRE_VERSION = 1
DEFAULT_LOG_LEVEL = "INFO"

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"}


def _expand(p: str | Path) -> Path:
    return Path(p).expanduser().resolve()


def _env_int(name: str) -> int:
    v = os.environ[name]
    try:
        return int(v, 0)
    except ValueError as e:
        raise ConfigError(f"{name} must be int, got {v!r}", env=name) from e


def _env_log_format(name: str) -> Optional[bool]:
    v = os.environ[name].strip().lower()
    if v == "json":
        return True
    if v == "text":
        return False
    if v in ("", "auto"):
        return None
    raise ConfigError(f"{name} must be json|text|auto, got {v!r}", env=name)


# ------------------------------
# Typed configuration model
# ------------------------------


@dataclass
class LedgerConfig:
    log_level: str = DEFAULT_LOG_LEVEL
    log_json: Optional[bool] = None  # None → decide from TTY
    wire_version: int = DEFAULT_WIRE_VERSION

    def validate(self) -> None:
        if str(self.log_level).upper() not in _LOG_LEVELS:
            raise ConfigError(f"unknown log level {self.log_level!r}", log_level=self.log_level)
        if self.log_json is not None and not isinstance(self.log_json, bool):
            raise ConfigError("log_json must be a bool or null", log_json=self.log_json)
        if isinstance(self.wire_version, bool) or self.wire_version not in SUPPORTED_WIRE_VERSIONS:
            raise ConfigError(
                f"wire_version must be one of {SUPPORTED_WIRE_VERSIONS}",
                wire_version=self.wire_version,
            )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ------------------------------
# File loader (TOML / JSON)
# ------------------------------


def _load_file(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise ConfigError(f"config file not found: {path}", path=str(path))
    suffix = path.suffix.lower()
    with path.open("rb") as f:
        if suffix in {".toml", ".tml"}:
            if not _toml:
                raise ConfigError("tomllib is unavailable (Python < 3.11); use a JSON config")
            raw = _toml.load(f)
        elif suffix == ".json":
            raw = json.load(f)
        else:
            raise ConfigError(f"unsupported config format: {suffix}; use .toml or .json", path=str(path))
    # Accept either a flat file or one nested under [ledger].
    section = raw.get("ledger", raw) if isinstance(raw, dict) else None
    if not isinstance(section, dict):
        raise ConfigError("config file must contain a table/object", path=str(path))
    return section


# ------------------------------
# Main loader
# ------------------------------


def load(path: Optional[str | Path] = None, **overrides: Any) -> LedgerConfig:
    """
    Load the configuration.

    Precedence: overrides > env > file > defaults.

    Parameters
    ----------
    path : str | Path | None
        Optional TOML/JSON file with keys ``log_level``, ``log_json``,
        ``wire_version`` (flat, or under a ``ledger`` table). Falls back to
        $LEDGER_CONFIG when not given.
    overrides : Any
        Keyword overrides, e.g. ``load(wire_version=0)``.
    """
    # 1) Defaults
    base: Dict[str, Any] = asdict(LedgerConfig())

    # 2) File
    file_path = path or os.environ.get("LEDGER_CONFIG")
    if file_path:
        file_conf = _load_file(_expand(file_path))
        unknown = set(file_conf) - set(base)
        if unknown:
            raise ConfigError("unknown config keys", keys=sorted(unknown))
        base.update(file_conf)

    # 3) Env
    if "LEDGER_LOG_LEVEL" in os.environ:
        base["log_level"] = os.environ["LEDGER_LOG_LEVEL"].strip()
    if "LEDGER_LOG_FORMAT" in os.environ:
        base["log_json"] = _env_log_format("LEDGER_LOG_FORMAT")
    if "LEDGER_WIRE_VERSION" in os.environ:
        base["wire_version"] = _env_int("LEDGER_WIRE_VERSION")

    # 4) Overrides (highest)
    for k, v in overrides.items():
        if k not in base:
            raise ConfigError(f"unknown config key {k!r}", key=k)
        base[k] = v

    cfg = LedgerConfig(**base)
    cfg.validate()
    cfg.log_level = str(cfg.log_level).upper()
    return cfg


# ------------------------------
# CLI helper
# ------------------------------


def main(argv: List[str] | None = None) -> int:
    """
    CLI usage:

        python -m ledger.config                      # defaults/env; print JSON
        python -m ledger.config path/to/config.toml  # load file; print JSON
    """
    argv = list(argv if argv is not None else sys.argv[1:])
    try:
        cfg = load(argv[0] if argv else None)
    except ConfigError as e:
        print(f"config error: {e}", file=sys.stderr)
        return 2
    configure_from_config(cfg)
    log.debug("effective configuration loaded", extra={"log_level": cfg.log_level})
    print(json.dumps(cfg.to_dict(), indent=2, sort_keys=True))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
