"""
Config loader for filecalc (YAML authoring; JSON by extension).

A config file is optional. Recognised keys and their defaults live in DEFAULTS;
anything else is reported with a warning and ignored.
"""

import codecs
import json
import logging
from pathlib import Path
from typing import Dict, Any

import yaml

log = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    "encoding": "utf-8",
    "log_level": "WARNING",
}


def load_config(path: str | Path) -> Dict[str, Any]:
    """Load config from YAML (.yaml/.yml) or JSON, merged over DEFAULTS."""
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Config not found: {p}")

    suffix = p.suffix.lower()
    with p.open("r", encoding="utf-8") as f:
        if suffix in [".yaml", ".yml"]:
            try:
                raw = yaml.safe_load(f) or {}
            except yaml.YAMLError as exc:
                raise ValueError(f"Invalid YAML in {p}: {exc}") from exc
        else:
            raw = json.load(f)

    if not isinstance(raw, dict):
        raise ValueError(f"Config {p} must be a mapping, got {type(raw).__name__}")

    _check_keys(raw, p)
    cfg = dict(DEFAULTS)
    cfg.update({k: v for k, v in raw.items() if k in DEFAULTS})
    _check_encoding(cfg["encoding"], p)
    return cfg


def _check_encoding(encoding: Any, path: Path) -> None:
    """Reject encodings that open() would fail on with LookupError/TypeError."""
    if not isinstance(encoding, str):
        raise ValueError(f"Config {path}: encoding must be a string, got {type(encoding).__name__}")
    try:
        codecs.lookup(encoding)
    except LookupError:
        raise ValueError(f"Config {path}: unknown encoding {encoding!r}") from None


def _check_keys(cfg: Dict[str, Any], path: Path) -> None:
    unknown = sorted(k for k in cfg if k not in DEFAULTS)
    if unknown:
        log.warning("Config %s has unknown keys (ignored): %s", path, ", ".join(unknown))
