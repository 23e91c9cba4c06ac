"""Configuration loader for sevenvoices.

Loads defaults from config.json at project root, with hardcoded fallbacks.
The engine manifest is built from the optional "manifest" block and then
passed explicitly into solve calls.
"""

import json
import logging
from pathlib import Path
from typing import Any

from .manifest import VoiceManifest, manifest_from_dict

logger = logging.getLogger(__name__)

# Hardcoded fallback defaults
FALLBACK_DEFAULTS = {
    "mode": "strict",
    "profile": "auto",
    "beam_width": 8,
    "frontier_margin": 2,
    "json": False,
    "verbose": False,
}

_config: dict[str, Any] | None = None


def _find_config() -> Path | None:
    """Find config.json by walking up from current file."""
    paths = [
        Path(__file__).parent.parent.parent / "config.json",  # python/sevenvoices -> root
        Path.cwd() / "config.json",
        Path.cwd().parent / "config.json",
    ]
    for path in paths:
        if path.exists():
            return path
    return None


def load() -> dict[str, Any]:
    """Load configuration from config.json or use fallbacks."""
    global _config
    if _config is not None:
        return _config

    config_path = _find_config()
    if config_path:
        try:
            with open(config_path, encoding="utf-8") as f:
                _config = json.load(f)
                return _config
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Ignoring unreadable config %s: %s", config_path, e)

    # Fallback
    _config = {"defaults": FALLBACK_DEFAULTS, "manifest": {}}
    return _config


def reset() -> None:
    """Forget the cached configuration (next load() re-reads the file)."""
    global _config
    _config = None


def get_default(key: str, fallback: Any = None) -> Any:
    """Get a default value from config."""
    cfg = load()
    return cfg.get("defaults", {}).get(key, fallback)


def manifest_from_config(cfg: dict[str, Any] | None = None) -> VoiceManifest:
    """Build the engine manifest described by a config mapping."""
    cfg = load() if cfg is None else cfg
    return manifest_from_dict(cfg.get("manifest") or {})
