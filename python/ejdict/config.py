"""Configuration loader for ejdict.

Loads defaults from config.json at project root, with hardcoded fallbacks.
"""

import json
from pathlib import Path
from typing import Any

EJDICT_URL = (
    "https://raw.githubusercontent.com/kujirahand/EJDict/master/release/"
    "ejdic-hand-utf8.txt"
)

# Hardcoded fallback defaults
FALLBACK_DEFAULTS = {
    "dictionary_path": "data/ejdict.json",
    "source_path": "sources/ejdic-hand-utf8.txt",
    "source_url": EJDICT_URL,
    "cache_dir": "sources",
    "look_mode": "lower",
    "candidates_mode": "fuzzy",
    "candidates_number": 5,
    "force": False,
    "verbose": False,
}

_config: dict[str, Any] | None = None


def _find_config() -> Path | None:
    """Find config.json by walking up from current file."""
    paths = [
        Path(__file__).parent.parent.parent / "config.json",  # python/ejdict -> root
        Path.cwd() / "config.json",
        Path.cwd().parent / "config.json",
    ]
    for path in paths:
        if path.exists():
            return path
    return None


def project_root() -> Path:
    """Directory relative paths in the config are resolved against."""
    config_path = _find_config()
    if config_path:
        return config_path.parent
    return Path(__file__).parent.parent.parent


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
        except (json.JSONDecodeError, OSError):
            pass

    # Fallback
    _config = {"defaults": FALLBACK_DEFAULTS}
    return _config


def reset() -> None:
    """Forget the cached configuration."""
    global _config
    _config = None


def get_default(key: str, fallback: Any = None) -> Any:
    """Get a default value from config."""
    cfg = load()
    return cfg.get("defaults", {}).get(key, fallback)


def _resolve(value: str) -> Path:
    path = Path(value)
    if path.is_absolute():
        return path
    return project_root() / path


# Convenience accessors
def default_dictionary_path() -> Path:
    return _resolve(
        get_default("dictionary_path", FALLBACK_DEFAULTS["dictionary_path"])
    )


def default_source_path() -> Path:
    return _resolve(get_default("source_path", FALLBACK_DEFAULTS["source_path"]))


def default_source_url() -> str:
    return get_default("source_url", FALLBACK_DEFAULTS["source_url"])


def default_cache_dir() -> Path:
    return _resolve(get_default("cache_dir", FALLBACK_DEFAULTS["cache_dir"]))


def default_look_mode() -> str:
    return get_default("look_mode", FALLBACK_DEFAULTS["look_mode"])


def default_candidates_mode() -> str:
    return get_default("candidates_mode", FALLBACK_DEFAULTS["candidates_mode"])


def default_candidates_number() -> int:
    return get_default("candidates_number", FALLBACK_DEFAULTS["candidates_number"])
