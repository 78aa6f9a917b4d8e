"""
Notebook Configuration Service - Manages serialization settings from notebook_config.json.

This module handles loading and accessing the notebook_config.json file which
controls how notebooks are written out (JSON formatting).

The document layer never reads this file itself: callers load a config here
and pass it to file_contents_from_notebook(). If notebook_config.json doesn't
exist, or holds values of the wrong type, the defaults below are used.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, Any

logger = logging.getLogger(__name__)

# Default configuration - documents the file layout
DEFAULT_CONFIG = {
    "json": {
        "indent": None,
        "sort_keys": False,
        "ensure_ascii": False,
        "comment": "Passed to json.dumps when writing file contents. indent=null writes compact JSON"
    }
}


@dataclass
class NotebookConfig:
    """Parsed notebook configuration."""
    # Output formatting
    indent: Optional[int] = None
    sort_keys: bool = False
    ensure_ascii: bool = False

    # Raw config for reference
    raw_config: Dict[str, Any] = field(default_factory=dict)

    def json_dump_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments for json.dumps."""
        return {
            'indent': self.indent,
            'sort_keys': self.sort_keys,
            'ensure_ascii': self.ensure_ascii,
        }


# Module-level cached config
_config: Optional[NotebookConfig] = None
_config_path: Optional[Path] = None


def _parse_config(raw: Any) -> NotebookConfig:
    """Parse raw JSON config into NotebookConfig, ignoring ill-typed values."""
    if not isinstance(raw, dict):
        logger.error(f"notebook_config.json must hold an object, got {type(raw).__name__}; using defaults")
        return NotebookConfig(raw_config=DEFAULT_CONFIG)

    config = NotebookConfig(raw_config=raw)

    json_opts = raw.get("json", {})
    if not isinstance(json_opts, dict):
        logger.error(f"'json' section must be an object, got {type(json_opts).__name__}; using defaults")
        return config

    # bool is an int subclass; json.dumps would take True as indent=1
    indent = json_opts.get("indent")
    if indent is None or (isinstance(indent, int) and not isinstance(indent, bool) and indent >= 0):
        config.indent = indent
    else:
        logger.error(f"'indent' must be a non-negative integer or null, got {indent!r}; using default")

    for key in ("sort_keys", "ensure_ascii"):
        value = json_opts.get(key, getattr(config, key))
        if isinstance(value, bool):
            setattr(config, key, value)
        else:
            logger.error(f"'{key}' must be true or false, got {value!r}; using default")

    return config


def load_config(config_path: Optional[Path] = None, force_reload: bool = False) -> NotebookConfig:
    """
    Load notebook configuration from JSON file.

    Falls back to defaults if the file doesn't exist or can't be parsed.

    Args:
        config_path: Path to config file. Defaults to ./notebook_config.json
        force_reload: If True, reload from disk even if cached

    Returns:
        Parsed NotebookConfig
    """
    global _config, _config_path

    if config_path is None:
        config_path = Path.cwd() / "notebook_config.json"
    config_path = Path(config_path)

    # Return cached if available and path matches
    if _config is not None and not force_reload and _config_path == config_path:
        return _config

    _config_path = config_path

    if not config_path.exists():
        raw = DEFAULT_CONFIG
    else:
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                raw = json.load(f)
            logger.info(f"Loaded notebook_config.json from {config_path}")
        except json.JSONDecodeError as e:
            logger.error(f"Failed to parse notebook_config.json: {e}")
            raw = DEFAULT_CONFIG
        except OSError as e:
            logger.error(f"Failed to load notebook_config.json: {e}")
            raw = DEFAULT_CONFIG

    _config = _parse_config(raw)
    return _config


def get_config() -> NotebookConfig:
    """Get the current config, loading if necessary."""
    if _config is None:
        return load_config()
    return _config


def reset_config_cache() -> None:
    """Reset cached config (useful for testing)."""
    global _config, _config_path
    _config = None
    _config_path = None
