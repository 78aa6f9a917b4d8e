"""Services layer - Configuration shared by the document layer."""

from .notebook_config import (
    NotebookConfig,
    DEFAULT_CONFIG,
    load_config,
    get_config,
    reset_config_cache,
)

__all__ = [
    # notebook_config
    "NotebookConfig",
    "DEFAULT_CONFIG",
    "load_config",
    "get_config",
    "reset_config_cache",
]
