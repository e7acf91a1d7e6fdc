# chart_color_extractor/extraction/general/utils/__init__.py
"""

Does: Provide config loading and lightweight debug logging utilities for the extraction stack.
Returns: load_config/clear_config_cache/temp_data_dir and debug/enable_topics/reload_topics.
Used by: Palette settings, the orchestrator, the CLI and tests.
"""

from __future__ import annotations

from .load_config import (
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    DataDirNotFound,
    clear_config_cache,
    load_config,
    temp_data_dir,
)
from .log import (
    debug,
    enable_topics,
    reload_topics,
)

__all__ = [
    # Config loading
    "load_config",
    "clear_config_cache",
    "temp_data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
    # Logging helpers
    "debug",
    "enable_topics",
    "reload_topics",
]
