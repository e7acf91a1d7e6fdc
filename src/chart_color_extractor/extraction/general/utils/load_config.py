# src/chart_color_extractor/extraction/general/utils/load_config.py

"""Read JSON object configs (palette settings) from a <data/> directory.

Does: Locate the data dir (env override, else walk up from this file), load
      <data>/<name>.json as a dict, run an optional validator, and memoize the
      validated result per (path, mtime, validator).
Used by: color.palette.load_palette_settings; tests swap the dir with
         temp_data_dir.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from collections.abc import Callable
from pathlib import Path
from types import TracebackType
from typing import Any

__all__ = [
    "load_config",
    "clear_config_cache",
    "temp_data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]

DATA_DIR_ENV_VARS = ("DATA_DIR", "CHART_COLORS_DATA_DIR")

Validator = Callable[[dict[str, Any]], dict[str, Any]]


# ── Exceptions ───────────────────────────────────────────────────────────────
class DataDirNotFound(FileNotFoundError):
    """No 'data' directory above the package and no env override."""


class ConfigFileNotFound(FileNotFoundError):
    """The named config is missing, unreadable, or outside the data dir."""


class ConfigParseError(ValueError):
    """Invalid JSON, or the validator rejected the content."""


class ConfigTypeError(TypeError):
    """The JSON document is not an object."""


# ── Cache ────────────────────────────────────────────────────────────────────
log = logging.getLogger(__name__)
_CACHE_LOCK = threading.RLock()
# key: path, mtime, encoding, validator
_CONFIG_CACHE: dict[tuple[Path, float, str, Validator | None], dict[str, Any]] = {}


def clear_config_cache() -> None:
    """Forget every memoized config."""
    with _CACHE_LOCK:
        _CONFIG_CACHE.clear()
    log.debug("Config cache cleared.")


# ── Data dir ─────────────────────────────────────────────────────────────────
def _find_data_dir() -> Path:
    for var in DATA_DIR_ENV_VARS:
        value = os.environ.get(var)
        if value:
            return Path(os.path.expanduser(value)).resolve()

    here = Path(__file__).resolve()
    tried = [p / "data" for p in here.parents]
    for cand in tried:
        if cand.is_dir():
            return cand
    raise DataDirNotFound(
        "No 'data' directory found.\nTried:\n  " + "\n  ".join(map(str, tried))
    )


def _config_path(name: str | os.PathLike[str], data_dir: Path) -> Path:
    raw = os.fspath(name)
    path = (data_dir / (raw if raw.endswith(".json") else f"{raw}.json")).resolve()
    if not path.is_relative_to(data_dir):
        raise ConfigFileNotFound(f"Refusing to read outside the data dir: {path} (base={data_dir})")
    if not path.is_file():
        raise ConfigFileNotFound(f"Config file not found: {path}")
    return path


# ── Loader ───────────────────────────────────────────────────────────────────
def load_config(
    name: str | os.PathLike[str],
    *,
    validator: Validator | None = None,
    base_dir: Path | None = None,
    encoding: str = "utf-8",
) -> dict[str, Any]:
    """Return <data>/<name>.json as a dict, validated and memoized.

    The cache entry is dropped implicitly when the file's mtime changes, so an
    edited settings file is picked up on the next call.
    """
    data_dir = (base_dir or _find_data_dir()).resolve()
    path = _config_path(name, data_dir)
    try:
        mtime = path.stat().st_mtime
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot stat {path}: {e}") from e

    key = (path, mtime, encoding, validator)
    with _CACHE_LOCK:
        if key in _CONFIG_CACHE:
            log.debug("Config cache hit: %s", path.name)
            return dict(_CONFIG_CACHE[key])

    try:
        with path.open("r", encoding=encoding) as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"Invalid JSON in {path}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigTypeError(f"{path.name}: expected a JSON object, got {type(data).__name__}")
    if validator is not None:
        try:
            data = validator(data)
        except (ValueError, TypeError) as e:
            raise ConfigParseError(f"{path.name}: {e}") from e

    with _CACHE_LOCK:
        _CONFIG_CACHE[key] = data
    log.debug("Config loaded and cached: %s", path.name)
    return dict(data)


# ── Context manager to temporarily override the data directory ───────────────
class temp_data_dir:
    """Point DATA_DIR at `path` for the block, then restore it."""

    def __init__(self, path: os.PathLike[str] | str):
        self._new = str(path)
        self._old: str | None = None

    def __enter__(self) -> temp_data_dir:
        self._old = os.environ.get("DATA_DIR")
        os.environ["DATA_DIR"] = self._new
        clear_config_cache()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._old is None:
            os.environ.pop("DATA_DIR", None)
        else:
            os.environ["DATA_DIR"] = self._old
        clear_config_cache()
