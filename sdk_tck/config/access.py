"""Settings shared by the harness, rebuilt whenever the TCK environment changes.

``set_network_environment`` and test fixtures rewrite ``os.environ`` while a
process runs, so a cached ``TckSettings`` is only reused while both the env
file and every TCK variable are unchanged.
"""

from __future__ import annotations

import os
import threading
from pathlib import Path

from sdk_tck.config.loader import get_env_path, load_settings
from sdk_tck.config.schema import TckSettings

ENV_NAMES = tuple(name.upper() for name in TckSettings.model_fields)

SettingsKey = tuple[str, tuple[str | None, ...]]

_lock = threading.RLock()
_cache: dict[SettingsKey, TckSettings] = {}


def settings_key(env_file: Path | None = None) -> SettingsKey:
    """Resolved env file path plus the current value of every TCK variable."""
    path = Path(env_file).expanduser().resolve() if env_file else get_env_path().resolve()
    return str(path), tuple(os.environ.get(name) for name in ENV_NAMES)


def get_settings(*, env_file: Path | None = None) -> TckSettings:
    """Settings for the current environment; rebuilt when it has changed."""
    key = settings_key(env_file)
    with _lock:
        settings = _cache.get(key)
        if settings is None:
            settings = load_settings(Path(key[0]))
            _cache[key] = settings
        return settings


def clear_settings_cache() -> None:
    """Forget every cached settings object (env file edits are not tracked)."""
    with _lock:
        _cache.clear()
