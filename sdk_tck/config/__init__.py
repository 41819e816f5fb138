"""Configuration module for sdk_tck."""

from sdk_tck.config.loader import get_network_config, load_settings, set_network_environment
from sdk_tck.config.schema import TckSettings
from sdk_tck.config.access import get_settings, clear_settings_cache

__all__ = [
    "TckSettings",
    "load_settings",
    "get_network_config",
    "set_network_environment",
    "get_settings",
    "clear_settings_cache",
]
