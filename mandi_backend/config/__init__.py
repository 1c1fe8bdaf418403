"""
/**
 * @file mandi_backend/config/__init__.py
 * @description Configuration exports.
 */
"""

from .settings import ConfigError, Settings, build_settings, load_settings, CONFIG_PATH, CONFIG_LOCAL_PATH

__all__ = ["ConfigError", "Settings", "build_settings", "load_settings", "CONFIG_PATH", "CONFIG_LOCAL_PATH"]
