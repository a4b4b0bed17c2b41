"""Configuration and settings management."""

from template_manager.config.logging import get_logger, setup_logging
from template_manager.config.settings import Settings, clear_settings_cache, get_settings

__all__ = [
    "Settings",
    "get_settings",
    "clear_settings_cache",
    "setup_logging",
    "get_logger",
]
