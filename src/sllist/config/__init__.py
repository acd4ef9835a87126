"""Settings and logging setup."""

from sllist.config.logging import configure_logging
from sllist.config.settings import SllistSettings, get_settings, reset_settings

__all__ = ["SllistSettings", "configure_logging", "get_settings", "reset_settings"]
