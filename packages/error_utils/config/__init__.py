"""Public API for error_utils configuration."""

from .loader import get_settings, load_settings, reset_settings
from .models import (
    DEFAULT_CONFIG_PATH,
    ENV_PREFIX,
    BoundarySettings,
    ErrorUtilsSettings,
    LoggingSettings,
)

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "ENV_PREFIX",
    "BoundarySettings",
    "ErrorUtilsSettings",
    "LoggingSettings",
    "get_settings",
    "load_settings",
    "reset_settings",
]
