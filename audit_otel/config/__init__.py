"""Configuration: settings and diagnostic logging."""

from audit_otel.config.logging import JsonFormatter, configure_logging
from audit_otel.config.settings import AppSettings, get_settings

__all__ = [
    "AppSettings",
    "JsonFormatter",
    "configure_logging",
    "get_settings",
]
