"""Configuration management for bouncecurve."""

from bouncecurve.core.config.loader import (
    configure_logging,
    detect_format,
    load_app_config,
    load_config,
)
from bouncecurve.core.config.models import AppConfig, BounceConfig, LoggingConfig

__all__ = [
    # Loaders
    "load_config",
    "load_app_config",
    "detect_format",
    "configure_logging",
    # Models
    "AppConfig",
    "BounceConfig",
    "LoggingConfig",
]
