# ABOUTME: Configuration package initialization
# ABOUTME: Exports configuration classes and utilities for the token lifecycle library

from authtoken.config.settings import TokenSettings, get_settings
from authtoken.config.logging import (
    LoggerConfig,
    LoggingSettings,
    setup_logging,
    get_logger,
    mask_token_value,
    configure_for_testing,
    configure_for_production,
    configure_for_development,
)

__all__ = [
    "TokenSettings",
    "get_settings",
    "LoggerConfig",
    "LoggingSettings",
    "setup_logging",
    "get_logger",
    "mask_token_value",
    "configure_for_testing",
    "configure_for_production",
    "configure_for_development",
]
