"""
Configuration module - Centralized settings management.

This module provides type-safe configuration management using Pydantic,
supporting environment variables and YAML files.

Usage:
    from page_driver.config import get_settings, load_config
    
    # Get global settings (loaded once)
    settings = get_settings()
    
    # Or load fresh settings with overrides
    settings = load_config(driver={"element_availability_timeout_ms": 3000})

Environment Variables:
    PAGE_DRIVER__DRIVER__ELEMENT_AVAILABILITY_TIMEOUT_MS=3000
    PAGE_DRIVER__DRIVER__CHECK_ELEMENT_DELAY_MS=100
    PAGE_DRIVER__LOGGING__LEVEL=DEBUG
"""

from page_driver.config.settings import (
    Settings,
    DriverSettings,
    LoggingSettings,
)
from page_driver.config.loader import ConfigLoader, load_config

# Global settings singleton
_settings: Settings | None = None


def get_settings() -> Settings:
    """
    Get the global settings instance (singleton).
    
    Settings are loaded once from environment variables and config files.
    Call reset_settings() to reload.
    
    Returns:
        Global Settings instance
    """
    global _settings
    if _settings is None:
        _settings = load_config()
    return _settings


def reset_settings() -> None:
    """Reset the global settings (forces reload on next get_settings())."""
    global _settings
    _settings = None


__all__ = [
    "Settings",
    "DriverSettings",
    "LoggingSettings",
    "ConfigLoader",
    "load_config",
    "get_settings",
    "reset_settings",
]
