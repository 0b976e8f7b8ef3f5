"""
Settings - Pydantic models for type-safe configuration.

This module defines all configuration settings as Pydantic models,
providing validation, type hints, and automatic environment variable loading.

Example:
    >>> from page_driver.config import Settings, load_config
    >>> settings = load_config()  # Loads from env, yaml, and defaults
    >>> print(settings.driver.check_element_delay_ms)
    200
"""

from typing import Literal, Optional
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DriverSettings(BaseModel):
    """
    Action command execution settings.
    
    Attributes:
        element_availability_timeout_ms: Default budget for locating the
            target elements of an action
        check_element_delay_ms: Polling interval for element existence
            and visibility checks
        progress_panel_text: Text shown while waiting for target elements
        barrier_timeout_ms: Upper bound on waiting for requests started by
            an action to finish
        barrier_watch_ms: Window after an action during which new requests
            are still picked up by the request barrier
        page_unload_timeout_ms: Upper bound on waiting for a pending page unload
    """
    element_availability_timeout_ms: int = Field(default=10000, ge=0, le=600000)
    check_element_delay_ms: int = Field(default=200, ge=10, le=5000)
    progress_panel_text: str = "Waiting for the target element of the next action to appear"
    barrier_timeout_ms: int = Field(default=3000, ge=0, le=60000)
    barrier_watch_ms: int = Field(default=0, ge=0, le=5000)
    page_unload_timeout_ms: int = Field(default=15000, ge=0, le=120000)


class LoggingSettings(BaseModel):
    """
    Logging configuration.
    
    Attributes:
        level: Log level
        file: Log file path (None for console only)
        json_format: Use JSON format for logs
    """
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    file: Optional[str] = None
    json_format: bool = False


class Settings(BaseSettings):
    """
    Root settings container - single source of truth for all configuration.
    
    Settings are loaded in this priority order (highest to lowest):
    1. Explicit values passed to constructor
    2. Environment variables (prefixed with PAGE_DRIVER__)
    3. Config file (YAML)
    4. Default values
    
    Example:
        >>> settings = Settings()  # Load from env vars
        >>> settings = Settings(driver=DriverSettings(check_element_delay_ms=50))
    """
    
    model_config = SettingsConfigDict(
        env_prefix="PAGE_DRIVER__",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )
    
    driver: DriverSettings = Field(default_factory=DriverSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    
    debug: bool = False
    
    def merge_with(self, overrides: dict) -> "Settings":
        """
        Create a new Settings instance with overrides applied.
        
        Args:
            overrides: Dictionary of values to override
            
        Returns:
            New Settings instance with overrides applied
        """
        current = self.model_dump()
        
        def deep_merge(base: dict, updates: dict) -> dict:
            for key, value in updates.items():
                if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                    deep_merge(base[key], value)
                else:
                    base[key] = value
            return base
        
        merged = deep_merge(current, overrides)
        return Settings(**merged)
