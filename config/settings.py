"""
================================================================================
utmconv Configuration Management
================================================================================

This module handles all configuration settings for utmconv using Pydantic
for validation and automatic environment variable loading.

CONFIGURATION SOURCES:
----------------------
Settings are loaded from (in order of priority):
1. Environment variables (highest priority)
2. .env file in the working directory
3. Default values (lowest priority)

HOW TO CONFIGURE:
-----------------
Option 1: Create a .env file:
    ```
    DEFAULT_DATUM=GRS80
    LATLON_DECIMALS=8
    LOG_LEVEL=DEBUG
    ```

Option 2: Set environment variables:
    - Windows: set DEFAULT_DATUM=Clarke1866
    - Linux/Mac: export DEFAULT_DATUM=Clarke1866

Nothing is required; every setting has a working default.

SINGLETON PATTERN:
------------------
The first call to get_settings() creates the Settings instance, and all
subsequent calls return the same instance. reset_settings() drops it so the
next call reloads from the environment (used by the tests).

License: MIT
================================================================================
"""

# ==============================================================================
# IMPORTS
# ==============================================================================

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from geodesy.models import Datum


# ==============================================================================
# SETTINGS CLASS
# ==============================================================================

class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    By default, the env var name is the UPPERCASE version of the field name:
    - default_datum → DEFAULT_DATUM
    - log_level → LOG_LEVEL

    Example Usage:
    --------------
    ```python
    from config import get_settings

    settings = get_settings()
    print(f"Converting on {settings.default_datum}")
    ```
    """

    # ==========================================================================
    # Conversion Defaults
    # ==========================================================================

    default_datum: str = Field(
        default="WGS84",
        description=(
            "Datum used when a conversion does not name one. Options:\n"
            "  - WGS84: GPS datum (default)\n"
            "  - GRS80: NAD83-compatible ellipsoid\n"
            "  - Clarke1866: NAD27 ellipsoid"
        )
    )

    # ==========================================================================
    # Output Formatting
    # ==========================================================================
    # Maximum decimals printed; trailing zeros are dropped.

    latlon_decimals: int = Field(
        default=6,
        ge=0,
        le=12,
        description="Decimals shown for decimal-degree latitude/longitude."
    )

    utm_decimals: int = Field(
        default=1,
        ge=0,
        le=6,
        description="Decimals shown for easting/northing (metres)."
    )

    dms_seconds_decimals: int = Field(
        default=2,
        ge=0,
        le=8,
        description="Decimals shown for the seconds part of a DMS angle."
    )

    # ==========================================================================
    # Cross-check
    # ==========================================================================

    cross_check_tolerance_m: float = Field(
        default=0.01,
        gt=0,
        description=(
            "Largest easting/northing difference (metres) against pyproj\n"
            "that a cross-check still reports as agreeing."
        )
    )

    # ==========================================================================
    # Logging Configuration
    # ==========================================================================

    log_level: str = Field(
        default="WARNING",
        description=(
            "Logging verbosity level:\n"
            "  - DEBUG: Everything, including every conversion\n"
            "  - INFO: General information\n"
            "  - WARNING: Warnings and errors only (default)\n"
            "  - ERROR: Errors only"
        )
    )

    log_file: str = Field(
        default="",
        description="File to also write logs to. Empty disables file logging."
    )

    # ==========================================================================
    # Pydantic Configuration
    # ==========================================================================

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("default_datum")
    @classmethod
    def _known_datum(cls, value: str) -> str:
        # UnknownDatumError is a ValueError, pydantic reports it as a validation error
        return Datum.parse(value).value

    @property
    def datum(self) -> Datum:
        return Datum.parse(self.default_datum)


# ==============================================================================
# SINGLETON PATTERN
# ==============================================================================

_settings_instance: Settings | None = None


def get_settings() -> Settings:
    """
    Get the global Settings instance (creates it if needed).

    Returns:
        Settings: The global settings instance

    Raises:
        ValidationError: If a setting is invalid (e.g. an unknown datum)
    """
    global _settings_instance

    if _settings_instance is None:
        _settings_instance = Settings()
        logging.getLogger(__name__).debug(
            "Settings loaded - default datum: %s", _settings_instance.default_datum
        )

    return _settings_instance


def reset_settings():
    """
    Reset the global settings instance.

    Useful for testing or when the .env file changes and settings must reload.
    """
    global _settings_instance
    _settings_instance = None


# ==============================================================================
# MODULE EXPORTS
# ==============================================================================

__all__ = ["Settings", "get_settings", "reset_settings"]
