"""
Configuration Management.

Centralized configuration using Pydantic Settings:

- Settings: environment-driven settings (Notion credentials, site URL, app env)
- get_settings: cached accessor
- check_configuration: explicit startup check for the Notion credentials

Configuration sources (in order of precedence):
1. Environment variables
2. .env file
3. Default values

Example:
    from signfolio.config import check_configuration, get_settings

    settings = get_settings()
    if not check_configuration(settings):
        ...  # degrade: listings will fail until the settings are provided
"""

from signfolio.config.settings import (
    Settings,
    check_configuration,
    get_settings,
    missing_notion_settings,
)

__all__ = [
    "Settings",
    "check_configuration",
    "get_settings",
    "missing_notion_settings",
]
