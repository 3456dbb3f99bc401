"""Infrastructure configuration module - public API.

Centralized configuration management using Pydantic BaseSettings with
domain-based organization.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Translation engine settings class (for testing)

Example:
    ```python
    from infrastructure.configuration import settings

    fallback = settings.i18n.FALLBACK_LANGUAGE
    ```
"""

from infrastructure.configuration.features.i18n import I18nSettings
from infrastructure.configuration.settings import Settings, settings

__all__ = ["Settings", "I18nSettings", "settings"]
