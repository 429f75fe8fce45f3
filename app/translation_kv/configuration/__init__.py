"""Configuration module - public API.

Centralized configuration management using Pydantic BaseSettings with
domain-based organization.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    StoreSettings: Key-value store settings class
    I18nSettings: Translation behaviour settings class

Example:
    ```python
    from translation_kv.services.providers import get_settings

    settings = get_settings()

    backend = settings.store.TRANSLATION_STORE_BACKEND
    separator = settings.i18n.I18N_DEFAULT_SEPARATOR
    ```
"""

from translation_kv.configuration.i18n import I18nSettings
from translation_kv.configuration.settings import Settings, settings
from translation_kv.configuration.store import StoreSettings

__all__ = ["Settings", "settings", "StoreSettings", "I18nSettings"]
