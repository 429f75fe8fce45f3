"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for core services.
"""

from functools import lru_cache

from translation_kv.configuration import Settings


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process.

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_translation_service():
    """
    Get application-scoped translation service singleton.

    Returns:
        TranslationService: Cached service backed by the configured store.
    """
    from translation_kv.i18n.service import TranslationService

    return TranslationService()
