"""Translation service for dependency injection.

Provides a class-based interface to the translation backend for easier DI
and testing.
"""

from typing import Any, Mapping, Optional, Set

from translation_kv.i18n.backend import KeyValueBackend
from translation_kv.i18n.factory import create_backend
from translation_kv.i18n.models import KeyLike


class TranslationService:
    """Class-based translation service.

    This is a thin facade: all actual work is delegated to the underlying
    KeyValueBackend created by the factory.

    Usage:
        from translation_kv.i18n import TranslationService

        service = TranslationService()
        service.store_translations("en", {"app": {"greeting": "Hello %{name}"}})
        message = service.translate("en", "app.greeting", name="Ada")
    """

    def __init__(self, backend: Optional[KeyValueBackend] = None):
        """Initialize translation service.

        Args:
            backend: Optional pre-configured backend. If not provided,
                creates default via factory.
        """
        self._backend = backend or create_backend()

    def translate(self, locale: Any, key: KeyLike, **options: Any) -> Optional[Any]:
        """Translate key for locale.

        Args:
            locale: Locale to translate to
            key: Key to translate
            **options: scope, default, count, separator, resolve and
                interpolation values

        Returns:
            Translated value, or None when nothing resolved
        """
        return self._backend.translate(locale, key, **options)

    def store_translations(
        self, locale: Any, data: Mapping[Any, Any], **options: Any
    ) -> int:
        """Store a nested translation document for locale.

        Returns:
            Number of keys written
        """
        return self._backend.store_translations(locale, data, options)

    def has_message(self, locale: Any, key: KeyLike, scope: Optional[KeyLike] = None) -> bool:
        """Check if a translation exists for key in locale."""
        return self._backend.exists(locale, key, scope)

    def get_available_locales(self) -> Set[str]:
        """Get the locales present in the store."""
        return self._backend.available_locales()

    @property
    def backend(self) -> KeyValueBackend:
        """Access the underlying backend."""
        return self._backend
