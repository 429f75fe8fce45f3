"""Factory functions for creating i18n components.

Provides convenience functions for building a translation backend from the
application settings.
"""

from typing import Optional

from translation_kv.configuration import Settings
from translation_kv.i18n.backend import KeyValueBackend
from translation_kv.i18n.flattener import KeyFlattener
from translation_kv.i18n.interpolator import Interpolator, SyntaxDeprecationWarner
from translation_kv.i18n.pluralizer import Pluralizer
from translation_kv.kvstore.base import KeyValueStore
from translation_kv.kvstore.factory import get_store
from translation_kv.logging import ensure_logging_configured, get_module_logger

logger = get_module_logger()


def create_backend(
    settings: Optional[Settings] = None,
    store: Optional[KeyValueStore] = None,
) -> KeyValueBackend:
    """Create and configure a KeyValueBackend.

    Args:
        settings: Settings to configure from (default: application settings).
        store: Key-value store to use (default: the configured store singleton).

    Returns:
        KeyValueBackend: Wired backend instance.

    Usage:
        # Use the configured store
        backend = create_backend()

        # Explicit store, e.g. in tests
        backend = create_backend(store=InMemoryKeyValueStore())
    """
    if settings is None:
        from translation_kv.services.providers import get_settings

        settings = get_settings()

    ensure_logging_configured(settings)
    i18n_settings = settings.i18n
    store = store if store is not None else get_store(settings)

    warner = SyntaxDeprecationWarner(enabled=i18n_settings.I18N_WARN_DEPRECATED_SYNTAX)
    backend = KeyValueBackend(
        store=store,
        flattener=KeyFlattener(default_separator=i18n_settings.I18N_DEFAULT_SEPARATOR),
        interpolator=Interpolator(warner=warner),
        pluralizer=Pluralizer(),
        escape_keys=i18n_settings.I18N_ESCAPE_KEYS,
    )
    logger.info(
        "translation_backend_created",
        store=type(store).__name__,
        separator=i18n_settings.I18N_DEFAULT_SEPARATOR,
    )
    return backend
