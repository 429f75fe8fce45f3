"""Key-value store factory."""

from typing import Optional

from translation_kv.configuration import Settings
from translation_kv.kvstore.base import KeyValueStore
from translation_kv.kvstore.memory import InMemoryKeyValueStore
from translation_kv.kvstore.redis_store import RedisKeyValueStore
from translation_kv.logging import get_module_logger

logger = get_module_logger()

# Singleton store instance
_store_instance: Optional[KeyValueStore] = None


def create_store(settings: Settings) -> KeyValueStore:
    """Create a store for the configured backend.

    Args:
        settings: Settings carrying the store section.

    Returns:
        New KeyValueStore instance.
    """
    store_settings = settings.store
    if store_settings.TRANSLATION_STORE_BACKEND == "redis":
        return RedisKeyValueStore(
            url=store_settings.REDIS_URL,
            namespace=store_settings.REDIS_NAMESPACE,
            socket_timeout=store_settings.REDIS_SOCKET_TIMEOUT,
        )
    return InMemoryKeyValueStore()


def get_store(settings: Optional[Settings] = None) -> KeyValueStore:
    """Get the key-value store singleton.

    Args:
        settings: Settings used on first creation. Defaults to the
            application settings.

    Returns:
        Shared KeyValueStore instance.
    """
    global _store_instance

    if _store_instance is not None:
        return _store_instance

    if settings is None:
        from translation_kv.services.providers import get_settings

        settings = get_settings()

    _store_instance = create_store(settings)
    logger.info(
        "initialized_translation_store",
        backend=settings.store.TRANSLATION_STORE_BACKEND,
    )

    return _store_instance


def reset_store() -> None:
    """Reset the store singleton (for testing only)."""
    global _store_instance
    _store_instance = None
    logger.debug("reset_store_singleton")
