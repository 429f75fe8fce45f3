"""Key-value store collaborators for translation storage."""

from translation_kv.kvstore.base import KeyValueStore
from translation_kv.kvstore.exceptions import StoreConnectionError, StoreError
from translation_kv.kvstore.factory import get_store, reset_store
from translation_kv.kvstore.memory import InMemoryKeyValueStore
from translation_kv.kvstore.redis_store import RedisKeyValueStore

__all__ = [
    "KeyValueStore",
    "InMemoryKeyValueStore",
    "RedisKeyValueStore",
    "StoreError",
    "StoreConnectionError",
    "get_store",
    "reset_store",
]
