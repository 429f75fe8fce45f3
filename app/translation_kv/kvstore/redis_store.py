"""Redis-backed key-value store."""

from typing import List, Optional

import redis
import structlog

from translation_kv.kvstore.base import KeyValueStore, escape_glob
from translation_kv.kvstore.exceptions import StoreConnectionError

logger = structlog.get_logger()


class RedisKeyValueStore(KeyValueStore):
    """Redis-backed translation store.

    Keys are optionally placed under a namespace (``<namespace>:<key>``) so
    several applications can share one database. Enumeration uses ``SCAN``
    so listing keys never blocks the server the way ``KEYS`` does.

    Attributes:
        client: Underlying ``redis.Redis`` client.
        namespace: Key namespace, empty for none.
    """

    def __init__(
        self,
        url: str = "redis://localhost:6379/0",
        namespace: str = "",
        socket_timeout: float = 5.0,
        client: Optional[redis.Redis] = None,
    ):
        """Initialize the Redis store.

        Args:
            url: Redis connection URL (host, port and db).
            namespace: Optional key namespace.
            socket_timeout: Socket and connect timeout in seconds.
            client: Pre-built client, used instead of connecting to url.

        Raises:
            StoreConnectionError: If the client cannot be created from url.
        """
        self.namespace = namespace
        if client is None:
            try:
                client = redis.Redis.from_url(
                    url,
                    decode_responses=True,
                    socket_timeout=socket_timeout,
                    socket_connect_timeout=socket_timeout,
                    retry_on_timeout=True,
                    health_check_interval=30,
                )
            except ValueError as e:
                logger.error("redis_client_creation_failed", error=str(e))
                raise StoreConnectionError(f"Redis client creation failed: {e}") from e
        self.client = client
        logger.info("initialized_redis_store", namespace=namespace or None)

    def _key(self, key: str) -> str:
        return f"{self.namespace}:{key}" if self.namespace else key

    def _strip(self, key: str) -> str:
        if self.namespace:
            return key[len(self.namespace) + 1 :]
        return key

    def get(self, key: str) -> Optional[str]:
        return self.client.get(self._key(key))

    def set(self, key: str, value: str) -> None:
        self.client.set(self._key(key), value)

    def keys(self, pattern: str = "*") -> List[str]:
        if self.namespace:
            pattern = f"{escape_glob(self.namespace)}:{pattern}"
        return [self._strip(key) for key in self.client.scan_iter(match=pattern)]

    def clear(self) -> None:
        """Delete every key in the namespace, or flush the database without one."""
        if not self.namespace:
            self.client.flushdb()
            return
        keys = list(self.client.scan_iter(match=f"{escape_glob(self.namespace)}:*"))
        if keys:
            self.client.delete(*keys)

    def ping(self) -> bool:
        """Check the connection.

        Returns:
            True if Redis answered, False otherwise.
        """
        try:
            return bool(self.client.ping())
        except redis.RedisError as e:
            logger.warning("redis_ping_failed", error=str(e))
            return False
