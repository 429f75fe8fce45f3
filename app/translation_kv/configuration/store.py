"""Key-value store settings."""

from typing import Literal

from pydantic import Field

from translation_kv.configuration.base import InfrastructureSettings


class StoreSettings(InfrastructureSettings):
    """Key-value store configuration.

    Environment Variables:
        TRANSLATION_STORE_BACKEND: Store implementation, "memory" or "redis" (default: memory)
        REDIS_URL: Redis connection URL (default: redis://localhost:6379/0)
        REDIS_NAMESPACE: Optional prefix applied to every stored key
        REDIS_SOCKET_TIMEOUT: Socket timeout in seconds for Redis calls (default: 5)

    Example:
        ```python
        from translation_kv.configuration import settings

        if settings.store.TRANSLATION_STORE_BACKEND == "redis":
            url = settings.store.REDIS_URL
        ```
    """

    TRANSLATION_STORE_BACKEND: Literal["memory", "redis"] = Field(
        default="memory", alias="TRANSLATION_STORE_BACKEND"
    )
    REDIS_URL: str = Field(default="redis://localhost:6379/0", alias="REDIS_URL")
    REDIS_NAMESPACE: str = Field(default="", alias="REDIS_NAMESPACE")
    REDIS_SOCKET_TIMEOUT: float = Field(default=5.0, alias="REDIS_SOCKET_TIMEOUT")
