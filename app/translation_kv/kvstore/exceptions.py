"""Exceptions raised by key-value store implementations."""


class StoreError(Exception):
    """Base exception for key-value store errors."""

    pass


class StoreConnectionError(StoreError):
    """Raised when a store client cannot be created.

    Example:
        >>> RedisKeyValueStore(url="not-a-url")
        Traceback (most recent call last):
        ...
        StoreConnectionError: Redis client creation failed: ...
    """

    pass
