"""Key-value store abstract base class."""

import re
from abc import ABC, abstractmethod
from typing import List, Optional

_GLOB_SPECIAL = re.compile(r"([*?\[\]\\])")


def escape_glob(value: str) -> str:
    """Escape glob metacharacters so value matches literally."""
    return _GLOB_SPECIAL.sub(r"\\\1", value)


class KeyValueStore(ABC):
    """Abstract base class for flat key-value stores.

    Translations are persisted as string values under string keys. Key
    enumeration accepts Redis-style glob patterns (``*``, ``?``, ``[...]``
    and backslash escapes), which is all the translation backend needs for
    prefix queries such as ``"en.app.*"``.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Get the value stored at key.

        Args:
            key: Store key.

        Returns:
            Stored string or None if the key does not exist.
        """
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store value at key, replacing any existing value.

        Args:
            key: Store key.
            value: String value.
        """
        pass

    @abstractmethod
    def keys(self, pattern: str = "*") -> List[str]:
        """List keys matching a glob pattern.

        Args:
            pattern: Redis-style glob pattern.

        Returns:
            Matching keys, in no particular order.
        """
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove every key owned by this store (for testing).

        Note: Implementation-specific, may be expensive on a shared store.
        """
        pass
