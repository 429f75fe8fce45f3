"""Translation store adapter.

Reads and writes flattened translation entries through a KeyValueStore.
Store keys are ``<locale>.<flat key>``; values are JSON text so numbers and
booleans come back with their type.
"""

import json
from typing import Any, Dict, Mapping, Optional, Set

from translation_kv.i18n.models import FLATTEN_SEPARATOR, locale_name
from translation_kv.kvstore.base import KeyValueStore, escape_glob
from translation_kv.logging import get_module_logger

logger = get_module_logger()


class TranslationStore:
    """Adapter between flattened translations and a KeyValueStore.

    No state is kept between calls; every read goes to the store.

    Attributes:
        store: Underlying key-value store.
    """

    def __init__(self, store: KeyValueStore):
        self.store = store

    @staticmethod
    def serialize(value: Any) -> str:
        return json.dumps(value, ensure_ascii=False)

    @staticmethod
    def deserialize(raw: str) -> Any:
        """Decode a stored value.

        Text that is not JSON, or that decodes to null, is returned as is so
        an existing key never reads back as missing.
        """
        try:
            value = json.loads(raw)
        except ValueError:
            return raw
        return raw if value is None else value

    def store_key(self, locale: Any, flat_key: str) -> str:
        return f"{locale_name(locale)}{FLATTEN_SEPARATOR}{flat_key}"

    def write(self, locale: Any, entries: Mapping[str, Any]) -> int:
        """Write flattened entries for a locale.

        Each entry is an independent set call; a failure part way leaves the
        earlier entries written.

        Args:
            locale: Locale of the entries.
            entries: Mapping of flat key (without locale) to scalar value.

        Returns:
            Number of keys written.
        """
        for flat_key, value in entries.items():
            self.store.set(self.store_key(locale, flat_key), self.serialize(value))
        logger.debug(
            "wrote_translation_entries",
            locale=locale_name(locale),
            key_count=len(entries),
        )
        return len(entries)

    def read(self, store_key: str) -> Optional[Any]:
        """Read the scalar stored at store_key.

        Returns:
            Decoded value or None if the key does not exist.
        """
        raw = self.store.get(store_key)
        if raw is None:
            return None
        return self.deserialize(raw)

    def read_children(self, store_key: str) -> Dict[str, Any]:
        """Read every entry stored below store_key.

        Args:
            store_key: Parent store key.

        Returns:
            Mapping of full child store key to decoded value.
        """
        pattern = f"{escape_glob(store_key)}{FLATTEN_SEPARATOR}*"
        children: Dict[str, Any] = {}
        for child_key in self.store.keys(pattern):
            raw = self.store.get(child_key)
            if raw is not None:
                children[child_key] = self.deserialize(raw)
        return children

    def locales(self) -> Set[str]:
        """Derive the set of locales from every key in the store.

        A locale is the part of a key before its first separator; keys
        without a separator are ignored.
        """
        locales = set()
        for key in self.store.keys("*"):
            locale, found, _ = key.partition(FLATTEN_SEPARATOR)
            if found and locale:
                locales.add(locale)
        return locales
