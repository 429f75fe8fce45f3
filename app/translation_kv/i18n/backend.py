"""Key-value translation backend.

Wires the store adapter, flattener, resolver, pluralizer and interpolator
together by composition.
"""

from typing import Any, Mapping, Optional, Set

from translation_kv.i18n.flattener import KeyFlattener
from translation_kv.i18n.interpolator import Interpolator
from translation_kv.i18n.models import KeyLike, TranslationOptions, locale_name
from translation_kv.i18n.pluralizer import Pluralizer
from translation_kv.i18n.resolver import LookupResolver
from translation_kv.i18n.store import TranslationStore
from translation_kv.kvstore.base import KeyValueStore
from translation_kv.logging import get_module_logger

logger = get_module_logger()


class KeyValueBackend:
    """Translation backend storing flattened translations in a key-value store.

    Attributes:
        store: Translation store adapter.
        flattener: Key flattener.
        interpolator: Placeholder interpolator.
        pluralizer: Plural form selector.
        resolver: Lookup resolver built from the collaborators above.
        escape_keys: Default for the write-time escape option.
    """

    def __init__(
        self,
        store: KeyValueStore,
        flattener: Optional[KeyFlattener] = None,
        interpolator: Optional[Interpolator] = None,
        pluralizer: Optional[Pluralizer] = None,
        escape_keys: bool = True,
    ):
        self.store = TranslationStore(store)
        self.flattener = flattener or KeyFlattener()
        self.interpolator = interpolator or Interpolator()
        self.pluralizer = pluralizer or Pluralizer()
        self.escape_keys = escape_keys
        self.resolver = LookupResolver(
            self.store, self.flattener, self.interpolator, self.pluralizer
        )

    def store_translations(
        self,
        locale: Any,
        data: Mapping[Any, Any],
        options: Optional[Any] = None,
    ) -> int:
        """Flatten and persist a translation document for a locale.

        Args:
            locale: Locale identifier.
            data: Nested translation document.
            options: TranslationOptions or mapping; only escape is used.

        Returns:
            Number of keys written.

        Raises:
            InvalidDataError: If the document contains a callable. Nothing is
                written in that case.
        """
        options = TranslationOptions.from_mapping(options)
        escape = self.escape_keys if options.escape is None else options.escape
        entries = self.flattener.flatten(locale, data, escape, False)
        written = self.store.write(locale, entries)
        logger.info(
            "stored_translations",
            locale=locale_name(locale),
            key_count=written,
        )
        return written

    def available_locales(self) -> Set[str]:
        """Return every locale that has at least one stored key."""
        return self.store.locales()

    def lookup(
        self,
        locale: Any,
        key: KeyLike,
        scope: Optional[KeyLike] = None,
        options: Optional[Any] = None,
    ) -> Optional[Any]:
        return self.resolver.lookup(locale, key, scope, options)

    def exists(
        self,
        locale: Any,
        key: KeyLike,
        scope: Optional[KeyLike] = None,
        options: Optional[Any] = None,
    ) -> bool:
        return self.resolver.lookup(locale, key, scope, options) is not None

    def translate(
        self,
        locale: Any,
        key: KeyLike,
        scope: Optional[KeyLike] = None,
        default: Any = None,
        count: Optional[Any] = None,
        separator: Optional[str] = None,
        resolve: bool = True,
        **values: Any,
    ) -> Optional[Any]:
        """Look up, pluralize and interpolate a translation.

        Falls back to the default chain when the key is missing. count
        selects the plural form and is also available as ``%{count}``.

        Args:
            locale: Locale identifier.
            key: Key to translate.
            scope: Optional scope prepended to key.
            default: Fallback subject or list of subjects.
            count: Count used for pluralization.
            separator: Separator used inside key and scope strings.
            resolve: When False, default subjects are returned unresolved.
            **values: Interpolation values.

        Returns:
            The translated value, or None if nothing resolved.

        Raises:
            InvalidPluralizationDataError: If the plural form is missing.
            ReservedInterpolationKeyError: If the message uses a reserved placeholder.
            MissingInterpolationArgumentError: If a placeholder has no value.
        """
        options = TranslationOptions(
            scope=scope,
            default=default,
            separator=separator,
            resolve=resolve,
            count=count,
        )
        entry = self.resolver.lookup(locale, key, scope, options)
        if entry is None and default is not None:
            entry = self.resolver.default(locale, key, default, options)
        if entry is None:
            logger.info(
                "translation_not_found",
                locale=locale_name(locale),
                key=str(key),
            )
            return None

        if count is not None:
            entry = self.pluralizer.pluralize(locale, entry, count)
            values["count"] = count
        if values:
            entry = self.interpolator.interpolate(locale, entry, values)
        return entry
