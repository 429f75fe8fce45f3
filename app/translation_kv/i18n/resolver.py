"""Translation lookup and default chain resolution."""

from typing import Any, Optional

from translation_kv.i18n.flattener import KeyFlattener
from translation_kv.i18n.interpolator import Interpolator
from translation_kv.i18n.models import (
    FLATTEN_SEPARATOR,
    KeyLike,
    TranslationKey,
    TranslationOptions,
    locale_name,
)
from translation_kv.i18n.pluralizer import Pluralizer
from translation_kv.i18n.store import TranslationStore
from translation_kv.logging import get_module_logger

logger = get_module_logger()


class LookupResolver:
    """Resolves locale-scoped keys against the translation store.

    A key maps either to a scalar, returned as is, or to a family of child
    keys, returned as a nested mapping. When both exist the scalar wins.
    Missing translations are None.

    Attributes:
        store: Translation store adapter.
        flattener: Key flattener used for key normalization and reconstruction.
        interpolator: Interpolator available to callers post-processing results.
        pluralizer: Pluralizer available to callers post-processing results.
    """

    def __init__(
        self,
        store: TranslationStore,
        flattener: KeyFlattener,
        interpolator: Interpolator,
        pluralizer: Pluralizer,
    ):
        self.store = store
        self.flattener = flattener
        self.interpolator = interpolator
        self.pluralizer = pluralizer

    def lookup(
        self,
        locale: Any,
        key: KeyLike,
        scope: Optional[KeyLike] = None,
        options: Optional[Any] = None,
    ) -> Optional[Any]:
        """Look up a translation.

        Args:
            locale: Locale identifier.
            key: Key as a string, a sequence of segments or a TranslationKey.
            scope: Scope prepended to the key. options.scope is used when empty.
            options: TranslationOptions or a plain mapping of option names.

        Returns:
            The stored scalar, a nested mapping of the entries below the key,
            or None when nothing is stored.
        """
        options = TranslationOptions.from_mapping(options)
        if not scope and options.scope:
            scope = options.scope

        flat_key = self.flattener.normalize_flat_keys(
            locale, key, scope, options.separator
        )
        flat_key = self.resolve_link(locale, flat_key)
        main_key = f"{locale_name(locale)}{FLATTEN_SEPARATOR}{flat_key}"

        result = self.store.read(main_key)
        if result is not None:
            return result

        children = self.store.read_children(main_key)
        if not children:
            logger.debug("translation_missing", store_key=main_key)
            return None

        return self.flattener.unflatten(main_key, children)

    def default(
        self,
        locale: Any,
        key: Any,
        subject: Any,
        options: Optional[Any] = None,
    ) -> Optional[Any]:
        """Resolve a default subject or the first resolvable of a list of them.

        Args:
            locale: Locale identifier.
            key: Key whose lookup failed, passed to callable subjects.
            subject: A single subject or a list of subjects tried in order.
            options: Options of the failed lookup; their default is dropped.

        Returns:
            The first non-None resolution, or None.
        """
        options = TranslationOptions.from_mapping(options).without_default()
        if isinstance(subject, (list, tuple)):
            for item in subject:
                result = self.resolve(locale, key, item, options)
                if result is not None:
                    return result
            return None
        return self.resolve(locale, key, subject, options)

    def resolve(
        self,
        locale: Any,
        key: Any,
        subject: Any,
        options: Optional[Any] = None,
    ) -> Optional[Any]:
        """Resolve one default subject.

        A TranslationKey is looked up, a callable is called with
        ``(key, options)`` and its result resolved, anything else is a
        literal value.
        """
        options = TranslationOptions.from_mapping(options)
        if options.resolve is False:
            return subject
        if isinstance(subject, TranslationKey):
            return self.lookup(locale, subject, options=options)
        if callable(subject):
            return self.resolve(locale, key, subject(key, options), options)
        return subject

    def resolve_link(self, locale: Any, key: Any) -> Any:
        """Map a normalized flat key to the key actually read.

        Called by lookup for every key. Links between keys are not followed
        here, so the key is returned unchanged; subclasses may redirect it.
        """
        return key

    def pluralize(self, locale: Any, entry: Any, count: Any) -> Any:
        return self.pluralizer.pluralize(locale, entry, count)

    def interpolate(self, locale: Any, string: Any, values: Any = None) -> Any:
        return self.interpolator.interpolate(locale, string, values)
