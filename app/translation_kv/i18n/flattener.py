"""Conversion between nested translation documents and flat store keys."""

from typing import Any, Dict, Iterator, Mapping, Optional, Sequence, Tuple

from translation_kv.i18n.exceptions import InvalidDataError
from translation_kv.i18n.models import (
    FLATTEN_SEPARATOR,
    SEPARATOR_ESCAPE_CHAR,
    SCALAR_TYPES,
    KeyLike,
    TranslationKey,
    locale_name,
)


class KeyFlattener:
    """Flattens nested translation documents into dotted keys and back.

    Every nested mapping is walked down to its leaves, including
    pluralization entries, which end up as one child key per plural form
    (``cart.items.one``, ``cart.items.other``). Reconstruction reassembles
    them into a mapping that the pluralizer accepts unchanged.

    Attributes:
        default_separator: Separator assumed for caller keys when none is given.
    """

    def __init__(self, default_separator: str = FLATTEN_SEPARATOR):
        self.default_separator = default_separator

    @staticmethod
    def escape_default_separator(segment: Any) -> str:
        """Replace the flatten separator inside one segment."""
        return str(segment).replace(FLATTEN_SEPARATOR, SEPARATOR_ESCAPE_CHAR)

    @staticmethod
    def unescape_default_separator(segment: str) -> str:
        return segment.replace(SEPARATOR_ESCAPE_CHAR, FLATTEN_SEPARATOR)

    def flatten_keys(
        self,
        data: Mapping[Any, Any],
        escape: bool,
        prev_key: Optional[str] = None,
    ) -> Iterator[Tuple[str, Any]]:
        """Yield (flat key, value) for every node of data, parents first."""
        for key, value in data.items():
            key = self.escape_default_separator(key) if escape else str(key)
            curr_key = f"{prev_key}{FLATTEN_SEPARATOR}{key}" if prev_key else key
            yield curr_key, value
            if isinstance(value, Mapping):
                yield from self.flatten_keys(value, escape, curr_key)

    def flatten(
        self,
        locale: Any,
        data: Mapping[Any, Any],
        escape: bool = True,
        subtree: bool = False,
    ) -> Dict[str, Any]:
        """Flatten a nested document into flat keys.

        Args:
            locale: Locale the document belongs to. Keys are returned without
                the locale prefix.
            data: Nested translation document.
            escape: Escape the separator inside each key segment.
            subtree: Also include intermediate mappings under their own key.

        Returns:
            Mapping of flat key to leaf value. None leaves are dropped.

        Raises:
            InvalidDataError: If a leaf is callable or not a string, number or
                boolean. The whole document is checked before returning.
        """
        flat: Dict[str, Any] = {}
        for key, value in self.flatten_keys(data, escape):
            if isinstance(value, Mapping):
                if subtree:
                    flat[key] = value
                continue
            if value is None:
                continue
            store_key = f"{locale_name(locale)}{FLATTEN_SEPARATOR}{key}"
            if callable(value):
                raise InvalidDataError(store_key, value)
            if not isinstance(value, SCALAR_TYPES):
                raise InvalidDataError(
                    store_key, value, f"cannot handle {type(value).__name__} values"
                )
            flat[key] = value
        return flat

    def unflatten(self, prefix: str, entries: Mapping[str, Any]) -> Dict[str, Any]:
        """Rebuild the nested structure below prefix.

        Args:
            prefix: Store key the entries live under (without trailing ".").
            entries: Mapping of full store keys to values.

        Returns:
            Nested mapping, one level per remaining key segment. Segment
            escapes are reversed.
        """
        result: Dict[str, Any] = {}
        start = len(prefix) + len(FLATTEN_SEPARATOR)
        for full_key in sorted(entries):
            *parents, leaf = full_key[start:].split(FLATTEN_SEPARATOR)
            node = result
            for segment in parents:
                segment = self.unescape_default_separator(segment)
                child = node.get(segment)
                if not isinstance(child, dict):
                    child = node[segment] = {}
                node = child
            node[self.unescape_default_separator(leaf)] = entries[full_key]
        return result

    def normalize_flat_keys(
        self,
        locale: Any,
        key: Optional[KeyLike],
        scope: Optional[KeyLike] = None,
        separator: Optional[str] = None,
    ) -> str:
        """Join scope and key into a single flat key.

        Args:
            locale: Locale of the lookup (not part of the result).
            key: Key as a string, a sequence of segments or a TranslationKey.
            scope: Optional scope in the same forms as key.
            separator: Separator used inside string parts. Defaults to
                default_separator.

        Returns:
            Flat key joined with ".", without the locale prefix.
        """
        separator = separator or self.default_separator
        parts = []
        for part in (scope, key):
            parts.extend(self._normalize_part(part, separator))
        return FLATTEN_SEPARATOR.join(parts)

    def _normalize_part(self, part: Any, separator: str) -> Sequence[str]:
        if part is None:
            return []
        if isinstance(part, TranslationKey):
            return [self.escape_default_separator(segment) for segment in part.segments]
        if isinstance(part, (list, tuple)):
            return [
                normalized
                for item in part
                for normalized in self._normalize_part(item, separator)
            ]
        part = str(part)
        if separator != FLATTEN_SEPARATOR:
            part = part.replace(FLATTEN_SEPARATOR, SEPARATOR_ESCAPE_CHAR).replace(
                separator, FLATTEN_SEPARATOR
            )
        return [part]
