"""Translation models.

Defines the value types shared by the flattener, resolver, pluralizer and
interpolator.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Callable, Mapping, Optional, Sequence, Tuple, Union

# Joins path segments inside store keys, whatever separator callers use.
FLATTEN_SEPARATOR = "."

# Stands in for FLATTEN_SEPARATOR inside a single path segment.
SEPARATOR_ESCAPE_CHAR = "\x01"

# Option names that can never be interpolation targets.
RESERVED_KEYS: Tuple[str, ...] = ("scope", "default", "separator", "resolve")

# Leaf types a translation document may hold.
SCALAR_TYPES = (str, int, float, bool)


def locale_name(locale: Any) -> str:
    """Return the string form of a locale identifier (enum members use their value)."""
    return str(getattr(locale, "value", locale))


class PluralForm(str, Enum):
    """Plural form tags understood by the pluralizer."""

    ZERO = "zero"
    ONE = "one"
    OTHER = "other"


@dataclass(frozen=True)
class TranslationKey:
    """A translation key as a sequence of path segments.

    Used wherever a value must be told apart from a key to look up, most
    notably in default chains: a TranslationKey is resolved by lookup while
    a plain string is returned as a literal.

    Attributes:
        segments: Path segments (e.g. ("app", "greeting")).
    """

    segments: Tuple[str, ...]

    def __str__(self) -> str:
        """Return the dot-joined key (e.g. "app.greeting")."""
        return FLATTEN_SEPARATOR.join(self.segments)

    @classmethod
    def from_string(
        cls, key_string: str, separator: str = FLATTEN_SEPARATOR
    ) -> "TranslationKey":
        """Create a TranslationKey from a separator-joined string.

        Args:
            key_string: Joined key (e.g. "app.greeting").
            separator: Separator between segments.

        Returns:
            TranslationKey instance.

        Raises:
            ValueError: If key_string is empty.
        """
        if not key_string:
            raise ValueError("Translation key must not be empty")
        return cls(segments=tuple(key_string.split(separator)))


# Keys are accepted as a joined string, a sequence of segments or a TranslationKey.
KeyLike = Union[str, Sequence[str], TranslationKey]


@dataclass(frozen=True)
class LazyValue:
    """Interpolation value computed when its placeholder is substituted.

    The wrapped function receives the full interpolation values mapping.

    Attributes:
        func: Callable producing the substituted text.
    """

    func: Callable[[Mapping[str, Any]], Any]

    def render(self, values: Mapping[str, Any]) -> str:
        result = self.func(values)
        return result if isinstance(result, str) else str(result)


InterpolationValue = Union[str, LazyValue]


def as_interpolation_value(value: Any) -> InterpolationValue:
    """Convert a caller-supplied value into an InterpolationValue."""
    if isinstance(value, LazyValue):
        return value
    if callable(value):
        return LazyValue(value)
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


@dataclass
class TranslationOptions:
    """Options recognized by lookup and translation.

    Attributes:
        scope: Segments prepended to the key when no scope is passed explicitly.
        default: Fallback subject or ordered list of subjects.
        separator: Separator used by the caller's keys instead of ".".
        escape: Escape the separator inside key segments on write.
        resolve: When False, default subjects are returned without resolving.
        count: Count used to pick a plural form.
    """

    scope: Optional[KeyLike] = None
    default: Any = None
    separator: Optional[str] = None
    escape: Optional[bool] = None
    resolve: bool = True
    count: Optional[Union[int, float]] = None
    extra: dict = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, options: Optional[Mapping[str, Any]]) -> "TranslationOptions":
        """Build options from a plain mapping.

        Unrecognized names are kept in ``extra``.

        Args:
            options: Mapping of option names to values, or None.

        Returns:
            TranslationOptions instance.
        """
        if isinstance(options, TranslationOptions):
            return options
        options = dict(options or {})
        known = {
            name: options.pop(name)
            for name in ("scope", "default", "separator", "escape", "resolve", "count")
            if name in options
        }
        return cls(**known, extra=options)

    def without_default(self) -> "TranslationOptions":
        """Return a copy with no default chain."""
        return replace(self, default=None)
