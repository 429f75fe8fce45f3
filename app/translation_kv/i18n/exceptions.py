"""Exceptions for the translation backend.

All of them are raised to the immediate caller; none are retried or
swallowed. A missing translation is not an error and is reported as None.
"""

from typing import Any, Mapping


class I18nError(Exception):
    """Base exception for all translation backend errors.

    Example:
        try:
            backend.translate("en", "greeting", name="Ada")
        except I18nError as e:
            logger.error("translation_failed", error=str(e))
    """

    pass


class InvalidDataError(I18nError):
    """Raised when a translation value cannot be persisted.

    Only strings, numbers and booleans can be stored; callables and other
    objects are rejected.

    Attributes:
        key: Flat key of the offending entry.
        value: The rejected value.
    """

    def __init__(self, key: str, value: Any, reason: str = "cannot handle callables"):
        self.key = key
        self.value = value
        super().__init__(
            f"Key-value stores {reason} (key: {key!r}, value: {value!r})"
        )


class ReservedInterpolationKeyError(I18nError):
    """Raised when a template uses a reserved name as a placeholder.

    Example:
        >>> interpolator.interpolate("en", "%{default}", {"default": "x"})
        Traceback (most recent call last):
        ...
        ReservedInterpolationKeyError: reserved key 'default' used in '%{default}'
    """

    def __init__(self, key: str, string: str):
        self.key = key
        self.string = string
        super().__init__(f"reserved key {key!r} used in {string!r}")


class MissingInterpolationArgumentError(I18nError):
    """Raised when a placeholder has no supplied value.

    Attributes:
        values: The values as passed by the caller, before any filtering.
        string: The template being interpolated.
    """

    def __init__(self, values: Mapping[str, Any], string: str):
        self.values = dict(values)
        self.string = string
        super().__init__(f"missing interpolation argument in {string!r} ({self.values!r} given)")


class InvalidPluralizationDataError(I18nError):
    """Raised when the plural form selected for a count is absent.

    Attributes:
        entry: The pluralization entry.
        count: The count that selected the form.
    """

    def __init__(self, entry: Mapping[str, Any], count: Any):
        self.entry = entry
        self.count = count
        super().__init__(
            f"translation data {entry!r} can not be used with :count => {count}"
        )
