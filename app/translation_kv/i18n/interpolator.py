"""String interpolation for translated messages.

Canonical placeholders are written ``%{name}``. The older ``{{name}}``
form is still accepted and rewritten to the canonical one, with a
deprecation warning sent to the injected warner; ``\\{{name}}`` keeps the
braces as literal text. ``%%`` renders a single ``%``.
"""

import re
from typing import Any, Dict, Mapping, Optional

from structlog.stdlib import BoundLogger

from translation_kv.i18n.exceptions import (
    MissingInterpolationArgumentError,
    ReservedInterpolationKeyError,
)
from translation_kv.i18n.models import (
    RESERVED_KEYS,
    LazyValue,
    as_interpolation_value,
)
from translation_kv.logging import get_module_logger

logger = get_module_logger()

RESERVED_KEYS_PATTERN = re.compile(r"%\{(" + "|".join(RESERVED_KEYS) + r")\}")
DEPRECATED_INTERPOLATION_SYNTAX_PATTERN = re.compile(r"(\\)?\{\{([^}]+)\}\}")
INTERPOLATION_SYNTAX_PATTERN = re.compile(r"%\{([^}]+)\}")
SUBSTITUTION_PATTERN = re.compile(r"%%|%\{([^}]+)\}")


class SyntaxDeprecationWarner:
    """Emits the deprecated placeholder syntax warning once per instance.

    Attributes:
        enabled: When False nothing is ever logged.
        warned: Whether the warning has been emitted.
    """

    def __init__(self, log: Optional[BoundLogger] = None, enabled: bool = True):
        self._log = log or logger
        self.enabled = enabled
        self.warned = False

    def warn(self, key: str) -> None:
        if not self.enabled or self.warned:
            return
        self.warned = True
        self._log.warning(
            "deprecated_interpolation_syntax",
            placeholder=f"{{{{{key}}}}}",
            replacement=f"%{{{key}}}",
        )


class Interpolator:
    """Substitutes named placeholders in templates with caller values."""

    def __init__(self, warner: Optional[SyntaxDeprecationWarner] = None):
        self.warner = warner or SyntaxDeprecationWarner()

    def _rewrite_deprecated(self, match: "re.Match[str]") -> str:
        escaped, key = match.group(1), match.group(2)
        if escaped:
            return f"{{{{{key}}}}}"
        self.warner.warn(key)
        return f"%{{{key}}}"

    def interpolate(
        self, locale: Any, string: Any, values: Optional[Mapping[Any, Any]] = None
    ) -> Any:
        """Interpolate values into a template.

        Args:
            locale: Locale of the message (kept for symmetry with lookup).
            string: Template. Anything but a str is returned unchanged.
            values: Placeholder values. Callables and LazyValue instances are
                rendered with the full values mapping; everything else is
                converted with str(). Reserved names and names without a
                placeholder are ignored.

        Returns:
            The interpolated string.

        Raises:
            ReservedInterpolationKeyError: If the template uses a reserved
                name as a placeholder.
            MissingInterpolationArgumentError: If a placeholder has no value.
        """
        if not isinstance(string, str) or not values:
            return string
        original_values = dict(values)

        string = DEPRECATED_INTERPOLATION_SYNTAX_PATTERN.sub(
            self._rewrite_deprecated, string
        )

        names = set(INTERPOLATION_SYNTAX_PATTERN.findall(string))
        if not names:
            return string

        prepared: Dict[str, str] = {}
        for key, value in original_values.items():
            name = str(key)
            if name in RESERVED_KEYS or name not in names:
                continue
            value = as_interpolation_value(value)
            if isinstance(value, LazyValue):
                value = value.render(original_values)
            prepared[name] = value

        def substitute(match: "re.Match[str]") -> str:
            if match.group(1) is None:
                return "%"
            return prepared[match.group(1)]

        try:
            return SUBSTITUTION_PATTERN.sub(substitute, string)
        except KeyError:
            reserved = RESERVED_KEYS_PATTERN.search(string)
            if reserved:
                raise ReservedInterpolationKeyError(reserved.group(1), string) from None
            logger.debug(
                "missing_interpolation_argument",
                locale=str(locale),
                available_values=sorted(prepared),
            )
            raise MissingInterpolationArgumentError(original_values, string) from None
