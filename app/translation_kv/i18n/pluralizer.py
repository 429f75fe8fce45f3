"""Plural form selection."""

from typing import Any, Mapping

from translation_kv.i18n.exceptions import InvalidPluralizationDataError
from translation_kv.i18n.models import PluralForm


class Pluralizer:
    """Selects the variant of a pluralization entry for a count.

    Only the zero/one/other rule set is supported: ``zero`` is used for a
    count of 0 when the entry defines it, ``one`` for 1 and ``other``
    otherwise.
    """

    def pluralize(self, locale: Any, entry: Any, count: Any) -> Any:
        """Return the form of entry selected by count.

        Args:
            locale: Locale of the entry.
            entry: Pluralization mapping, or an already resolved value.
            count: Count to pluralize for. None leaves entry unchanged.

        Returns:
            The selected variant, or entry itself when it is not a mapping.

        Raises:
            InvalidPluralizationDataError: If the selected form is absent.
        """
        if not isinstance(entry, Mapping) or count is None:
            return entry

        forms = {getattr(key, "value", str(key)): value for key, value in entry.items()}
        if count == 0 and PluralForm.ZERO.value in forms:
            form = PluralForm.ZERO
        elif count == 1:
            form = PluralForm.ONE
        else:
            form = PluralForm.OTHER

        if form.value not in forms:
            raise InvalidPluralizationDataError(entry, count)
        return forms[form.value]
