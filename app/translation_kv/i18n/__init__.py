"""Translation lookup over a flat key-value store.

Main components:
- models: TranslationKey, TranslationOptions, PluralForm, LazyValue
- flattener: KeyFlattener (nested documents <-> flat store keys)
- interpolator: Interpolator and SyntaxDeprecationWarner
- pluralizer: Pluralizer (zero/one/other)
- store: TranslationStore adapter over a KeyValueStore
- resolver: LookupResolver (lookup, default chains)
- backend: KeyValueBackend composing all of the above
"""

from translation_kv.i18n.backend import KeyValueBackend
from translation_kv.i18n.exceptions import (
    I18nError,
    InvalidDataError,
    InvalidPluralizationDataError,
    MissingInterpolationArgumentError,
    ReservedInterpolationKeyError,
)
from translation_kv.i18n.factory import create_backend
from translation_kv.i18n.flattener import KeyFlattener
from translation_kv.i18n.interpolator import Interpolator, SyntaxDeprecationWarner
from translation_kv.i18n.models import (
    RESERVED_KEYS,
    LazyValue,
    PluralForm,
    TranslationKey,
    TranslationOptions,
)
from translation_kv.i18n.pluralizer import Pluralizer
from translation_kv.i18n.resolver import LookupResolver
from translation_kv.i18n.service import TranslationService
from translation_kv.i18n.store import TranslationStore

__all__ = [
    "KeyValueBackend",
    "TranslationService",
    "create_backend",
    "KeyFlattener",
    "Interpolator",
    "SyntaxDeprecationWarner",
    "Pluralizer",
    "LookupResolver",
    "TranslationStore",
    "TranslationKey",
    "TranslationOptions",
    "PluralForm",
    "LazyValue",
    "RESERVED_KEYS",
    "I18nError",
    "InvalidDataError",
    "ReservedInterpolationKeyError",
    "MissingInterpolationArgumentError",
    "InvalidPluralizationDataError",
]
