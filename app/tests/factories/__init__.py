"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_backend,
    make_translation_document,
    make_translation_key,
    make_translation_options,
)

__all__ = [
    "make_backend",
    "make_translation_document",
    "make_translation_key",
    "make_translation_options",
]
