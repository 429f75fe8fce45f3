"""Feature-level fixtures for translation backend tests."""

from unittest.mock import Mock

import pytest

from translation_kv.i18n import (
    Interpolator,
    KeyFlattener,
    Pluralizer,
    SyntaxDeprecationWarner,
)
from tests.factories.i18n import make_backend, make_translation_document


@pytest.fixture
def flattener():
    """KeyFlattener with the default separator."""
    return KeyFlattener()


@pytest.fixture
def pluralizer():
    return Pluralizer()


@pytest.fixture
def warning_log():
    """Mock logger receiving deprecation warnings."""
    return Mock()


@pytest.fixture
def interpolator(warning_log):
    """Interpolator whose deprecation warnings go to warning_log."""
    return Interpolator(warner=SyntaxDeprecationWarner(log=warning_log))


@pytest.fixture
def backend(memory_store):
    """Backend over an empty in-memory store."""
    return make_backend(store=memory_store)


@pytest.fixture
def populated_backend(backend):
    """Backend with the sample document stored for en and a short one for fr."""
    backend.store_translations("en", make_translation_document())
    backend.store_translations("fr", {"app": {"greeting": "salut"}})
    return backend
