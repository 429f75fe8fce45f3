import sys
from pathlib import Path

import pytest

# Ensure the application root is on sys.path so `translation_kv` and
# `tests.factories` import however pytest is invoked.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from translation_kv.logging import configure_logging  # noqa: E402
from translation_kv.kvstore import InMemoryKeyValueStore, reset_store  # noqa: E402
from translation_kv.services.providers import (  # noqa: E402
    get_settings,
    get_translation_service,
)


configure_logging()


@pytest.fixture
def memory_store():
    """Empty in-memory key-value store."""
    return InMemoryKeyValueStore()


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset process-wide singletons around each test."""
    reset_store()
    get_settings.cache_clear()
    get_translation_service.cache_clear()
    yield
    reset_store()
    get_settings.cache_clear()
    get_translation_service.cache_clear()
