"""Tests for translation_kv.i18n.store module."""

from enum import Enum

import pytest

from translation_kv.i18n import TranslationStore
from translation_kv.kvstore import InMemoryKeyValueStore

pytestmark = pytest.mark.unit


class Lang(str, Enum):
    EN = "en"


@pytest.fixture
def translation_store(memory_store):
    return TranslationStore(memory_store)


class TestTranslationStore:
    """Tests for TranslationStore adapter."""

    def test_write_prefixes_locale_and_serializes(self, translation_store, memory_store):
        written = translation_store.write("en", {"app.greeting": "hi", "app.count": 2})

        assert written == 2
        assert memory_store.get("en.app.greeting") == '"hi"'
        assert memory_store.get("en.app.count") == "2"

    def test_write_keeps_unicode_readable(self, translation_store, memory_store):
        translation_store.write("fr", {"deleted": "supprimé"})

        assert memory_store.get("fr.deleted") == '"supprimé"'

    def test_read_decodes_values(self, translation_store):
        translation_store.write("en", {"a": 1, "b": True, "c": ""})

        assert translation_store.read("en.a") == 1
        assert translation_store.read("en.b") is True
        assert translation_store.read("en.c") == ""

    def test_read_missing_returns_none(self, translation_store):
        assert translation_store.read("en.missing") is None

    def test_read_returns_raw_text_that_is_not_json(self, memory_store):
        memory_store.set("en.legacy", "plain text")

        assert TranslationStore(memory_store).read("en.legacy") == "plain text"

    def test_read_raw_null_is_not_missing(self, memory_store):
        memory_store.set("en.word", "null")

        assert TranslationStore(memory_store).read("en.word") == "null"

    def test_read_children(self, translation_store):
        translation_store.write("en", {"app.a": 1, "app.b.c": 2, "application": 3})

        assert translation_store.read_children("en.app") == {
            "en.app.a": 1,
            "en.app.b.c": 2,
        }

    def test_read_children_escapes_glob_characters(self, translation_store):
        translation_store.write("en", {"q[1].a": "x", "q1.b": "y"})

        assert translation_store.read_children("en.q[1]") == {"en.q[1].a": "x"}

    def test_locales_deduplicated(self, translation_store, memory_store):
        translation_store.write("en", {"a": 1, "b": 2, "c.d": 3})
        translation_store.write("fr", {"a": 1})
        memory_store.set("nodot", "x")
        memory_store.set(".orphan", "x")

        assert translation_store.locales() == {"en", "fr"}

    def test_enum_locale_uses_value(self, translation_store):
        translation_store.write(Lang.EN, {"a": 1})

        assert translation_store.locales() == {"en"}
        assert translation_store.store_key(Lang.EN, "a") == "en.a"

    def test_every_read_goes_to_store(self):
        store = InMemoryKeyValueStore()
        translation_store = TranslationStore(store)
        translation_store.write("en", {"a": "old"})

        store.set("en.a", '"new"')

        assert translation_store.read("en.a") == "new"
