"""Tests for translation_kv.i18n.interpolator module."""

from unittest.mock import Mock

import pytest

from translation_kv.i18n import (
    Interpolator,
    LazyValue,
    MissingInterpolationArgumentError,
    ReservedInterpolationKeyError,
    SyntaxDeprecationWarner,
)

pytestmark = pytest.mark.unit


class TestInterpolate:
    """Tests for Interpolator.interpolate()."""

    def test_substitutes_placeholder(self, interpolator):
        assert interpolator.interpolate("en", "Hello %{name}", {"name": "Ada"}) == "Hello Ada"

    def test_substitutes_repeated_placeholders(self, interpolator):
        result = interpolator.interpolate("en", "%{a}-%{b}-%{a}", {"a": "x", "b": "y"})

        assert result == "x-y-x"

    def test_converts_values_to_string(self, interpolator):
        assert interpolator.interpolate("en", "%{n} items", {"n": 3}) == "3 items"

    def test_none_value_renders_empty(self, interpolator):
        assert interpolator.interpolate("en", "Hi %{name}!", {"name": None}) == "Hi !"

    def test_no_values_returns_template(self, interpolator):
        """Without values nothing is checked, even unfilled placeholders."""
        assert interpolator.interpolate("en", "Hi %{name}", {}) == "Hi %{name}"
        assert interpolator.interpolate("en", "Hi %{name}", None) == "Hi %{name}"

    def test_non_string_template_returned_unchanged(self, interpolator):
        entry = {"one": "%{count} item"}

        assert interpolator.interpolate("en", entry, {"count": 1}) is entry
        assert interpolator.interpolate("en", 42, {"count": 1}) == 42

    def test_template_without_placeholders_returned_as_is(self, interpolator):
        assert interpolator.interpolate("en", "100%% sure", {"unused": "x"}) == "100%% sure"

    def test_unused_values_are_ignored(self, interpolator):
        result = interpolator.interpolate("en", "Hi %{name}", {"name": "Ada", "extra": "x"})

        assert result == "Hi Ada"

    def test_double_percent_renders_percent(self, interpolator):
        result = interpolator.interpolate("en", "%{rate}%% off, %%{literal}", {"rate": 20})

        assert result == "20% off, %{literal}"

    def test_callable_value_receives_all_values(self, interpolator):
        seen = {}

        def shout(values):
            seen.update(values)
            return values["name"].upper()

        result = interpolator.interpolate("en", "Hi %{loud}", {"name": "ada", "loud": shout})

        assert result == "Hi ADA"
        assert seen["name"] == "ada"

    def test_lazy_value_is_rendered(self, interpolator):
        lazy = LazyValue(lambda values: len(values))

        assert interpolator.interpolate("en", "%{size}", {"size": lazy}) == "1"

    def test_callable_not_called_when_unused(self, interpolator):
        func = Mock(return_value="x")

        interpolator.interpolate("en", "Hi %{name}", {"name": "Ada", "other": func})

        func.assert_not_called()

    def test_reserved_key_raises(self, interpolator):
        with pytest.raises(ReservedInterpolationKeyError) as exc_info:
            interpolator.interpolate("en", "%{default}", {"default": "x"})

        assert exc_info.value.key == "default"
        assert exc_info.value.string == "%{default}"

    @pytest.mark.parametrize("name", ["scope", "default", "separator", "resolve"])
    def test_every_reserved_key_is_rejected(self, interpolator, name):
        with pytest.raises(ReservedInterpolationKeyError):
            interpolator.interpolate("en", f"value: %{{{name}}}", {name: "x", "a": 1})

    def test_missing_argument_raises_with_original_values(self, interpolator):
        values = {"other": 1}

        with pytest.raises(MissingInterpolationArgumentError) as exc_info:
            interpolator.interpolate("en", "Hi %{name}", values)

        assert exc_info.value.values == {"other": 1}
        assert exc_info.value.string == "Hi %{name}"

    def test_does_not_mutate_values(self, interpolator):
        values = {"name": "Ada", "unused": "x", "n": 1}

        interpolator.interpolate("en", "%{name} %{n}", values)

        assert values == {"name": "Ada", "unused": "x", "n": 1}


class TestDeprecatedSyntax:
    """Tests for the {{name}} placeholder syntax."""

    def test_deprecated_syntax_is_interpolated(self, interpolator):
        assert interpolator.interpolate("en", "Hi {{name}}", {"name": "Ada"}) == "Hi Ada"

    def test_deprecated_syntax_logs_warning(self, interpolator, warning_log):
        interpolator.interpolate("en", "Hi {{name}}", {"name": "Ada"})

        warning_log.warning.assert_called_once_with(
            "deprecated_interpolation_syntax",
            placeholder="{{name}}",
            replacement="%{name}",
        )

    def test_warning_emitted_once_per_warner(self, interpolator, warning_log):
        interpolator.interpolate("en", "Hi {{name}}", {"name": "Ada"})
        interpolator.interpolate("en", "Bye {{name}} {{other}}", {"name": "Ada", "other": 1})

        assert warning_log.warning.call_count == 1

    def test_escaped_deprecated_syntax_stays_literal(self, interpolator, warning_log):
        result = interpolator.interpolate("en", "Hi \\{{name}}", {"name": "x"})

        assert result == "Hi {{name}}"
        warning_log.warning.assert_not_called()

    def test_disabled_warner_logs_nothing(self):
        log = Mock()
        interpolator = Interpolator(warner=SyntaxDeprecationWarner(log=log, enabled=False))

        interpolator.interpolate("en", "Hi {{name}}", {"name": "Ada"})

        log.warning.assert_not_called()

    def test_missing_deprecated_argument_raises(self, interpolator):
        with pytest.raises(MissingInterpolationArgumentError) as exc_info:
            interpolator.interpolate("en", "Hi {{name}}", {"other": 1})

        assert exc_info.value.string == "Hi %{name}"
