"""Unit tests for translation_kv.logging.setup module."""

import logging
from unittest.mock import patch

import pytest
import structlog

from translation_kv.logging import setup
from translation_kv.logging.setup import (
    _is_test_environment,
    build_processors,
    configure_logging,
    ensure_logging_configured,
    get_module_logger,
    reset_logging,
)

pytestmark = pytest.mark.unit


@pytest.fixture(autouse=True)
def fresh_logging_state():
    reset_logging()
    yield
    reset_logging()


class TestIsTestEnvironment:
    """Test suite for _is_test_environment helper."""

    def test_detects_pytest_in_sys_modules(self):
        assert _is_test_environment() is True


class TestBuildProcessors:
    """Test suite for build_processors."""

    def test_production_renders_json(self):
        assert isinstance(build_processors(True)[-1], structlog.processors.JSONRenderer)

    def test_development_renders_console(self):
        assert isinstance(build_processors(False)[-1], structlog.dev.ConsoleRenderer)


class TestConfigureLogging:
    """Test suite for configure_logging function."""

    def test_configure_logging_returns_logger(self, mock_settings):
        result = configure_logging(settings=mock_settings)

        assert hasattr(result, "info")
        assert hasattr(result, "warning")

    def test_logging_suppressed_in_tests(self, mock_settings):
        configure_logging(settings=mock_settings, log_level="DEBUG")

        assert logging.root.level == logging.CRITICAL + 1

    def test_renderer_follows_settings(self, mock_settings):
        mock_settings.is_production = True

        with patch.object(setup, "build_processors", wraps=build_processors) as build:
            configure_logging(settings=mock_settings)

        build.assert_called_once_with(True)

    def test_is_production_override(self, mock_settings):
        with patch.object(setup, "build_processors", wraps=build_processors) as build:
            configure_logging(settings=mock_settings, is_production=True)

        build.assert_called_once_with(True)


class TestEnsureLoggingConfigured:
    """Test suite for ensure_logging_configured."""

    def test_configures_once(self, mock_settings):
        with patch.object(setup, "configure_logging", wraps=configure_logging) as configure:
            ensure_logging_configured(mock_settings)
            ensure_logging_configured(mock_settings)

        configure.assert_called_once_with(settings=mock_settings)

    def test_skipped_after_explicit_configuration(self, mock_settings):
        configure_logging(settings=mock_settings)

        with patch.object(setup, "configure_logging") as configure:
            ensure_logging_configured(mock_settings)

        configure.assert_not_called()


class TestGetModuleLogger:
    """Test suite for get_module_logger."""

    def test_binds_module_context(self):
        from translation_kv.i18n import resolver

        context = resolver.logger.bind()._context
        assert context["module_path"] == "translation_kv.i18n.resolver"
        assert context["component"] == "resolver"

    def test_returns_logger(self):
        assert hasattr(get_module_logger(), "bind")
