"""Structured logging.

Logging configuration for the translation backend using structlog.

Public API:
    - configure_logging(): Configure structlog from settings
    - ensure_logging_configured(): Configure once, used by create_backend
    - get_module_logger(): Get a logger for the calling module

Example:
    from translation_kv.logging import get_module_logger

    logger = get_module_logger()
    logger.info("module_initialized")
"""

from translation_kv.logging.setup import (
    configure_logging,
    ensure_logging_configured,
    get_module_logger,
)

__all__ = [
    "configure_logging",
    "ensure_logging_configured",
    "get_module_logger",
]
