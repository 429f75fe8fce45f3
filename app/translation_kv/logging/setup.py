"""Structlog configuration for the translation backend.

Module loggers are lazy proxies, so they pick up whatever configuration is
in place when they first log. ``create_backend`` calls
``ensure_logging_configured`` with the application settings; hosts that
configure structlog themselves can call ``configure_logging`` first.

Usage:
    from translation_kv.logging import get_module_logger

    logger = get_module_logger()
    logger.info("stored_translations", locale="en", key_count=3)
"""

import inspect
import logging
import sys
from typing import List, Optional

import structlog
from structlog.stdlib import BoundLogger
from structlog.typing import Processor

from translation_kv.configuration import Settings
from translation_kv.configuration import settings as default_settings

_configured = False


def _is_test_environment() -> bool:
    return "pytest" in sys.modules


def build_processors(is_production: bool) -> List[Processor]:
    """Processor chain ending in a JSON renderer in production, console otherwise."""
    processors: List[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if is_production:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())
    return processors


def configure_logging(
    settings: Optional[Settings] = None,
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structlog over stdlib logging.

    Args:
        settings: Settings supplying LOG_LEVEL and is_production. Defaults to
            the module singleton.
        log_level: Override for settings.LOG_LEVEL.
        is_production: Override for settings.is_production.

    Returns:
        Logger for the caller.
    """
    global _configured
    settings = settings or default_settings
    prod_mode = settings.is_production if is_production is None else is_production

    # Nothing is emitted under pytest
    if _is_test_environment():
        level = logging.CRITICAL + 1
    else:
        level_name = (log_level or settings.LOG_LEVEL).upper()
        level = getattr(logging, level_name, logging.INFO)

    structlog.configure(
        processors=build_processors(prod_mode),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", level=level, force=True)
    _configured = True
    return structlog.stdlib.get_logger()


def ensure_logging_configured(settings: Optional[Settings] = None) -> None:
    """Configure logging from settings unless it has already been done."""
    if not _configured:
        configure_logging(settings=settings)


def reset_logging() -> None:
    """Forget that logging was configured (for testing only)."""
    global _configured
    _configured = False


def get_module_logger() -> BoundLogger:
    """Get a logger for the calling module.

    Binds ``component`` (last dotted part) and ``module_path``, e.g.
    ``{"component": "resolver", "module_path": "translation_kv.i18n.resolver"}``.
    """
    frame = inspect.currentframe()
    module = inspect.getmodule(frame.f_back) if frame and frame.f_back else None
    if module is None:
        return structlog.stdlib.get_logger(component="unknown")
    return structlog.stdlib.get_logger(
        component=module.__name__.split(".")[-1],
        module_path=module.__name__,
    )
