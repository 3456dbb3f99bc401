"""Structlog configuration for the translation engine.

Engine modules log snake_case events with key/value context:

    from infrastructure.logging import get_module_logger

    logger = get_module_logger()
    logger.info("language_changed", language="fr", previous="en")

configure_logging() runs once on import; call it again to apply different
settings (e.g., a LOG_LEVEL read after startup).
"""

import inspect
import logging
import sys
from typing import Optional

import structlog
from structlog.stdlib import BoundLogger

from infrastructure.configuration import Settings
from infrastructure.configuration import settings as default_settings


def _is_test_environment() -> bool:
    return "pytest" in sys.modules


def _silence() -> BoundLogger:
    # Keep a minimal pipeline so calls succeed; the root level drops everything
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", level=logging.CRITICAL + 1, force=True)
    logging.root.setLevel(logging.CRITICAL + 1)
    return structlog.stdlib.get_logger()


def configure_logging(
    settings: Optional[Settings] = None,
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structlog for the process.

    Output is JSON in production and the console renderer otherwise. Under
    pytest nothing is emitted.

    Args:
        settings: Source of LOG_LEVEL and is_production (default: the
            application settings).
        log_level: Overrides settings.LOG_LEVEL.
        is_production: Overrides settings.is_production.

    Returns:
        Root structlog logger.
    """
    if _is_test_environment():
        return _silence()

    settings = settings or default_settings
    production = settings.is_production if is_production is None else is_production

    renderer = (
        structlog.processors.JSONRenderer()
        if production
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.CallsiteParameterAdder(
                parameters=[
                    structlog.processors.CallsiteParameter.FILENAME,
                    structlog.processors.CallsiteParameter.LINENO,
                    structlog.processors.CallsiteParameter.FUNC_NAME,
                ]
            ),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    level_name = (log_level or settings.LOG_LEVEL).upper()
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level_name, logging.INFO),
    )
    return structlog.stdlib.get_logger()


logger: BoundLogger = configure_logging()


def get_module_logger() -> BoundLogger:
    """Get a logger bound to the calling module.

    Binds ``component`` (last dotted part) and ``module_path``, e.g.
    component="manager", module_path="infrastructure.i18n.manager".
    """
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    module = inspect.getmodule(caller) if caller is not None else None
    if module is None:
        return logger.bind(component="unknown")

    return logger.bind(
        component=module.__name__.rsplit(".", 1)[-1],
        module_path=module.__name__,
    )
