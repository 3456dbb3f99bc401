"""Structured logging for the translation engine (structlog).

Public API:
    - configure_logging(): (Re)configure the structlog pipeline
    - get_module_logger(): Logger bound to the calling module

Example:
    from infrastructure.logging import get_module_logger

    logger = get_module_logger()
    logger.info("translations_loaded", language="fr")
"""

from infrastructure.logging.setup import configure_logging, get_module_logger

__all__ = [
    "configure_logging",
    "get_module_logger",
]
