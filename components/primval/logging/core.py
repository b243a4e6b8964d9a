"""Logger factory for the primval components.

All loggers live under the ``primval`` namespace. The level of that namespace
is read once from ``PRIMVAL_LOG_LEVEL`` (default ``WARNING``); handlers are
left to the application.
"""

import logging
import os

LOGGER_NAMESPACE = "primval"
DEFAULT_LOG_LEVEL = "WARNING"

_configured = False


def _configure_namespace() -> None:
    global _configured
    if _configured:
        return
    level_name = os.getenv("PRIMVAL_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.getLogger(LOGGER_NAMESPACE).setLevel(level)
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``primval`` namespace.

    Args:
        name: Usually ``__name__`` of the calling module.

    Returns:
        logging.Logger: The namespaced logger.
    """
    _configure_namespace()
    if name == LOGGER_NAMESPACE or name.startswith(LOGGER_NAMESPACE + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAMESPACE}.{name}")
