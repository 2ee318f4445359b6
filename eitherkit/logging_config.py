"""
Logging configuration for the ``eitherkit`` logger.

Library modules only call ``logging.getLogger(__name__)``. Applications that
want to see those records call :func:`configure_logging` once; the root
logger is never touched.
"""

import logging

from eitherkit.config import Settings, load_settings_or_raise

PACKAGE_LOGGER = "eitherkit"

# Marker so repeated configuration replaces our handler instead of stacking.
_HANDLER_ATTR = "_eitherkit_handler"


def configure_logging(settings: Settings | None = None) -> logging.Logger:
    """Attach a stream handler to the package logger.

    Settings default to those loaded from the environment, which raises
    :class:`~eitherkit.exceptions.ConfigurationError` when invalid.
    """
    if settings is None:
        settings = load_settings_or_raise()

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(settings.log_format))
    setattr(handler, _HANDLER_ATTR, True)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for installed in list(package_logger.handlers):
        if getattr(installed, _HANDLER_ATTR, False):
            package_logger.removeHandler(installed)
            installed.close()

    package_logger.addHandler(handler)
    package_logger.setLevel(settings.level_number)
    package_logger.propagate = settings.propagate
    return package_logger


__all__ = [
    "PACKAGE_LOGGER",
    "configure_logging",
]
