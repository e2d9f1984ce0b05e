"""Logging setup shared by the library, the CLI and the HTTP server."""

from __future__ import annotations

import logging

from blogdoc.config import BLOGDOC_LOG_LEVEL

_ROOT_LOGGER_NAME = "blogdoc"
_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a module logger.

    Modules outside the ``blogdoc`` package (the server) are parented under the
    ``blogdoc`` logger so a single ``configure_logging`` call covers them.
    """
    if name == _ROOT_LOGGER_NAME or name.startswith(_ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{_ROOT_LOGGER_NAME}.{name}")


def configure_logging(level: str | int | None = None) -> logging.Logger:
    """Attach a stream handler to the ``blogdoc`` logger and set its level.

    Calling this more than once only updates the level.
    """
    logger = logging.getLogger(_ROOT_LOGGER_NAME)
    resolved = level if level is not None else BLOGDOC_LOG_LEVEL
    if isinstance(resolved, str):
        resolved = logging.getLevelName(resolved.upper())
        if not isinstance(resolved, int):
            resolved = logging.INFO
    logger.setLevel(resolved)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        logger.addHandler(handler)
    return logger
