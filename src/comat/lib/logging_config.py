"""Logging configuration for comat.

The library never emits output on its own: the "comat" root logger carries a
NullHandler until an application calls setup_logging() or configures the
standard logging module itself.
"""

import logging
import sys

ROOT_LOGGER_NAME = "comat"
LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return a logger inside the comat namespace.

    Args:
        name: Usually __name__ of the calling module.

    Returns:
        Logger whose name starts with "comat".
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(f"{ROOT_LOGGER_NAME}."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def setup_logging(verbose: bool = False, quiet: bool = False) -> logging.Logger:
    """Attach a stderr handler to the comat logger.

    Args:
        verbose: Log DEBUG messages (template compilation, pass-through tokens).
        quiet: Only log errors. Takes precedence over verbose.

    Returns:
        The configured comat root logger.
    """
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    # Replace a handler from an earlier call instead of stacking them
    for handler in list(logger.handlers):
        if getattr(handler, "_comat_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.setLevel(level)
    handler._comat_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    return logger
