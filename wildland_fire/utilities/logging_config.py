"""Simple console logging configuration for scripts using the library.

The library itself only creates module loggers; nothing here runs on import.
"""

import logging
import sys


class InfoFilter(logging.Filter):
    """Filter that lets INFO/DEBUG go to stdout handler."""

    def filter(self, rec):
        return rec.levelno in (logging.DEBUG, logging.INFO)


def configure_logger(level: int = logging.INFO) -> logging.Logger:
    """Configure the package logger with split stdout/stderr handlers.

    Args:
        level (int, optional): Threshold for the stdout handler. Defaults to logging.INFO.

    Returns:
        logging.Logger: the configured ``wildland_fire`` logger
    """
    logger = logging.getLogger("wildland_fire")
    logger.setLevel(level)

    # Re-running replaces the handlers rather than stacking duplicates
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    fmt = logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")

    h1 = logging.StreamHandler(sys.stdout)
    h1.setLevel(level)
    h1.addFilter(InfoFilter())
    h1.setFormatter(fmt)

    h2 = logging.StreamHandler(sys.stderr)
    h2.setLevel(logging.WARNING)
    h2.setFormatter(fmt)

    logger.addHandler(h1)
    logger.addHandler(h2)

    return logger
