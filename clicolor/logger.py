"""Logging setup for the clicolor command line."""
import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: int | str = logging.WARNING) -> logging.Logger:
    """Configures and returns the package logger."""
    logger = logging.getLogger("clicolor")
    logger.setLevel(level.upper() if isinstance(level, str) else level)

    if not logger.handlers:
        stream_handler = logging.StreamHandler(sys.stderr)
        stream_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(stream_handler)

    return logger
