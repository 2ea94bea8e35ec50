"""Logging setup for the voxmath package logger."""
import logging
import sys
from typing import Optional, TextIO

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: int = logging.INFO, stream: Optional[TextIO] = None) -> logging.Logger:
    """
    Route 'voxmath' records, such as failed diagnostic checks, to one stream.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        stream: Destination stream, stderr when not given.

    Returns:
        The configured 'voxmath' logger.
    """
    logger = logging.getLogger("voxmath")
    logger.setLevel(level)

    # Replace, never stack, handlers on repeated calls
    logger.handlers.clear()

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S'))
    logger.addHandler(handler)
    return logger
