"""Logger configuration."""

import sys

from loguru import logger

DEBUG_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
)
INFO_FORMAT = "<level>{message}</level>"


def setup_logger(verbose: bool = False, debug: bool = False) -> None:
    """Replace loguru's default sink with one sized to the requested verbosity.

    Args:
        verbose: Show INFO messages (progress and counts)
        debug: Show DEBUG messages with timestamps and call sites
    """
    logger.remove()

    if debug:
        logger.add(sys.stderr, level="DEBUG", format=DEBUG_FORMAT)
    elif verbose:
        logger.add(sys.stderr, level="INFO", format=INFO_FORMAT)
    else:
        logger.add(sys.stderr, level="WARNING", format=INFO_FORMAT)
