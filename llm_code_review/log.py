"""Logging setup for the command line.

The package logger is disabled on import; configure_logging() turns it on
with a single stderr sink at the level selected by --verbose or --debug.
"""

import sys

from loguru import logger

PACKAGE_NAME = "llm_code_review"

LOG_FORMAT = "<level>{level: <7}</level> {message}"


def resolve_log_level(verbose: bool = False, debug: bool = False) -> str:
    """Map the verbosity flags to a loguru level name."""
    if debug:
        return "TRACE"
    if verbose:
        return "INFO"
    return "WARNING"


def configure_logging(verbose: bool = False, debug: bool = False, sink=None) -> str:
    """Send package logs to stderr (or sink) at the selected level.

    Returns:
        The level name that was configured.
    """
    level = resolve_log_level(verbose, debug)
    logger.remove()
    logger.add(
        sink if sink is not None else sys.stderr,
        level=level,
        format=LOG_FORMAT,
        colorize=None,
    )
    logger.enable(PACKAGE_NAME)
    return level
