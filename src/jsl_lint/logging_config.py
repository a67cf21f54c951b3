"""Logging configuration for jsl-lint.

At INFO the runner reports each ``jsl -conf <file>`` command line and the
linter's exit status. At DEBUG it also reports the configuration file
lifecycle, and records carry the worker thread name so that concurrent
background runs can be told apart.
"""
import logging
import sys

LOGGER_NAME = "jsl_lint"
DEFAULT_FORMAT = "%(levelname)s: %(message)s"
DEBUG_FORMAT = "%(levelname)s [%(threadName)s] %(name)s: %(message)s"


def setup_logging(verbose: bool = False, quiet: bool = False, debug: bool = False) -> None:
    """Configure logging for jsl-lint.

    Args:
        verbose: Show linter command lines and exit statuses (INFO level)
        quiet: Enable quiet (ERROR only) logging
        debug: Also show configuration file handling (DEBUG level); wins over
            the other two flags
    """
    if debug:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(DEBUG_FORMAT if debug else DEFAULT_FORMAT))

    logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Get logger for module.

    Args:
        name: Module name (will be prefixed with 'jsl_lint.')

    Returns:
        Logger instance
    """
    if not name.startswith(f"{LOGGER_NAME}.") and name != LOGGER_NAME:
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)
