"""Logging setup for venvlint.

Every module logs through a child of the ``venvlint`` logger. The CLI
attaches one stderr handler to that logger, so log lines never mix with
the JSON that commands print on stdout.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

PACKAGE_LOGGER = "venvlint"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"
DEBUG_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_HANDLER_MARKER = "_venvlint_cli_handler"


def level_for_flags(*, debug: bool = False, verbose: bool = False, quiet: bool = False) -> int:
    """Map CLI verbosity flags to a logging level.

    Precedence:
    - quiet → ERROR
    - debug → DEBUG
    - verbose → INFO
    - default → WARNING
    """
    if quiet:
        return logging.ERROR
    if debug:
        return logging.DEBUG
    if verbose:
        return logging.INFO
    return logging.WARNING


def configure_logging(
    *,
    debug: bool = False,
    verbose: bool = False,
    quiet: bool = False,
    stream: Optional[TextIO] = None,
) -> logging.Handler:
    """Set the package log level and attach the CLI handler.

    Calling this again replaces the handler from the previous call
    instead of stacking a second one.

    Args:
        debug: Log everything, with timestamps.
        verbose: Log informational messages.
        quiet: Log errors only. Wins over the other flags.
        stream: Destination for log lines (defaults to ``sys.stderr``).

    Returns:
        The handler that was attached.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in list(logger.handlers):
        if getattr(existing, _HANDLER_MARKER, False):
            logger.removeHandler(existing)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(DEBUG_LOG_FORMAT if debug else LOG_FORMAT))
    setattr(handler, _HANDLER_MARKER, True)
    logger.addHandler(handler)
    logger.setLevel(level_for_flags(debug=debug, verbose=verbose, quiet=quiet))
    return handler


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger under the ``venvlint`` namespace."""
    return logging.getLogger(name if name is not None else PACKAGE_LOGGER)
