"""Diagnostic channel setup for command-line runs."""

import logging
import sys

LOG_FORMAT = "%(levelname)s: %(message)s"


def configure_logging(verbosity: int = 0) -> None:
    """Send log records to stderr, WARNING by default.

    Positive verbosity lowers the threshold to INFO (1) or DEBUG (2+);
    negative verbosity raises it to ERROR.
    """
    if verbosity < 0:
        level = logging.ERROR
    elif verbosity == 0:
        level = logging.WARNING
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG
    logging.basicConfig(
        level=level, format=LOG_FORMAT, stream=sys.stderr, force=True
    )
