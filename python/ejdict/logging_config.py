"""Logging setup for ejdict.

Library modules log through named loggers; the CLI configures output once.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(verbose: bool = False) -> None:
    """Configure the root logger to write to stderr.

    INFO and above when verbose, WARNING and above otherwise.
    """
    logging.basicConfig(
        stream=sys.stderr,
        level=logging.INFO if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )
    logging.getLogger("ejdict").debug("Logging initialized")


def get_logger(name: str) -> logging.Logger:
    """Returns a named logger instance."""
    return logging.getLogger(name)
