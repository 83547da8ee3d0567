"""Logging setup for the command-line entry point.

Library modules only create loggers; the handler is installed here when
the CLI starts.
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
_HANDLER_NAME = "grocery-cli"


def configure_logging(verbose: bool = False) -> None:
    """Send ``grocery.*`` records to stderr: DEBUG and up when verbose, WARNING otherwise."""
    root = logging.getLogger("grocery")
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)
    for existing in list(root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            root.removeHandler(existing)
    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
