"""Logging setup for the CLI entry point.

Library modules only create ``logging.getLogger(__name__)`` loggers;
handlers are installed here, once, when the CLI starts.
"""

from __future__ import annotations

import logging

_LOG_FORMAT = "%(name)s: %(message)s"


def configure_logging(verbosity: int = 0) -> None:
    """Install a stderr handler on the ``javaeda`` logger.

    ``0`` -> WARNING, ``1`` -> INFO, ``2+`` -> DEBUG.  Uses Rich's
    handler when Rich is importable.
    """
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG

    handler: logging.Handler
    try:
        from rich.console import Console
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s " + _LOG_FORMAT))
    else:
        handler = RichHandler(console=Console(stderr=True), show_path=False, show_time=False)
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))

    root = logging.getLogger("javaeda")
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level)
