from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

from imagediff.config import PACKAGE_NAME, default_log_level


def configure_logging(level: int | None = None, *, console: Console | None = None) -> logging.Logger:
    """Route ``imagediff`` diagnostics to stderr through Rich.

    Level defaults to ``$IMAGEDIFF_LOG`` (warning when unset), so stdout stays
    reserved for the JSON payload. Safe to call more than once.
    """
    logger = logging.getLogger(PACKAGE_NAME)
    for handler in list(logger.handlers):
        if getattr(handler, "_imagediff_handler", False):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=False,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    handler._imagediff_handler = True  # type: ignore[attr-defined]

    logger.addHandler(handler)
    logger.setLevel(default_log_level() if level is None else level)
    logger.propagate = False
    return logger
