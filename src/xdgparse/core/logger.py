from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "xdgparse"


def configure_logging(*, verbose: bool = False, console: Optional[Console] = None) -> logging.Logger:
    """
    Attach a RichHandler (stderr) to the package logger.

    Safe to call more than once: the handler is replaced, never stacked.
    Library code only calls logging.getLogger(__name__).
    """
    log = logging.getLogger(LOGGER_NAME)
    for h in list(log.handlers):
        if getattr(h, "_xdgparse_handler", False):
            log.removeHandler(h)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=verbose,
        markup=False,
        rich_tracebacks=verbose,
    )
    handler._xdgparse_handler = True  # type: ignore[attr-defined]
    handler.setFormatter(logging.Formatter("%(message)s"))

    log.addHandler(handler)
    log.setLevel(logging.DEBUG if verbose else logging.WARNING)
    log.propagate = False
    return log
