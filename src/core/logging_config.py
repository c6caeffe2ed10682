"""Logging configuration.

Logs go to stderr through Rich so the report printed on stdout stays clean
when the CLI runs in CI.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

# Project loggers follow --verbose; everything else stays at WARNING.
PROJECT_LOGGERS: tuple[str, ...] = ("core", "adapters", "cli")


def setup_logging(verbose: bool = False) -> None:
    """Configure the root logger once per process."""

    level = logging.DEBUG if verbose else logging.WARNING

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.WARNING)

    for handler in list(root_logger.handlers):
        if isinstance(handler, RichHandler):
            root_logger.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
        markup=False,
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    root_logger.addHandler(handler)

    for name in PROJECT_LOGGERS:
        logging.getLogger(name).setLevel(level)
