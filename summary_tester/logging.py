"""Logging utilities."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(level: str = "INFO") -> None:
    """Install a rich console handler on the root logger.

    Safe to call more than once; the handler is only added the first time.

    Args:
        level: Logging level name.
    """
    root = logging.getLogger()
    root.setLevel(level.upper())
    if any(isinstance(h, RichHandler) for h in root.handlers):
        return

    # stderr keeps piped CLI output (fetch --json, clean) free of log lines.
    handler = RichHandler(
        console=Console(stderr=True), rich_tracebacks=True, show_time=True, show_level=True
    )
    handler.setFormatter(logging.Formatter(fmt="%(name)s: %(message)s", datefmt="%X"))
    root.addHandler(handler)
