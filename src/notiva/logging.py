"""Logging bootstrap.

Library modules only call ``logging.getLogger(__name__)``; the CLI calls
``setup_logging`` once at startup to route records through Rich.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: str = "WARNING", console: Console | None = None) -> None:
    """Configure the root logger with a Rich handler."""
    root = logging.getLogger()
    root.setLevel(level.upper())

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
        log_time_format="%H:%M:%S",
    )
    handler.setFormatter(logging.Formatter("%(name)s  %(message)s"))
    root.handlers = [handler]

    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
