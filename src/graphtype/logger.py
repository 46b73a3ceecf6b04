"""Logging for graphtype with CLI output helpers."""

import logging

from rich.console import Console
from rich.logging import RichHandler


class GraphTypeLogger(logging.Logger):
    """
    Logger that combines Python logging with a few CLI formatting methods.

    Standard levels go through a RichHandler on stderr, so translated output
    written to stdout is never interleaved with log records.
    """

    def __init__(self, name: str, level: int = logging.INFO) -> None:
        """
        Initialize the graphtype logger.

        Args:
            name: Logger name
            level: Initial log level
        """
        super().__init__(name, level)
        self.console = Console(stderr=True)

        handler = RichHandler(
            console=self.console,
            rich_tracebacks=True,
            show_time=True,
            show_path=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        self.addHandler(handler)
        self.propagate = False

    def print(self, message: str) -> None:
        """Print a plain message (with Rich markup support)."""
        self.console.print(message)

    def success(self, message: str) -> None:
        """
        Print a success message in green with checkmark icon.

        Args:
            message: Message to display
        """
        self.print(f"[green]✓[/green] {message}")

    def hint(self, message: str) -> None:
        """Print a dimmed hint/secondary message."""
        self.print(f"[dim]{message}[/dim]")


def get_logger(name: str = "graphtype") -> GraphTypeLogger:
    """
    Get or create a graphtype logger instance.

    Args:
        name: Logger name (default: "graphtype")

    Returns:
        GraphTypeLogger instance
    """
    previous = logging.getLoggerClass()
    logging.setLoggerClass(GraphTypeLogger)
    try:
        logger = logging.getLogger(name)
    finally:
        logging.setLoggerClass(previous)

    return logger  # type: ignore[return-value]
