from contextlib import contextmanager
from enum import Enum
from typing import Iterator, Optional, Type, TypeVar

import click
from rich.console import Console
from rich.live import Live
from rich.spinner import Spinner as RichSpinner
from rich.text import Text


class LogLevel(Enum):
    """Enum for log levels with corresponding emojis."""

    INFO = ""
    SUCCESS = click.style("✓ ", fg="green", bold=True)
    ERROR = "❌"


T = TypeVar("T", bound="ConsoleLogger")


class ConsoleLogger:
    """A singleton wrapper for terminal messages and spinners.

    Everything goes to stderr; stdout is reserved for response bodies.
    """

    _instance: Optional["ConsoleLogger"] = None

    def __new__(cls: Type[T]) -> T:
        if cls._instance is None:
            cls._instance = super(ConsoleLogger, cls).__new__(cls)
            cls._instance._initialized = False
        return cls._instance  # type: ignore

    def __init__(self):
        if not getattr(self, "_initialized", False):
            self._console = Console(stderr=True)
            self._spinner_live: Optional[Live] = None
            self._spinner = RichSpinner("dots")
            self._initialized = True

    def _stop_spinner_if_active(self) -> None:
        if self._spinner_live and self._spinner_live.is_started:
            self._spinner_live.stop()
            self._spinner_live = None

    def log(
        self, message: str, level: LogLevel = LogLevel.INFO, fg: Optional[str] = None
    ) -> None:
        """Log a message with the specified level and optional color.

        Args:
            message: The message to log
            level: The log level (determines the emoji)
            fg: Optional foreground color for the message
        """
        self._stop_spinner_if_active()

        if not level == LogLevel.INFO:
            emoji = level.value
            if fg:
                formatted_message = f"{emoji} {click.style(message, fg=fg)}"
            else:
                formatted_message = f"{emoji} {message}"
        else:
            formatted_message = message

        click.echo(formatted_message, err=True)

    def success(self, message: str) -> None:
        self.log(message, LogLevel.SUCCESS)

    def error(self, message: str) -> None:
        """Log an error message and exit with status 1."""
        self.log(message, LogLevel.ERROR, "red")
        click.get_current_context().exit(1)

    @contextmanager
    def spinner(self, message: str = "") -> Iterator[None]:
        """Context manager showing a spinner while the block runs.

        Args:
            message: The message to display alongside the spinner
        """
        try:
            self._stop_spinner_if_active()

            self._spinner.text = Text(message)
            self._spinner_live = Live(
                self._spinner,
                console=self._console,
                refresh_per_second=10,
                transient=True,
                auto_refresh=True,
            )
            self._spinner_live.start()
            yield
        finally:
            self._stop_spinner_if_active()
