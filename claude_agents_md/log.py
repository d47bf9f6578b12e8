from __future__ import annotations

from rich.console import Console
from rich.markup import escape


class CLILogger:
    """Console output helpers shared by every part of the wrapper.

    Regular messages go to stdout, errors to stderr.  Debug lines are only
    printed once :meth:`set_debug` enabled them (driven by the ``DEBUG``
    environment variable).
    """

    console = Console(highlight=False, soft_wrap=True)
    error_console = Console(stderr=True, highlight=False, soft_wrap=True)
    debug_enabled = False

    @classmethod
    def set_debug(cls, enabled: bool) -> None:
        cls.debug_enabled = enabled

    @classmethod
    def debug(cls, message: str) -> None:
        if cls.debug_enabled:
            cls.console.print(message, markup=False)

    @classmethod
    def log(cls, message: str = "") -> None:
        cls.console.print(message)

    @classmethod
    def log_info(cls, message: str) -> None:
        cls.console.print(f"[cyan]{message}[/cyan]")

    @classmethod
    def log_success(cls, message: str) -> None:
        cls.console.print(f"[yellow]✓ {message}[/yellow]")

    @classmethod
    def log_warning(cls, message: str) -> None:
        cls.console.print(f"[red]⚠️  {message}[/red]")

    @classmethod
    def log_error(cls, message: str) -> None:
        cls.error_console.print(f"[bold red]Error:[/bold red] {escape(message)}")

    @classmethod
    def prompt(cls, question: str) -> str:
        return cls.console.input(f"[yellow]{question}[/yellow]")
