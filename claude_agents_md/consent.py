from __future__ import annotations

from typing import Callable, Optional

from .constants import CONSENT_FLAG_CONTENT
from .locator import EntryPoint, Installation
from .log import CLILogger

ACCEPTED_ANSWERS = ("yes", "y")


def consent_needed(installation: Installation, entry: EntryPoint) -> bool:
    """Consent is asked again whenever the patched copy or the flag is missing."""
    return not entry.patched.exists() or not installation.consent_flag.exists()


def is_accepted(answer: str) -> bool:
    return answer.strip().lower() in ACCEPTED_ANSWERS


def _print_notice() -> None:
    CLILogger.log("\n[bold yellow]🔥 claude-agents-md CONSENT REQUIRED 🔥[/bold yellow]\n")
    CLILogger.log("[cyan]----------------------------------------[/cyan]")
    CLILogger.log("[bold]What is claude-agents-md?[/bold]")
    CLILogger.log("This package creates a wrapper around the official Claude CLI tool that:")
    CLILogger.log("  1. [red]Ignores CLAUDE.md[/red] and uses AGENTS.md instead")
    CLILogger.log("  2. Automatically updates to the latest Claude CLI version")
    CLILogger.log("  3. [green]Supports CLAUDE.md mode[/green] with the --claude flag\n")
    CLILogger.log("[bold]By using claude-agents-md in AGENTS mode:[/bold]")
    CLILogger.log(
        "  • You acknowledge that CLAUDE.md is being ignored and claude will follow "
        "instructions from AGENTS.md"
    )
    CLILogger.log("  • You accept full responsibility for any rule following implications\n")
    CLILogger.log("[cyan]----------------------------------------[/cyan]\n")


def ask_for_consent(prompt: Optional[Callable[[str], str]] = None) -> bool:
    """Show the consent notice and read a yes/no answer.

    Args:
        prompt: Callable reading one line of input, defaults to
            :meth:`CLILogger.prompt`.  End of input counts as a decline.

    Returns:
        Whether the user agreed.
    """
    read = prompt or CLILogger.prompt

    _print_notice()
    try:
        answer = read("Do you consent to using claude-agents-md with these modifications? (yes/no): ")
    except EOFError:
        answer = ""

    if is_accepted(answer):
        CLILogger.log("\n[yellow]🔥 AGENTS MODE APPROVED 🔥[/yellow]")
        return True

    CLILogger.log("\n[cyan]Aborted. AGENTS mode not activated.[/cyan]")
    CLILogger.log("If you want the official Claude CLI with normal behaviour, run:")
    CLILogger.log("claude")
    return False


def record_consent(installation: Installation) -> bool:
    try:
        _ = installation.consent_flag.write_text(CONSENT_FLAG_CONTENT, encoding="utf-8")
    except OSError as e:
        CLILogger.debug(f"Error creating consent flag file: {e}")
        return False

    CLILogger.debug("Created consent flag file")
    return True
