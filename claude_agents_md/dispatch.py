"""Launch the Claude CLI either untouched (CLAUDE mode) or patched (AGENTS mode)."""

from __future__ import annotations

from typing import Callable, Optional, Sequence

from . import npm
from .config import Settings
from .consent import ask_for_consent, consent_needed, record_consent
from .constants import MODE_CLAUDE
from .exception import CLINotFoundError, ConsentDeclinedError
from .locator import EntryPoint, Installation, locate_entry, resolve_installation
from .log import CLILogger
from .patcher import write_patched_entry
from .state import ModeStore
from .updater import check_for_updates


def _ensure_original(installation: Installation, entry: EntryPoint) -> None:
    # The update step may have reinstalled the package underneath us.
    if not entry.original.exists():
        raise CLINotFoundError(installation.directory)


def run_claude_mode(settings: Settings, installation: Installation, entry: EntryPoint, args: Sequence[str]) -> int:
    CLILogger.log_info("[CLAUDE] Running Claude in CLAUDE.md mode")

    _ = check_for_updates(settings, installation)
    _ensure_original(installation, entry)

    return npm.launch(settings.node_command, entry.original, args)


def run_agents_mode(
    settings: Settings,
    installation: Installation,
    entry: EntryPoint,
    args: Sequence[str],
    prompt: Optional[Callable[[str], str]] = None,
) -> int:
    CLILogger.log("[yellow][AGENTS] Running Claude in AGENTS mode[/yellow]")

    _ = check_for_updates(settings, installation)
    _ensure_original(installation, entry)

    if consent_needed(installation, entry):
        if not ask_for_consent(prompt):
            raise ConsentDeclinedError()
        _ = record_consent(installation)

    patched = write_patched_entry(entry, local_install=not installation.is_global)
    CLILogger.log("[yellow]🔥 AGENTS MODE ACTIVATED 🔥[/yellow]")
    CLILogger.debug("Modifications complete. The AGENTS.md file should now be used instead of CLAUDE.md.")

    return npm.launch(settings.node_command, patched, args)


def dispatch(
    settings: Settings,
    store: ModeStore,
    claude: bool,
    args: Sequence[str],
    prompt: Optional[Callable[[str], str]] = None,
) -> int:
    """Resolve the installation and run the CLI in the effective mode.

    Args:
        settings: Runtime settings.
        store: Persisted mode.
        claude: ``--claude``/``--no-agents`` was given on the command line.
        args: Arguments for the Claude CLI, wrapper flags already removed.
        prompt: Input function used by the consent gate.

    Returns:
        Exit status of the Claude CLI.

    Raises:
        CLINotFoundError: No entry file in the resolved installation.
        ConsentDeclinedError: The user refused the AGENTS mode patch.
    """
    installation = resolve_installation(settings)
    entry = locate_entry(installation.directory)

    if claude or store.get_mode() == MODE_CLAUDE:
        return run_claude_mode(settings, installation, entry, args)

    return run_agents_mode(settings, installation, entry, args, prompt)
