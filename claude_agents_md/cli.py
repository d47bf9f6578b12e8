from __future__ import annotations

import argparse
import sys
import traceback
from typing import Optional, Sequence

from rich.markup import escape

from .args import Args
from .config import load_settings
from .constants import CLAUDE_FLAGS, MODE_AGENTS, MODE_CLAUDE, WRAPPER_NAME
from .dispatch import dispatch
from .exception import ClaudeAgentsMDError
from .log import CLILogger
from .state import ModeStore


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=f"{WRAPPER_NAME} mode",
        description="Show or switch the persisted claude-agents-md mode",
    )
    _ = parser.add_argument(
        "mode",
        nargs="?",
        type=str.lower,
        help="'agents' to use AGENTS.md, 'claude' to use CLAUDE.md; omit to show the current mode",
    )
    return parser


def parse_args(argv: Sequence[str]) -> Args:
    """Split the command line into wrapper options and Claude CLI arguments.

    Only ``mode`` as the first argument and the ``--claude``/``--no-agents``
    flags belong to the wrapper.  Everything else is forwarded verbatim, so
    it is not run through argparse.
    """
    argv = list(argv)

    if argv and argv[0] == "mode":
        parsed, _unknown = create_parser().parse_known_args(argv[1:])
        return Args(mode_command=True, mode=parsed.mode)

    return Args(
        claude=any(arg in CLAUDE_FLAGS for arg in argv),
        passthrough=[arg for arg in argv if arg not in CLAUDE_FLAGS],
    )


def handle_mode_command(store: ModeStore, mode: Optional[str]) -> int:
    if mode == "agents":
        CLILogger.log("[yellow]🔥 Switching to AGENTS mode...[/yellow]")
        CLILogger.log_warning("WARNING: CLAUDE.md will be ignored!")
        store.set_mode(MODE_AGENTS)
        CLILogger.log_success("AGENTS mode activated")
    elif mode == "claude":
        CLILogger.log_info("🛡️  Switching to CLAUDE.md mode...")
        CLILogger.log("[green]✓ CLAUDE.md will be enabled[/green]")
        store.set_mode(MODE_CLAUDE)
        CLILogger.log_info("✓ CLAUDE.md mode activated")
    else:
        current = store.get_mode()
        colour = "yellow" if current == MODE_AGENTS else "cyan"
        CLILogger.log(f"Current mode: [{colour}]{escape(current)}[/{colour}]")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)

    try:
        settings = load_settings()
        CLILogger.set_debug(settings.debug)
        store = ModeStore(settings.state_file)

        if args.mode_command:
            return handle_mode_command(store, args.mode)

        return dispatch(settings, store, args.claude, args.passthrough)
    except KeyboardInterrupt:
        return 130
    except ClaudeAgentsMDError as e:
        CLILogger.log_error(str(e))
        return 1
    except Exception as e:
        CLILogger.log_error(str(e) or e.__class__.__name__)
        CLILogger.debug(traceback.format_exc())
        return 1


if __name__ == "__main__":
    sys.exit(main())
