"""Run the Claude CLI with AGENTS.md in place of CLAUDE.md."""

__version__ = "1.0.0"
