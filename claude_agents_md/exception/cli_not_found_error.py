from pathlib import Path

from .base_error import ClaudeAgentsMDError


class CLINotFoundError(ClaudeAgentsMDError):
    def __init__(self, path: Path):
        self.path = path
        super().__init__(
            f"Claude CLI not found in {path}. Make sure @anthropic-ai/claude-code is installed."
        )
