class ClaudeAgentsMDError(Exception):
    """Base class for every error raised by the wrapper."""
