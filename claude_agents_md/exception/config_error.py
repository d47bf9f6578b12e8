from .base_error import ClaudeAgentsMDError


class ConfigError(ClaudeAgentsMDError):
    pass
