from .base_error import ClaudeAgentsMDError
from .cli_not_found_error import CLINotFoundError
from .config_error import ConfigError
from .consent_declined_error import ConsentDeclinedError

__all__ = [
    "ClaudeAgentsMDError",
    "CLINotFoundError",
    "ConfigError",
    "ConsentDeclinedError",
]
