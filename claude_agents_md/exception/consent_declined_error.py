from .base_error import ClaudeAgentsMDError


class ConsentDeclinedError(ClaudeAgentsMDError):
    def __init__(self) -> None:
        super().__init__("Consent declined. AGENTS mode not activated.")
