from __future__ import annotations

from pathlib import Path

from .constants import DEFAULT_MODE


class ModeStore:
    """Persisted AGENTS/CLAUDE mode, kept as a one-line text file."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def get_mode(self) -> str:
        """Return the persisted mode, or the default when it cannot be read."""
        try:
            return self.path.read_text(encoding="utf-8").strip()
        except (OSError, UnicodeDecodeError):
            return DEFAULT_MODE

    def set_mode(self, mode: str) -> None:
        # Stored verbatim; callers decide which values make sense.
        _ = self.path.write_text(mode, encoding="utf-8")
