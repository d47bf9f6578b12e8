from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class Args:
    mode_command: bool = False
    mode: Optional[str] = None
    claude: bool = False
    passthrough: list[str] = field(default_factory=list)
