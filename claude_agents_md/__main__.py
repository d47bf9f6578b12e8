"""Module execution entry point for ``python -m claude_agents_md``."""

import sys

from .cli import main

if __name__ == "__main__":  # pragma: no cover – module execution guard
    sys.exit(main())
