"""Text rewrites applied to the Claude CLI entry file in AGENTS mode.

:func:`patch_source` is a pure ``str -> str`` transform; file handling lives
in :func:`write_patched_entry`.  Two rewrites exist:

``CLAUDE.md`` -> ``AGENTS.md``
    Every occurrence is rewritten except one directly preceded by a comma,
    which is left alone.

``"punycode"`` -> ``"punycode/"``
    Only for a local install.  The trailing slash forces node to resolve
    the userland ``punycode`` package instead of the deprecated built-in
    module of the same name.
"""

from __future__ import annotations

import re
from pathlib import Path

from .locator import EntryPoint
from .log import CLILogger

CLAUDE_MD_PATTERN = re.compile(r"(?<!,)CLAUDE\.md")
AGENTS_MD = "AGENTS.md"

PUNYCODE_REFERENCE = '"punycode"'
PUNYCODE_REPLACEMENT = '"punycode/"'


def replace_claude_md(source: str) -> str:
    return CLAUDE_MD_PATTERN.sub(AGENTS_MD, source)


def replace_punycode(source: str) -> str:
    return source.replace(PUNYCODE_REFERENCE, PUNYCODE_REPLACEMENT)


def patch_source(source: str, local_install: bool) -> str:
    """Return *source* with the AGENTS mode rewrites applied.

    Args:
        source: Full text of the original CLI entry file.
        local_install: Whether the CLI was resolved from the local
            ``node_modules`` rather than a global install.

    Returns:
        The rewritten text.  Applying it twice to the same original always
        yields the same result.
    """
    if local_install:
        source = replace_punycode(source)
        CLILogger.debug('Replaced all instances of "punycode" with "punycode/"')

    source = replace_claude_md(source)
    CLILogger.debug("Replaced all instances of CLAUDE.md with AGENTS.md")
    return source


def write_patched_entry(entry: EntryPoint, local_install: bool) -> Path:
    """Regenerate the patched copy of *entry* from the current original."""
    # Bytes in and out so line endings and stray invalid bytes survive untouched.
    source = entry.original.read_bytes().decode("utf-8", errors="surrogateescape")
    _ = entry.patched.write_bytes(patch_source(source, local_install).encode("utf-8", errors="surrogateescape"))
    CLILogger.debug(f"Created modified CLI at {entry.patched}")
    return entry.patched
