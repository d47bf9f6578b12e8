"""Locate the installed Claude CLI and its entry file.

The CLI can be reachable in two ways:

*   a **global** npm install, found under ``npm -g root``;
*   a **local** install inside the nearest ancestor directory of this package
    that holds a ``node_modules`` folder (the *install root*).  When the
    wrapper itself was installed as a dependency of another project, the
    tool sits one level deeper, inside the wrapper's own ``node_modules``.

A global install always wins.  The local path is used as-is otherwise, even
when it does not exist; :func:`locate_entry` reports that case.
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from . import npm
from .config import Settings
from .constants import CONSENT_FLAG_NAME, ENTRY_FILES, NODE_MODULES, WRAPPER_NAME
from .exception import CLINotFoundError
from .log import CLILogger


@dataclass(frozen=True)
class Installation:
    root: Path
    directory: Path
    is_global: bool
    global_directory: Optional[Path] = None

    @property
    def consent_flag(self) -> Path:
        return self.directory / CONSENT_FLAG_NAME


@dataclass(frozen=True)
class EntryPoint:
    original: Path
    patched: Path


def find_install_root(start: Path) -> Path:
    """Walk up from *start* to the first directory containing ``node_modules``.

    Returns the filesystem root when no such directory exists.
    """
    current = Path(start).resolve()
    for candidate in (current, *current.parents):
        if (candidate / NODE_MODULES).exists():
            return candidate
    return Path(current.anchor)


def _package_path(base: Path, package_name: str) -> Path:
    # Scoped names such as "@anthropic-ai/claude-code" map to nested folders.
    return base.joinpath(*package_name.split("/"))


def find_global_installation(settings: Settings) -> Optional[Path]:
    try:
        root = npm.global_root(settings.npm_command)
    except (OSError, subprocess.CalledProcessError) as e:
        CLILogger.debug(f"Error finding global Claude installation: {e}")
        return None

    CLILogger.debug(f"Global node_modules: {root}")
    if root == Path("."):
        return None

    candidate = _package_path(root, settings.package_name)
    if candidate.exists():
        CLILogger.debug(f"Found global Claude installation at: {candidate}")
        return candidate
    return None


def resolve_installation(settings: Settings, start: Optional[Path] = None) -> Installation:
    """Pick the Claude CLI installation to run.

    Args:
        settings: Runtime settings; ``install_root`` short-circuits the walk.
        start: Directory the upward walk starts from, defaults to this
            package's own directory.

    Returns:
        The resolved :class:`Installation`.
    """
    if settings.install_root is not None:
        root = settings.install_root
    else:
        root = find_install_root(start or Path(__file__).resolve().parent)

    global_dir = find_global_installation(settings)

    local_dir = _package_path(root / NODE_MODULES, settings.package_name)
    if not local_dir.exists():
        local_dir = _package_path(root / WRAPPER_NAME / NODE_MODULES, settings.package_name)

    if global_dir is not None:
        installation = Installation(root=root, directory=global_dir, is_global=True, global_directory=global_dir)
    else:
        installation = Installation(root=root, directory=local_dir, is_global=False)

    CLILogger.debug(f"Using Claude installation from: {installation.directory}")
    CLILogger.debug(f"Using {'GLOBAL' if installation.is_global else 'LOCAL'} Claude installation")
    return installation


def locate_entry(directory: Path) -> EntryPoint:
    """Find the CLI entry file in *directory* and the path of its patched copy.

    Raises:
        CLINotFoundError: Neither ``cli.js`` nor ``cli.mjs`` exists.
    """
    for name, patched_name in ENTRY_FILES.items():
        original = directory / name
        if original.exists():
            CLILogger.debug(f"Found Claude CLI at {original}")
            return EntryPoint(original=original, patched=directory / patched_name)

    raise CLINotFoundError(directory)
