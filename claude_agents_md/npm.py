"""Thin wrappers around the external ``npm`` and ``node`` executables.

Every process the wrapper starts goes through this module so tests can
replace a single seam (:func:`run_command`) instead of patching
``subprocess`` all over the code base.
"""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path
from typing import Optional, Sequence


def run_command(
    cmd: list[str],
    cwd: Optional[Path] = None,
    capture: bool = True,
) -> subprocess.CompletedProcess[str]:
    """Run *cmd* to completion, raising on a non-zero exit status.

    Args:
        cmd: Program and arguments.
        cwd: Working directory for the child process.
        capture: Capture stdout/stderr instead of inheriting the terminal.

    Raises:
        subprocess.CalledProcessError: The command exited non-zero.
        FileNotFoundError: The executable does not exist.
    """
    return subprocess.run(
        cmd,
        check=True,
        text=True,
        capture_output=capture,
        cwd=cwd,
    )


def view_version(npm: str, package: str) -> str:
    result = run_command([npm, "view", package, "version", "--loglevel=error"])
    return result.stdout.strip()


def global_root(npm: str) -> Path:
    result = run_command([npm, "-g", "root", "--loglevel=error"])
    return Path(result.stdout.strip())


def install(npm: str, cwd: Path) -> None:
    # Output goes straight to the terminal so the user sees install progress.
    _ = run_command([npm, "install", "--loglevel=error"], cwd=cwd, capture=False)


CAN_EXEC = os.name == "posix"


def launch(node: str, entry: Path, args: Sequence[str]) -> int:
    """Hand the terminal over to node running *entry*.

    On POSIX the wrapper process is replaced, so signals and the exit status
    belong to node directly and this never returns.  Elsewhere node runs as
    a foreground child and its exit status is returned.
    """
    cmd = [node, str(entry), *args]

    if CAN_EXEC:
        sys.stdout.flush()
        sys.stderr.flush()
        os.execvp(node, cmd)

    completed = subprocess.run(cmd, check=False)
    return completed.returncode
