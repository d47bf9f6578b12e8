"""Keep the wrapped Claude CLI package up to date.

The install root's ``package.json`` pins the Claude package.  On every run
the latest published version is fetched from the npm registry and compared
against that pin:

*   a pin of ``latest`` always triggers ``npm install`` so the newest release
    gets resolved;
*   any other pin that differs from the registry is rewritten to the new
    version before running ``npm install``;
*   a matching pin leaves everything untouched.

Failing to reach the registry is not an error worth bothering the user
with; it is logged at debug level and the run continues with whatever is
installed.  A failing ``npm install`` is reported but does not stop the run
either.
"""

from __future__ import annotations

import json
import subprocess
import sys
from contextlib import nullcontext
from pathlib import Path
from typing import Any, Optional

from halo import Halo

from . import npm
from .config import Settings
from .constants import LATEST_TAG, PACKAGE_JSON
from .locator import Installation
from .log import CLILogger


def read_manifest(path: Path) -> dict[str, Any]:
    manifest = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(manifest, dict):
        raise ValueError(f"{path} does not contain a JSON object")
    return manifest


def write_manifest(path: Path, manifest: dict[str, Any]) -> None:
    _ = path.write_text(json.dumps(manifest, indent=2, ensure_ascii=False), encoding="utf-8")


def _dependencies(manifest: dict[str, Any]) -> dict[str, Any]:
    dependencies = manifest.get("dependencies")
    return dependencies if isinstance(dependencies, dict) else {}


def pinned_version(manifest: dict[str, Any], package: str) -> Optional[str]:
    return _dependencies(manifest).get(package)


def fetch_latest_version(settings: Settings) -> Optional[str]:
    spinner_enabled = sys.stdout.isatty() and not settings.debug
    try:
        # Halo writes cursor escapes even when disabled, so skip it off a terminal.
        spinner = Halo(text="Checking for Claude package updates", spinner="dots") if spinner_enabled else nullcontext()
        with spinner:
            latest = npm.view_version(settings.npm_command, settings.package_name)
    except (OSError, subprocess.CalledProcessError) as e:
        CLILogger.debug(f"Error fetching latest Claude version: {e}")
        return None

    CLILogger.debug(f"Latest Claude version on npm: {latest}")
    return latest or None


def _log_global_version(installation: Installation, latest: str) -> None:
    if installation.global_directory is None:
        return

    try:
        global_version = read_manifest(installation.global_directory / PACKAGE_JSON).get("version")
    except (OSError, ValueError) as e:
        CLILogger.debug(f"Error getting global Claude version: {e}")
        return

    CLILogger.debug(f"Global Claude version: {global_version}")
    if global_version == latest:
        CLILogger.debug("Global Claude installation is already the latest version")
    elif global_version:
        CLILogger.debug(f"Global Claude installation ({global_version}) differs from latest ({latest})")


def _install(settings: Settings, root: Path) -> bool:
    try:
        npm.install(settings.npm_command, root)
    except (OSError, subprocess.CalledProcessError) as e:
        CLILogger.log_error(f"Failed to update Claude package: {e}")
        return False
    return True


def check_for_updates(settings: Settings, installation: Installation) -> bool:
    """Bring the pinned Claude package in line with the registry.

    Args:
        settings: Runtime settings.
        installation: The resolved installation; its ``root`` holds the
            manifest that gets rewritten and where ``npm install`` runs.

    Returns:
        ``True`` if ``npm install`` ran and succeeded, ``False`` otherwise.
    """
    if not settings.auto_update:
        CLILogger.debug("Automatic updates disabled")
        return False

    CLILogger.debug("Checking for Claude package updates...")

    latest = fetch_latest_version(settings)
    if latest is None:
        return False

    manifest_path = installation.root / PACKAGE_JSON
    try:
        manifest = read_manifest(manifest_path)
    except (OSError, ValueError) as e:
        CLILogger.debug(f"Error reading {manifest_path}: {e}")
        return False

    current = pinned_version(manifest, settings.package_name)
    CLILogger.debug(f"Claude version from package.json: {current}")

    _log_global_version(installation, latest)

    if current == LATEST_TAG:
        CLILogger.debug("Using 'latest' tag in package.json, running npm install to ensure we have the newest version")
        return _install(settings, installation.root)

    if current == latest:
        return False

    CLILogger.log(f"Updating Claude package from {current or 'unknown'} to {latest}...")
    dependencies = _dependencies(manifest)
    dependencies[settings.package_name] = latest
    manifest["dependencies"] = dependencies
    try:
        write_manifest(manifest_path, manifest)
    except OSError as e:
        CLILogger.log_error(f"Failed to update {manifest_path}: {e}")
        return False

    CLILogger.log("Running npm install to update dependencies...")
    if not _install(settings, installation.root):
        return False

    CLILogger.log("Update complete!")
    return True
