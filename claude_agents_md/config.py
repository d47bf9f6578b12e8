"""Runtime settings for *claude-agents-md*.

Settings are assembled once at startup from three layers, later layers
winning over earlier ones:

1. Built-in defaults (see :mod:`claude_agents_md.constants`).
2. An optional YAML file, ``~/.config/claude-agents-md/config.yml`` by
   default or whatever ``CLAUDE_AGENTS_MD_CONFIG`` points at.
3. Environment variables (``DEBUG``, ``CLAUDE_AGENTS_MD_NO_UPDATE``).

The resulting :class:`Settings` object is immutable and gets passed to every
component explicitly, so nothing below the CLI entry point reads the
environment or the home directory on its own.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .constants import CONFIG_FILE, PACKAGE_NAME, STATE_FILE
from .exception import ConfigError

CONFIG_ENV = "CLAUDE_AGENTS_MD_CONFIG"
NO_UPDATE_ENV = "CLAUDE_AGENTS_MD_NO_UPDATE"
DEBUG_ENV = "DEBUG"


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    package_name: str = Field(default=PACKAGE_NAME)
    npm_command: str = Field(default="npm")
    node_command: str = Field(default="node")
    state_file: Path = Field(default=STATE_FILE)
    install_root: Optional[Path] = None
    auto_update: bool = Field(default=True)
    debug: bool = Field(default=False)


def _read_config_file(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to read config file {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")

    return data


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build the :class:`Settings` for this run.

    Args:
        environ: Environment to read from, defaults to ``os.environ``.

    Returns:
        The merged settings.

    Raises:
        ConfigError: If the config file is unreadable or holds unknown keys
            or values of the wrong type.
    """
    env = os.environ if environ is None else environ

    config_path = Path(env[CONFIG_ENV]).expanduser() if env.get(CONFIG_ENV) else CONFIG_FILE
    data = _read_config_file(config_path)

    # Any non-empty value counts, "0" included.
    if env.get(DEBUG_ENV):
        data["debug"] = True
    if env.get(NO_UPDATE_ENV):
        data["auto_update"] = False

    for key in ("state_file", "install_root"):
        if isinstance(data.get(key), str):
            data[key] = Path(data[key]).expanduser()

    try:
        return Settings(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {config_path}:\n{e}") from e
