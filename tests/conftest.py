from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Optional

import pytest

from claude_agents_md import npm
from claude_agents_md.config import Settings
from claude_agents_md.log import CLILogger

PACKAGE = "@anthropic-ai/claude-code"


class FakeNpm:
    """Stands in for the npm executable behind ``npm.run_command``."""

    def __init__(self) -> None:
        self.calls: list[list[str]] = []
        self.install_cwds: list[Optional[Path]] = []
        self.latest: Optional[str] = "2.0.0"
        self.global_root: Optional[Path] = None
        self.install_fails = False

    def __call__(self, cmd, cwd=None, capture=True):
        self.calls.append(list(cmd))
        if cmd[1:3] == ["-g", "root"]:
            if self.global_root is None:
                raise subprocess.CalledProcessError(1, cmd)
            return subprocess.CompletedProcess(cmd, 0, stdout=f"{self.global_root}\n", stderr="")
        if cmd[1] == "view":
            if self.latest is None:
                raise FileNotFoundError("npm")
            return subprocess.CompletedProcess(cmd, 0, stdout=f"{self.latest}\n", stderr="")
        if cmd[1] == "install":
            self.install_cwds.append(cwd)
            if self.install_fails:
                raise subprocess.CalledProcessError(1, cmd)
            return subprocess.CompletedProcess(cmd, 0, stdout="", stderr="")
        raise AssertionError(f"unexpected npm command: {cmd}")

    @property
    def installs(self) -> int:
        return len(self.install_cwds)


class FakeLauncher:
    def __init__(self) -> None:
        self.launched: list[tuple[str, Path, list[str]]] = []
        self.returncode = 0

    def __call__(self, node, entry, args):
        self.launched.append((node, Path(entry), list(args)))
        return self.returncode


@pytest.fixture(autouse=True)
def reset_logger():
    CLILogger.set_debug(False)
    yield
    CLILogger.set_debug(False)


@pytest.fixture
def fake_npm(monkeypatch) -> FakeNpm:
    fake = FakeNpm()
    monkeypatch.setattr(npm, "run_command", fake)
    return fake


@pytest.fixture
def launcher(monkeypatch) -> FakeLauncher:
    fake = FakeLauncher()
    monkeypatch.setattr(npm, "launch", fake)
    return fake


@pytest.fixture
def project(tmp_path) -> Path:
    """A node project with a local Claude CLI install pinned at 2.0.0."""
    root = tmp_path / "project"
    tool = root / "node_modules" / "@anthropic-ai" / "claude-code"
    tool.mkdir(parents=True)
    (tool / "cli.js").write_text('require("punycode");\nload(",CLAUDE.md");\nread("CLAUDE.md");\n')
    (root / "package.json").write_text('{\n  "name": "project",\n  "dependencies": {\n    "' + PACKAGE + '": "2.0.0"\n  }\n}')
    return root


@pytest.fixture
def tool_dir(project) -> Path:
    return project / "node_modules" / "@anthropic-ai" / "claude-code"


@pytest.fixture
def settings(tmp_path, project) -> Settings:
    return Settings(state_file=tmp_path / "state", install_root=project)
