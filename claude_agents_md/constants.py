from __future__ import annotations

from pathlib import Path

PACKAGE_NAME = "@anthropic-ai/claude-code"
WRAPPER_NAME = "claude-agents-md"

MODE_AGENTS = "AGENTS"
MODE_CLAUDE = "CLAUDE"
DEFAULT_MODE = MODE_AGENTS

STATE_FILE = Path.home() / ".claude_agents_state"
CONFIG_FILE = Path.home() / ".config" / WRAPPER_NAME / "config.yml"

CONSENT_FLAG_NAME = ".claude-agents-md-consent"
CONSENT_FLAG_CONTENT = "consent-given"

# Entry file candidates, in lookup order, mapped to the name of the patched copy.
ENTRY_FILES = {
    "cli.js": "cli-agents.js",
    "cli.mjs": "cli-agents.mjs",
}

NODE_MODULES = "node_modules"
PACKAGE_JSON = "package.json"
LATEST_TAG = "latest"

CLAUDE_FLAGS = ("--claude", "--no-agents")
