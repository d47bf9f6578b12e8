from pathlib import Path

import pytest

from claude_agents_md.config import Settings, load_settings
from claude_agents_md.exception import ConfigError


def test_defaults_without_config_file(tmp_path):
    settings = load_settings({"CLAUDE_AGENTS_MD_CONFIG": str(tmp_path / "missing.yml")})

    assert settings == Settings()
    assert settings.package_name == "@anthropic-ai/claude-code"
    assert settings.state_file == Path.home() / ".claude_agents_state"
    assert settings.auto_update is True
    assert settings.debug is False


def test_config_file_values(tmp_path):
    config = tmp_path / "config.yml"
    config.write_text(
        "npm_command: /opt/node/bin/npm\n"
        "state_file: ~/custom_state\n"
        f"install_root: {tmp_path}\n"
        "auto_update: false\n"
    )

    settings = load_settings({"CLAUDE_AGENTS_MD_CONFIG": str(config)})

    assert settings.npm_command == "/opt/node/bin/npm"
    assert settings.state_file == Path.home() / "custom_state"
    assert settings.install_root == tmp_path
    assert settings.auto_update is False


@pytest.mark.parametrize(
    ("environ", "debug", "auto_update"),
    [
        ({"DEBUG": "1"}, True, True),
        ({"DEBUG": "0"}, True, True),
        ({"DEBUG": ""}, False, True),
        ({"CLAUDE_AGENTS_MD_NO_UPDATE": "1"}, False, False),
    ],
)
def test_environment_overrides(tmp_path, environ, debug, auto_update):
    environ = {"CLAUDE_AGENTS_MD_CONFIG": str(tmp_path / "missing.yml"), **environ}

    settings = load_settings(environ)

    assert settings.debug is debug
    assert settings.auto_update is auto_update


def test_empty_config_file(tmp_path):
    config = tmp_path / "config.yml"
    config.write_text("")
    assert load_settings({"CLAUDE_AGENTS_MD_CONFIG": str(config)}) == Settings()


@pytest.mark.parametrize(
    "content",
    [
        "- just\n- a list\n",
        "unknown_key: 1\n",
        "auto_update: [1, 2]\n",
        "npm_command: [unclosed\n",
    ],
)
def test_invalid_config_file(tmp_path, content):
    config = tmp_path / "config.yml"
    config.write_text(content)

    with pytest.raises(ConfigError):
        load_settings({"CLAUDE_AGENTS_MD_CONFIG": str(config)})
