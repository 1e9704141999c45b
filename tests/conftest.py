"""Pytest fixtures for perchance-helper tests."""

from pathlib import Path

import pytest

from perchance_helper.mcp_server.resources import BASIC_EXAMPLE


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the user config at a temporary file so real settings never leak in."""
    config_file = tmp_path / "config" / "config.yaml"
    monkeypatch.setattr("perchance_helper.user_config.CONFIG_DIR", config_file.parent)
    monkeypatch.setattr("perchance_helper.user_config.CONFIG_FILE", config_file)
    return config_file


@pytest.fixture
def creature_template() -> str:
    """A one-list template with an HTML body line."""
    return "<p>A [creature] is here</p>\n\ncreature\ndog|cat|bird\n"


@pytest.fixture
def basic_example() -> str:
    """The example template served as an MCP resource."""
    return BASIC_EXAMPLE
