"""Pytest fixtures."""

import pytest

from codex_config.settings import Settings

from tests.sample_plugins import (
    BrokenTool,
    NoPrepareTool,
    ReadyTool,
    RejectingTool,
    SlowReadyTool,
)


@pytest.fixture
def settings():
    """Default settings (no prepare timeout)."""
    return Settings()


@pytest.fixture
def editor_config():
    """Config with one tool of each kind."""
    return {
        "tools": {
            "paragraph": NoPrepareTool,
            "header": ReadyTool,
            "image": SlowReadyTool,
            "embed": BrokenTool,
            "map": RejectingTool,
        },
        "toolsConfig": {
            "header": {"iconClassName": "ce-icon-header", "displayInToolbox": True},
        },
    }
