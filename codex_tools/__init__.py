"""Codex Core Tool System.

Plugin loading, prepare-hook sequencing and tool instance construction.
"""

from codex_tools.base import EditorConfig, PluginDescriptor, PreparablePlugin, ToolConfig
from codex_tools.exceptions import (
    ConfigurationError,
    PreparationFailure,
    ToolNotFoundError,
    ToolsError,
)
from codex_tools.registry import ToolRegistry
from codex_tools.sequence import SequenceStep, sequence

__all__ = [
    "EditorConfig",
    "PluginDescriptor",
    "PreparablePlugin",
    "ToolConfig",
    "ConfigurationError",
    "PreparationFailure",
    "ToolNotFoundError",
    "ToolsError",
    "ToolRegistry",
    "SequenceStep",
    "sequence",
]
