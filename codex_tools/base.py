"""Plugin Interface & Tool Configuration.

Plugins are classes constructed as ``plugin_class(initial_data, tool_config)``.
A plugin may also expose a ``prepare`` hook (sync or async) that decides
whether the tool is usable in this session. Only hooks callable on the class
itself count: staticmethods, classmethods or callable class attributes.

``tool_config`` is always a camelCase mapping: the toolsConfig entry as given,
or the dumped default ToolConfig.
"""

import inspect
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ToolConfig(BaseModel):
    """Per-tool display and behaviour options."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    icon_class_name: str = Field(default="default-icon", alias="iconClassName")
    display_in_toolbox: bool = Field(default=False, alias="displayInToolbox")
    enable_line_breaks: bool = Field(default=False, alias="enableLineBreaks")


class EditorConfig(BaseModel):
    """Editor configuration consumed by the tools registry.

    ``tools`` maps tool name to plugin class (or PluginDescriptor).
    ``tools_config`` mapping entries are type-checked against ToolConfig and
    kept as given; ToolConfig entries are dumped to camelCase mappings
    holding only the fields that were set.
    """

    model_config = ConfigDict(populate_by_name=True, arbitrary_types_allowed=True)

    tools: dict[str, Any] | None = None
    tools_config: dict[str, Any] = Field(default_factory=dict, alias="toolsConfig")

    @field_validator("tools_config")
    @classmethod
    def check_tools_config(cls, value: dict[str, Any]) -> dict[str, Any]:
        for tool_name, entry in value.items():
            if isinstance(entry, ToolConfig):
                value[tool_name] = entry.model_dump(by_alias=True, exclude_unset=True)
            elif isinstance(entry, Mapping):
                ToolConfig.model_validate(entry)
            else:
                raise ValueError(
                    f"toolsConfig['{tool_name}'] must be a mapping, got {type(entry).__name__}"
                )
        return value


@runtime_checkable
class PreparablePlugin(Protocol):
    """Plugin with a preparation hook."""

    def prepare(self, data: dict[str, Any]) -> Any:
        """Prepare the tool. May return an awaitable."""
        ...


@dataclass(frozen=True)
class PluginDescriptor:
    """Plugin class plus its (optional) preparation hook.

    Attributes:
        plugin_class: Callable building an instance from (initial_data, config)
        prepare: Preparation hook, or None when the plugin has none
        prepare_takes_input: Whether prepare accepts the step payload
    """

    plugin_class: Callable[[Any, Any], Any]
    prepare: Callable[..., Any] | None = None
    prepare_takes_input: bool = True

    @property
    def has_preparation(self) -> bool:
        return self.prepare is not None

    @classmethod
    def from_class(cls, plugin: Any) -> "PluginDescriptor":
        """Describe a plugin class; descriptors are returned unchanged."""
        if isinstance(plugin, PluginDescriptor):
            return plugin

        if isinstance(plugin, PreparablePlugin) and _has_class_level_prepare(plugin):
            return cls(
                plugin_class=plugin,
                prepare=plugin.prepare,
                prepare_takes_input=_accepts_argument(plugin.prepare),
            )

        return cls(plugin_class=plugin)

    def run_prepare(self, data: dict[str, Any]) -> Any:
        """Call the prepare hook with the step payload (if it takes one)."""
        if self.prepare is None:
            return None
        if self.prepare_takes_input:
            return self.prepare(data)
        return self.prepare()


def _has_class_level_prepare(plugin: Any) -> bool:
    # Plain functions on a class are instance methods, not hooks
    raw = inspect.getattr_static(plugin, "prepare", None)
    if isinstance(raw, (staticmethod, classmethod)):
        return True
    if not inspect.isclass(plugin):
        return callable(raw)
    return callable(raw) and not inspect.isfunction(raw)


def _accepts_argument(func: Callable[..., Any]) -> bool:
    try:
        params = inspect.signature(func).parameters.values()
    except (TypeError, ValueError):
        # No signature available (some builtins); assume it takes the payload
        return True

    return any(
        p.kind
        in (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
            inspect.Parameter.VAR_POSITIONAL,
        )
        for p in params
    )
