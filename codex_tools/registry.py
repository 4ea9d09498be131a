"""Tool Registry.

Loads plugin classes from the editor config, runs their prepare hooks and
builds configured tool instances.
"""

import inspect
from collections.abc import Mapping
from typing import Any

from codex_config.settings import Settings
from codex_obs.logging import bind_tool, get_logger
from codex_obs.metrics import tool_preparations_total, tools_prepare_duration
from codex_tools.base import EditorConfig, PluginDescriptor, ToolConfig
from codex_tools.exceptions import (
    ConfigurationError,
    PreparationFailure,
    ToolNotFoundError,
)
from codex_tools.sequence import SequenceStep, sequence

logger = get_logger(__name__)


class ToolRegistry:
    """Tool registry with prepare-hook availability tracking.

    After prepare() settles every tool with a prepare hook sits in exactly
    one of ``available`` / ``unavailable``. Tools without a hook are in
    neither; they can still be constructed.
    """

    def __init__(
        self,
        config: EditorConfig | Mapping[str, Any],
        settings: Settings | None = None,
    ):
        """Initialize tool registry.

        Args:
            config: Editor config (or a mapping with tools / toolsConfig keys)
            settings: Runtime settings (prepare timeout)
        """
        if not isinstance(config, EditorConfig):
            config = EditorConfig.model_validate(config)

        self.config = config
        self.settings = settings or Settings()
        self._tool_classes: dict[str, PluginDescriptor] = {}
        self._tools_available: dict[str, PluginDescriptor] = {}
        self._tools_unavailable: dict[str, PluginDescriptor] = {}
        self._prepared = False

    @property
    def available(self) -> dict[str, PluginDescriptor]:
        """Tools whose prepare hook succeeded."""
        return dict(self._tools_available)

    @property
    def unavailable(self) -> dict[str, PluginDescriptor]:
        """Tools whose prepare hook failed."""
        return dict(self._tools_unavailable)

    @property
    def tools(self) -> dict[str, PluginDescriptor]:
        """All loaded tools, in config order."""
        return dict(self._tool_classes)

    @property
    def default_config(self) -> dict[str, Any]:
        """Config used for tools missing from toolsConfig (camelCase keys)."""
        return ToolConfig().model_dump(by_alias=True)

    async def prepare(self) -> None:
        """Load tool classes and run their prepare hooks in config order.

        If a previous call was interrupted (cancelled, or a callback raised),
        calling again runs only the hooks of tools not yet classified.

        Raises:
            ConfigurationError: Config has no tools
        """
        if self._prepared:
            logger.info("tools_already_prepared", tools=len(self._tool_classes))
            return

        if not self.config.tools:
            raise ConfigurationError("Can't start without tools")

        if not self._tool_classes:
            for tool_name, plugin in self.config.tools.items():
                self._tool_classes[tool_name] = PluginDescriptor.from_class(plugin)

        steps = self._get_list_of_prepare_functions()
        if steps:
            with tools_prepare_duration.time():
                await sequence(
                    steps,
                    self._success,
                    self._fallback,
                    step_timeout=self.settings.TOOLS_PREPARE_TIMEOUT,
                )

        self._prepared = True
        logger.info(
            "tools_prepared",
            available=len(self._tools_available),
            unavailable=len(self._tools_unavailable),
            tools=len(self._tool_classes),
        )

    def construct(self, tool_name: str, initial_data: Any = None) -> Any:
        """Build a tool instance with its toolsConfig entry or the default config.

        Args:
            tool_name: Registered tool name
            initial_data: Data handed to the plugin constructor

        Returns:
            New plugin instance (not stored by the registry)

        Raises:
            ToolNotFoundError: Tool name is not registered
        """
        descriptor = self._tool_classes.get(tool_name)
        if descriptor is None:
            raise ToolNotFoundError(f"Tool '{tool_name}' is not registered")

        config = self.config.tools_config.get(tool_name)
        if config is None:
            config = self.default_config

        return descriptor.plugin_class(initial_data, config)

    def _get_list_of_prepare_functions(self) -> list[SequenceStep]:
        """One step per tool that defines a prepare hook and is not yet classified."""
        return [
            SequenceStep(function=self._run_prepare_hook, data={"tool_name": tool_name})
            for tool_name, descriptor in self._tool_classes.items()
            if descriptor.has_preparation
            and tool_name not in self._tools_available
            and tool_name not in self._tools_unavailable
        ]

    async def _run_prepare_hook(self, data: dict[str, Any]) -> Any:
        tool_name = data["tool_name"]
        bind_tool(logger, tool_name).debug("tool_preparing")
        try:
            result = self._tool_classes[tool_name].run_prepare(data)
            if inspect.isawaitable(result):
                result = await result
        except Exception as e:
            raise PreparationFailure(tool_name, e) from e
        return result

    def _success(self, data: dict[str, Any]) -> None:
        tool_name = data["tool_name"]
        self._tools_available[tool_name] = self._tool_classes[tool_name]
        tool_preparations_total.labels(tool_name=tool_name, status="available").inc()
        bind_tool(logger, tool_name).debug("tool_available")

    def _fallback(self, data: dict[str, Any]) -> None:
        tool_name = data["tool_name"]
        self._tools_unavailable[tool_name] = self._tool_classes[tool_name]
        tool_preparations_total.labels(tool_name=tool_name, status="unavailable").inc()
        bind_tool(logger, tool_name).warning("tool_unavailable")
