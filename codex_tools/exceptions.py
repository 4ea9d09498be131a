"""Tools subsystem exceptions.

Custom exception hierarchy for tool loading and construction.
"""


class ToolsError(Exception):
    """Base exception for the tools subsystem."""

    pass


class ConfigurationError(ToolsError):
    """Editor configuration cannot be used to load tools (e.g. no tools table)."""

    pass


class PreparationFailure(ToolsError):
    """A tool's prepare hook raised or timed out.

    Never raised to callers of ToolRegistry.prepare(); the tool is moved to
    the unavailable bucket instead.
    """

    def __init__(self, tool_name: str, cause: BaseException):
        super().__init__(f"Tool '{tool_name}' failed to prepare: {cause!r}")
        self.tool_name = tool_name
        self.cause = cause


class ToolNotFoundError(ToolsError):
    """Requested tool name is not registered."""

    pass
