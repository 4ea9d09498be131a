"""
Editor Session.

Owns the editor modules (currently the tools registry) and prepares them in
a fixed order. Modules are composed, not inherited: each one gets the
config it needs through its constructor.
"""

from collections.abc import Mapping
from typing import Any, Protocol

from codex_config.settings import Settings
from codex_obs.logging import get_logger, setup_logging
from codex_obs.tracing import setup_tracing
from codex_tools.base import EditorConfig
from codex_tools.registry import ToolRegistry

logger = get_logger(__name__)


class Module(Protocol):
    """Editor module lifecycle interface."""

    async def prepare(self) -> None:
        """Prepare the module. Raising aborts session start."""
        ...


class EditorSession:
    """Editor session holding the prepared modules."""

    def __init__(
        self,
        config: EditorConfig | Mapping[str, Any],
        settings: Settings | None = None,
    ):
        if not isinstance(config, EditorConfig):
            config = EditorConfig.model_validate(config)

        self.config = config
        self.settings = settings or Settings()
        self.tools = ToolRegistry(config, settings=self.settings)
        self.modules: list[Module] = [self.tools]
        self.started = False

    def add_module(self, module: Module) -> None:
        """Append a module; it is prepared after the ones already added."""
        if self.started:
            raise RuntimeError("Cannot add modules to a started session")
        self.modules.append(module)

    async def start(self) -> None:
        """
        Prepare every module in order.

        Raises:
            ConfigurationError: Tools registry has no tools to load
            Exception: Whatever a module's prepare() raises
        """
        if self.started:
            return

        for module in self.modules:
            name = type(module).__name__
            logger.info("module_preparing", module=name)
            try:
                await module.prepare()
            except Exception as e:
                logger.error("module_prepare_failed", module=name, error=str(e))
                raise

        self.started = True
        logger.info(
            "session_started",
            environment=self.settings.ENVIRONMENT,
            available_tools=sorted(self.tools.available),
            unavailable_tools=sorted(self.tools.unavailable),
        )


async def run_session(
    config: EditorConfig | Mapping[str, Any],
    settings: Settings | None = None,
) -> EditorSession:
    """Configure logging and tracing, then build and start a session."""
    settings = settings or Settings()

    setup_logging(settings)
    setup_tracing(settings)

    session = EditorSession(config, settings=settings)
    await session.start()
    return session
