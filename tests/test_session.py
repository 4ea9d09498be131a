"""Editor Session Tests."""

import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from codex_editor.session import EditorSession, run_session
from codex_tools.exceptions import ConfigurationError
from codex_tools.registry import ToolRegistry

from tests.sample_plugins import BrokenTool, ReadyTool


@pytest.mark.asyncio
async def test_start_prepares_tools(settings):
    """Test session start runs the tools registry prepare."""
    session = EditorSession(
        {"tools": {"header": ReadyTool, "embed": BrokenTool}}, settings=settings
    )

    await session.start()

    assert session.started is True
    assert isinstance(session.tools, ToolRegistry)
    assert list(session.tools.available) == ["header"]
    assert list(session.tools.unavailable) == ["embed"]


@pytest.mark.asyncio
async def test_start_prepares_modules_in_order(settings):
    """Test modules are prepared one after another in the order added."""
    order = []
    session = EditorSession({"tools": {"header": ReadyTool}}, settings=settings)

    toolbar = MagicMock()
    toolbar.prepare = AsyncMock(side_effect=lambda: order.append("toolbar"))
    blocks = MagicMock()
    blocks.prepare = AsyncMock(side_effect=lambda: order.append("blocks"))
    session.add_module(toolbar)
    session.add_module(blocks)

    await session.start()

    assert order == ["toolbar", "blocks"]
    assert "header" in session.tools.available


@pytest.mark.asyncio
async def test_start_without_tools_raises(settings):
    """Test ConfigurationError from the registry aborts start."""
    later = MagicMock()
    later.prepare = AsyncMock()
    session = EditorSession({}, settings=settings)
    session.add_module(later)

    with pytest.raises(ConfigurationError):
        await session.start()

    assert session.started is False
    later.prepare.assert_not_awaited()


@pytest.mark.asyncio
async def test_add_module_after_start_rejected(settings):
    """Test modules cannot be added once the session started."""
    session = EditorSession({"tools": {"header": ReadyTool}}, settings=settings)
    await session.start()

    with pytest.raises(RuntimeError):
        session.add_module(MagicMock())


@pytest.mark.asyncio
async def test_run_session_sets_up_observability(settings):
    """Test run_session configures logging and tracing before starting."""
    with patch("codex_editor.session.setup_logging") as mock_logging, patch(
        "codex_editor.session.setup_tracing"
    ) as mock_tracing:
        session = await run_session({"tools": {"header": ReadyTool}}, settings=settings)

    mock_logging.assert_called_once_with(settings)
    mock_tracing.assert_called_once_with(settings)
    assert session.started is True
