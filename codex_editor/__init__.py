"""Codex Editor session wiring.

Usage:
    from codex_editor import run_session

    session = await run_session({"tools": {"paragraph": Paragraph}})
    block = session.tools.construct("paragraph", {"text": "Hello"})
"""

from codex_editor.session import EditorSession, Module, run_session

__all__ = ["EditorSession", "Module", "run_session"]
