"""
Codex Core Configuration Package.

Provides Pydantic Settings loaded from environment variables.
"""

from codex_config.settings import Settings

__all__ = ["Settings"]
