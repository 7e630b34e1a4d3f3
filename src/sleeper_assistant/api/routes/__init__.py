"""API route handlers."""

from sleeper_assistant.api.routes import tools

__all__ = ["tools"]
