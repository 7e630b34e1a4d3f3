"""API package - FastAPI routes and dependencies."""

from sleeper_assistant.api.dependencies import (
    AssistantManager,
    ToolRegistryDep,
    get_tool_registry,
)

__all__ = [
    "AssistantManager",
    "get_tool_registry",
    "ToolRegistryDep",
]
