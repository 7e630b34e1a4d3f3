"""
API Dependencies

Shared dependencies for FastAPI route handlers: one SleeperAssistant and its
tool registry for the whole application.
"""

from typing import Annotated

from fastapi import Depends

from sleeper_assistant.assistant import SleeperAssistant
from sleeper_assistant.tools import ToolRegistry, build_registry


class AssistantManager:
    """
    Manages the SleeperAssistant lifecycle for the application.

    Started by the lifespan handler; created on first use otherwise, so
    every request shares one pacer and one set of caches.
    """

    _assistant: SleeperAssistant | None = None
    _tools: ToolRegistry | None = None

    @classmethod
    async def start(cls, assistant: SleeperAssistant | None = None) -> SleeperAssistant:
        """Enter and install an assistant, creating one if needed."""
        if cls._assistant is None:
            assistant = assistant or SleeperAssistant()
            await assistant.__aenter__()
            cls._assistant = assistant
            cls._tools = build_registry(assistant)
        return cls._assistant

    @classmethod
    async def get_tools(cls) -> ToolRegistry:
        """Get the tool registry, starting the assistant if necessary."""
        if cls._tools is None:
            await cls.start()
        return cls._tools

    @classmethod
    async def close(cls) -> None:
        """Close the assistant's HTTP client."""
        if cls._assistant is not None:
            await cls._assistant.__aexit__(None, None, None)
            cls._assistant = None
            cls._tools = None


async def get_tool_registry() -> ToolRegistry:
    """Dependency to get the ToolRegistry."""
    return await AssistantManager.get_tools()


# Type aliases for cleaner route signatures
ToolRegistryDep = Annotated[ToolRegistry, Depends(get_tool_registry)]
