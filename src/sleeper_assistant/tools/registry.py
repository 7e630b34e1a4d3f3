"""
Tool registry and dispatch.

Maps tool names to an argument model and an async handler. ``call`` never
raises: every failure is returned as an ``ErrorResult`` payload.
"""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from sleeper_assistant.clients.sleeper import SleeperAPIError
from sleeper_assistant.config import AccountRegistry
from sleeper_assistant.errors import AssistantError, InvalidArgumentsError
from sleeper_assistant.tools.arguments import NoArguments

logger = logging.getLogger(__name__)

_payload = TypeAdapter(Any)


def dump_result(result: Any) -> Any:
    """Dump a tool result (models, lists, dicts) to JSON-compatible types."""
    return _payload.dump_python(result, mode="json")


Handler = Callable[[Any], Awaitable[Any]]


class ErrorResult(BaseModel):
    """Structured failure returned in place of a tool result."""

    error: str = Field(
        description="configuration, not_found, invalid_arguments, upstream or internal"
    )
    message: str
    details: dict[str, Any] = Field(default_factory=dict)


@dataclass
class Tool:
    name: str
    description: str
    arguments: type[BaseModel]
    handler: Handler


class ToolRegistry:
    """
    Named tools with validated arguments.

    Usage:
        registry = ToolRegistry(accounts)

        @registry.tool("get_league_info", "Get league information", LeagueArgs)
        async def league_info(args: LeagueArgs):
            return await client.get_league(args.league_id)

        result = await registry.call("get_league_info", {"league_id": "123"})
    """

    def __init__(self, accounts: AccountRegistry | None = None):
        self.accounts = accounts
        self._tools: dict[str, Tool] = {}

    def __contains__(self, name: str) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)

    def tool(
        self,
        name: str,
        description: str,
        arguments: type[BaseModel] = NoArguments,
    ) -> Callable[[Handler], Handler]:
        """Decorator registering an async handler under ``name``."""

        def register(handler: Handler) -> Handler:
            if name in self._tools:
                raise ValueError(f"Tool already registered: {name}")
            self._tools[name] = Tool(name, description, arguments, handler)
            return handler

        return register

    def list_tools(self) -> list[dict[str, Any]]:
        """Name, description and JSON schema of every tool."""
        return [
            {
                "name": tool.name,
                "description": tool.description,
                "input_schema": tool.arguments.model_json_schema(),
            }
            for tool in self._tools.values()
        ]

    def _arguments(self, tool: Tool, arguments: dict[str, Any] | None) -> BaseModel:
        try:
            return tool.arguments.model_validate(arguments or {})
        except ValidationError as e:
            raise InvalidArgumentsError(
                f"Invalid arguments for {tool.name}",
                {
                    "errors": [
                        {"loc": [str(part) for part in err["loc"]], "msg": err["msg"]}
                        for err in e.errors()
                    ]
                },
            ) from e

    async def dispatch(self, name: str, arguments: dict[str, Any] | None = None) -> Any:
        """
        Run a tool.

        Args:
            name: Registered tool name
            arguments: Raw tool arguments

        Returns:
            The handler's result, or an ErrorResult describing the failure
        """
        try:
            tool = self._tools.get(name)
            if tool is None:
                raise InvalidArgumentsError(f"Unknown tool: {name}", {"tool": name})

            args = self._arguments(tool, arguments)
            if self.accounts is not None:
                self.accounts.validate()

            result = await tool.handler(args)
        except AssistantError as e:
            logger.info("Tool %s returned %s: %s", name, e.kind, e.message)
            result = ErrorResult(error=e.kind, message=e.message, details=e.details)
        except SleeperAPIError as e:
            logger.warning("Tool %s failed upstream: %s", name, e.message)
            details = {"status_code": e.status_code} if e.status_code is not None else {}
            result = ErrorResult(error="upstream", message=e.message, details=details)
        except Exception as e:
            logger.exception("Tool %s failed", name)
            result = ErrorResult(error="internal", message=str(e))

        return result

    async def call(self, name: str, arguments: dict[str, Any] | None = None) -> Any:
        """Run a tool and return its result or ErrorResult as plain JSON types."""
        return dump_result(await self.dispatch(name, arguments))
