"""
Tool API Routes

Endpoints for listing and calling tools over HTTP.
"""

from typing import Annotated, Any

from fastapi import APIRouter, Body, HTTPException, Path
from fastapi.responses import JSONResponse

from sleeper_assistant.api.dependencies import ToolRegistryDep
from sleeper_assistant.tools import ErrorResult, dump_result

router = APIRouter()

# ErrorResult.error -> HTTP status
ERROR_STATUS = {
    "configuration": 503,
    "not_found": 404,
    "invalid_arguments": 422,
    "upstream": 502,
    "internal": 500,
}


@router.get(
    "",
    summary="List tools",
    description="Every tool with its description and JSON argument schema.",
)
async def list_tools(tools: ToolRegistryDep) -> list[dict[str, Any]]:
    return tools.list_tools()


@router.post(
    "/{name}",
    summary="Call a tool",
    description="Run a tool. The JSON body holds the tool's arguments.",
)
async def call_tool(
    tools: ToolRegistryDep,
    name: Annotated[str, Path(description="Tool name")],
    arguments: Annotated[dict[str, Any] | None, Body()] = None,
) -> JSONResponse:
    """Run a tool; failures come back as an ErrorResult with a matching status."""
    if name not in tools:
        raise HTTPException(status_code=404, detail=f"Unknown tool: {name}")

    result = await tools.dispatch(name, arguments)
    status_code = ERROR_STATUS[result.error] if isinstance(result, ErrorResult) else 200
    return JSONResponse(content=dump_result(result), status_code=status_code)
