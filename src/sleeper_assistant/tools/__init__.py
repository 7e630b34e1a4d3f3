"""Tool dispatch surface."""

from sleeper_assistant.tools.handlers import build_registry
from sleeper_assistant.tools.registry import ErrorResult, Tool, ToolRegistry, dump_result

__all__ = ["ErrorResult", "Tool", "ToolRegistry", "build_registry", "dump_result"]
