"""MCP tools for project planning."""

from .dispatcher import TOOL_NAMES, ToolDispatcher
from .connection_tools import register_connection_tools
from .planning_tools import register_planning_tools

__all__ = [
    "TOOL_NAMES",
    "ToolDispatcher",
    "register_connection_tools",
    "register_planning_tools",
]
