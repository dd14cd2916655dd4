"""
Connection check tools
Diagnostics for the Gemini and Context7 upstreams
"""

from typing import TYPE_CHECKING

from mcp.types import CallToolResult

if TYPE_CHECKING:
    from mcp.server.fastmcp import FastMCP
    from .dispatcher import ToolDispatcher


def register_connection_tools(mcp: "FastMCP", dispatcher: "ToolDispatcher") -> None:
    """
    Register connection check tools

    Args:
        mcp: FastMCP server instance
        dispatcher: Dispatcher that runs the tools
    """

    @mcp.tool(structured_output=False)
    async def test_gemini_connection() -> CallToolResult:
        """Test connection to Gemini"""
        return await dispatcher.dispatch("test_gemini_connection", {})

    @mcp.tool(structured_output=False)
    async def test_context7_connection() -> CallToolResult:
        """Test connection to Context7 MCP"""
        return await dispatcher.dispatch("test_context7_connection", {})
