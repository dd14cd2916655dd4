"""
Project planning tools
Contexts, Gemini plan generation and checklist rendering

Argument names are camelCase to match the published tool schemas.
Every argument is optional at this layer so that missing or blank
values reach the dispatcher and come back as a validation envelope.
"""

from typing import TYPE_CHECKING, List, Optional

from mcp.types import CallToolResult

if TYPE_CHECKING:
    from mcp.server.fastmcp import FastMCP
    from .dispatcher import ToolDispatcher


def _drop_none(arguments: dict) -> dict:
    return {k: v for k, v in arguments.items() if v is not None}


def register_planning_tools(mcp: "FastMCP", dispatcher: "ToolDispatcher") -> None:
    """
    Register project planning tools

    Args:
        mcp: FastMCP server instance
        dispatcher: Dispatcher that runs the tools
    """

    @mcp.tool(structured_output=False)
    async def create_project_context(
        projectName: Optional[str] = None,  # noqa: N803
        requirements: Optional[str] = None,
        constraints: Optional[str] = None,
    ) -> CallToolResult:
        """
        Create a new project planning context

        Args:
            projectName: Name of the project (required)
            requirements: Project requirements (required)
            constraints: Any constraints
        """
        return await dispatcher.dispatch("create_project_context", _drop_none({
            "projectName": projectName,
            "requirements": requirements,
            "constraints": constraints,
        }))

    @mcp.tool(structured_output=False)
    async def generate_plan_with_gemini(
        contextId: Optional[str] = None,  # noqa: N803
        projectName: Optional[str] = None,  # noqa: N803
        requirements: Optional[str] = None,
        constraints: Optional[str] = None,
        libraries: Optional[List[dict]] = None,
    ) -> CallToolResult:
        """
        Generate implementation plan using Gemini with Context7 docs

        Args:
            contextId: Project context ID
            projectName: Project name (if no contextId)
            requirements: Requirements (if no contextId)
            constraints: Additional constraints
            libraries: Libraries to fetch docs for, each {name, topic?, tokens?}
        """
        return await dispatcher.dispatch("generate_plan_with_gemini", _drop_none({
            "contextId": contextId,
            "projectName": projectName,
            "requirements": requirements,
            "constraints": constraints,
            "libraries": libraries,
        }))

    @mcp.tool(structured_output=False)
    async def render_plan_checklist(contextId: Optional[str] = None) -> CallToolResult:  # noqa: N803
        """
        Render plan as a checklist

        Args:
            contextId: Context ID (required)
        """
        return await dispatcher.dispatch("render_plan_checklist", _drop_none({"contextId": contextId}))
