"""
Gemini Planning MCP Server
FastMCP server exposing project-planning tools over stdio

Architecture:
- Tool dispatcher owning an in-memory context store
- Gemini provider for plan generation
- Context7 client for library documentation
- Modular tool registration
"""

import sys
from typing import Optional

from mcp.server.fastmcp import FastMCP

from .clients.context7 import Context7Client
from .config import PlannerConfig, load_env_file
from .errors import ConfigurationError
from .planning.store import ContextStore
from .providers.base import LLMProvider
from .tools.connection_tools import register_connection_tools
from .tools.dispatcher import ToolDispatcher
from .tools.planning_tools import register_planning_tools
from .utils.logging import setup_logging

logger = setup_logging("gemini_planning")


def build_dispatcher(
    config: PlannerConfig,
    llm: Optional[LLMProvider] = None,
    docs: Optional[Context7Client] = None,
) -> ToolDispatcher:
    """Wire a dispatcher with a fresh context store."""
    if llm is None:
        from .providers.gemini_provider import GeminiProvider

        llm = GeminiProvider(
            api_key=config.gemini_api_key,
            model=config.gemini_model,
            temperature=config.temperature,
            max_output_tokens=config.max_output_tokens,
        )
    if docs is None:
        docs = Context7Client(config.context7_url, timeout=config.context7_timeout)
    return ToolDispatcher(ContextStore(), llm, docs)


def create_server(
    config: Optional[PlannerConfig] = None,
    dispatcher: Optional[ToolDispatcher] = None,
) -> FastMCP:
    """
    Create and configure the MCP server

    Args:
        config: Server configuration (default: from environment)
        dispatcher: Pre-built dispatcher (default: Gemini + Context7)

    Returns:
        Configured FastMCP server instance

    Raises:
        ConfigurationError: If the configuration is invalid
    """
    config = config or PlannerConfig.from_env()
    config.validate()
    if config.debug:
        logger.debug(config.display())

    dispatcher = dispatcher or build_dispatcher(config)

    mcp = FastMCP(config.server_name)

    logger.info("Registering tools...")
    register_connection_tools(mcp, dispatcher)
    register_planning_tools(mcp, dispatcher)

    logger.info(f"Server '{config.server_name}' v{config.server_version} ready (model: {config.gemini_model})")
    return mcp


def main():
    """Main entry point"""
    load_env_file()
    try:
        mcp = create_server()
    except ConfigurationError as e:
        logger.critical(f"Server failed to start: {e}")
        if "GEMINI_API_KEY" in str(e):
            print("Set it: export GEMINI_API_KEY=your_key_here", file=sys.stderr)
        sys.exit(1)

    mcp.run()


if __name__ == "__main__":
    main()
