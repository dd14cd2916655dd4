"""Gemini Planning MCP Server.

Exposes project-planning tools over MCP that combine Context7 library
documentation with Gemini-generated implementation plans.
"""

__version__ = "1.0.0"
