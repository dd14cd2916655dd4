"""
Tool dispatcher

Maps tool names to planning operations and wraps every outcome in a
``CallToolResult`` with a single text item:

- JSON payloads carry ``success``; ``isError`` is set exactly when it is false
- the checklist tool returns Markdown on success
- any failure becomes ``{"success": false, "error": ..., "error_type": ...}``
"""

import json
import logging
from typing import Awaitable, Callable, Dict, List, Optional, Union

from mcp.types import CallToolResult, TextContent

from ..clients.context7 import Context7Client
from ..errors import NotFoundError, PlanningError, ValidationError
from ..planning.checklist import render_checklist
from ..planning.extractor import extract_plan
from ..planning.prompts import build_plan_prompt
from ..planning.store import ContextStore
from ..providers.base import LLMProvider
from ..schemas.tool_schemas import (
    CreateContextInput,
    GeneratePlanInput,
    LibraryRequest,
    RenderChecklistInput,
    parse_arguments,
)

logger = logging.getLogger(__name__)

PROBE_PROMPT = 'Say "Connection successful" in JSON format'

TOOL_NAMES = (
    "test_gemini_connection",
    "test_context7_connection",
    "create_project_context",
    "generate_plan_with_gemini",
    "render_plan_checklist",
)

ToolOutput = Union[dict, str]


def _text_result(text: str, is_error: bool = False) -> CallToolResult:
    return CallToolResult(content=[TextContent(type="text", text=text)], isError=is_error)


def to_tool_result(output: ToolOutput) -> CallToolResult:
    """Wrap a handler's output in the tool response envelope."""
    if isinstance(output, str):
        return _text_result(output)
    return _text_result(json.dumps(output, indent=2, default=str), is_error=output.get("success") is False)


def error_payload(error: Exception) -> dict:
    error_type = error.error_type if isinstance(error, PlanningError) else "internal"
    return {"success": False, "error": str(error), "error_type": error_type}


class ToolDispatcher:
    """Routes tool calls to planning operations.

    Owns the context store for the server's lifetime; the LLM provider and
    the documentation client are injected.
    """

    def __init__(self, store: ContextStore, llm: LLMProvider, docs: Context7Client):
        self.store = store
        self.llm = llm
        self.docs = docs
        self._handlers: Dict[str, Callable[[dict], Awaitable[ToolOutput]]] = {
            "test_gemini_connection": self.test_gemini_connection,
            "test_context7_connection": self.test_context7_connection,
            "create_project_context": self.create_project_context,
            "generate_plan_with_gemini": self.generate_plan_with_gemini,
            "render_plan_checklist": self.render_plan_checklist,
        }

    async def dispatch(self, name: str, arguments: Optional[dict] = None) -> CallToolResult:
        """Run a tool; never raises."""
        logger.info(f"Tool call: {name}")
        try:
            handler = self._handlers.get(name)
            if handler is None:
                raise ValidationError(f"Unknown tool: {name}")
            output = await handler(arguments or {})
        except PlanningError as e:
            logger.error(f"{name} failed ({e.error_type}): {e}")
            return to_tool_result(error_payload(e))
        except Exception as e:
            logger.error(f"Unexpected error in {name}: {e}", exc_info=True)
            return to_tool_result(error_payload(e))
        return to_tool_result(output)

    # ------------------------------------------------------------------
    # Connection checks
    # ------------------------------------------------------------------

    async def test_gemini_connection(self, arguments: dict) -> dict:
        response = await self.llm.generate(PROBE_PROMPT)
        return {
            "success": True,
            "message": "Gemini connection successful",
            "model": self.llm.model,
            "response": response,
        }

    async def test_context7_connection(self, arguments: dict) -> dict:
        # Diagnostic: report failures in the payload instead of raising
        try:
            tools = await self.docs.list_tools()
        except PlanningError as e:
            logger.warning(f"Context7 connection check failed: {e}")
            return {
                "success": False,
                "url": self.docs.url,
                "error": str(e),
                "error_type": e.error_type,
            }
        return {"success": True, "url": self.docs.url, "tools": tools}

    # ------------------------------------------------------------------
    # Planning
    # ------------------------------------------------------------------

    async def create_project_context(self, arguments: dict) -> dict:
        params = parse_arguments(CreateContextInput, arguments)
        context = self.store.create(params.project_name, params.requirements, params.constraints)
        logger.info(f"Created project context: {context.id}")
        return {
            "success": True,
            "contextId": context.id,
            "message": f"Created project context: {context.id}",
            "projectName": context.project_name,
        }

    async def fetch_reference_docs(self, libraries: List[LibraryRequest]) -> str:
        """
        Fetch documentation for each library, one at a time, in order.

        A library that fails to resolve or fetch is logged and skipped.
        """
        sections = []
        for library in libraries:
            try:
                library_id = await self.docs.resolve_library_id(library.name)
                logger.info(f"Resolved library {library.name} -> {library_id}")
                docs = await self.docs.get_library_docs(library_id, library.topic, library.tokens)
            except Exception as e:
                logger.warning(f"Failed to fetch docs for {library.name}: {e}")
                continue
            header = f"Library: {library.name}"
            if library.topic:
                header += f" ({library.topic})"
            sections.append(f"{header}\n{docs}")
        return "\n\n".join(sections)

    async def generate_plan_with_gemini(self, arguments: dict) -> dict:
        params = parse_arguments(GeneratePlanInput, arguments)

        if params.context_id:
            context = self.store.require(params.context_id)
        else:
            context = self.store.create(params.project_name, params.requirements, params.constraints)
            logger.info(f"Created project context: {context.id}")

        reference_docs = await self.fetch_reference_docs(params.libraries)

        prompt = build_plan_prompt(
            context.project_name,
            context.requirements,
            constraints=params.constraints or context.constraints,
            reference_docs=reference_docs,
        )
        raw_text = await self.llm.generate(prompt)
        plan = extract_plan(raw_text)

        record = self.store.append_plan(context.id, plan, [lib.name for lib in params.libraries])
        logger.info(f"Recorded plan {record.id} for context {context.id}")

        return {
            "success": True,
            "contextId": context.id,
            "plan": plan,
            "message": "Plan generated successfully",
        }

    async def render_plan_checklist(self, arguments: dict) -> str:
        params = parse_arguments(RenderChecklistInput, arguments)
        context = self.store.require(params.context_id)
        record = context.latest_plan
        if record is None:
            raise NotFoundError("No plans found")
        return render_checklist(context, record.plan)
