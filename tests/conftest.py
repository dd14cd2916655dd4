"""Shared test helpers."""

import asyncio
import json

import pytest

from gemini_planning.errors import UpstreamTransportError
from gemini_planning.providers.base import LLMProvider


SAMPLE_PLAN = {
    "overview": "A small todo list service",
    "architecture": [
        {"component": "API", "purpose": "CRUD endpoints", "technologies": ["FastAPI"]}
    ],
    "implementation_steps": [
        {
            "id": "1",
            "phase": "setup",
            "description": "Create project skeleton",
            "files_to_create": ["pyproject.toml", "app/__init__.py"],
            "dependencies": [],
        },
        {
            "id": "2",
            "phase": "core",
            "description": "Implement todo model",
            "files_to_create": ["app/models.py"],
            "dependencies": ["1"],
        },
        {
            "id": "3",
            "phase": "setup",
            "description": "Configure linting",
            "files_to_create": [],
            "dependencies": [],
        },
    ],
    "file_structure": {"app": ["__init__.py", "models.py"]},
    "dependencies": [
        {"name": "fastapi", "version": "0.110", "purpose": "web framework"}
    ],
    "testing_strategy": "pytest",
    "deployment_notes": "Docker",
}


def fenced(plan: dict) -> str:
    """Wrap a plan the way Gemini usually answers."""
    return "Here is the plan:\n```json\n" + json.dumps(plan) + "\n```\nGood luck!"


def run(coro):
    return asyncio.run(coro)


def payload(result) -> dict:
    """Decode the JSON text of a tool result."""
    return json.loads(result.content[0].text)


class StubLLM(LLMProvider):
    """LLM provider returning canned responses and recording prompts."""

    def __init__(self, responses=None, error: Exception = None):
        self.responses = list(responses or [])
        self.error = error
        self.prompts = []

    @property
    def name(self) -> str:
        return "stub"

    @property
    def model(self) -> str:
        return "stub-model"

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error:
            raise self.error
        return self.responses.pop(0) if self.responses else ""


class StubDocs:
    """Documentation client resolving every library to ``/<name>/docs``."""

    url = "https://context7.test/mcp"

    def __init__(self, docs=None, failing=(), list_error: Exception = None):
        self.docs = docs or {}
        self.failing = dict.fromkeys(failing, RuntimeError("lookup exploded"))
        self.list_error = list_error
        self.calls = []

    async def list_tools(self):
        self.calls.append(("list",))
        if self.list_error:
            raise self.list_error
        return {"tools": [{"name": "resolve-library-id"}, {"name": "get-library-docs"}]}

    async def resolve_library_id(self, library_name):
        self.calls.append(("resolve", library_name))
        if library_name in self.failing:
            raise self.failing[library_name]
        return f"/{library_name}/docs"

    async def get_library_docs(self, library_id, topic=None, tokens=None):
        self.calls.append(("docs", library_id, topic, tokens))
        name = library_id.strip("/").split("/")[0]
        return self.docs.get(name, f"{name} reference text")


@pytest.fixture
def llm():
    return StubLLM(responses=[fenced(SAMPLE_PLAN)])


@pytest.fixture
def docs():
    return StubDocs()


@pytest.fixture
def dispatcher(llm, docs):
    from gemini_planning.planning.store import ContextStore
    from gemini_planning.tools.dispatcher import ToolDispatcher

    return ToolDispatcher(ContextStore(), llm, docs)


@pytest.fixture
def unreachable_docs():
    return StubDocs(list_error=UpstreamTransportError("Context7 HTTP 503: down", status_code=503))
