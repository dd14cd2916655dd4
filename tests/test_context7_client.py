# tests/test_context7_client.py
"""Tests for the Context7 JSON-RPC client."""

import json

import httpx
import pytest

from conftest import run


def _client(handler):
    from gemini_planning.clients.context7 import Context7Client

    return Context7Client("https://context7.test/mcp", transport=httpx.MockTransport(handler))


def _reply(text, status=200):
    def handler(request):
        return httpx.Response(status, text=text)
    return handler


def test_parse_sse_body_uses_last_data_frame():
    from gemini_planning.clients.context7 import parse_rpc_body

    body = 'data: {"jsonrpc":"2.0","id":"1","result":{"x":1}}\n'

    assert parse_rpc_body(body) == {"x": 1}


def test_parse_sse_body_with_multiple_frames():
    from gemini_planning.clients.context7 import parse_rpc_body

    body = (
        "event: message\n"
        'data: {"jsonrpc":"2.0","id":"1","result":{"step":1}}\n'
        "\n"
        "event: message\n"
        'data: {"jsonrpc":"2.0","id":"1","result":{"step":2}}\n'
    )

    assert parse_rpc_body(body) == {"step": 2}


def test_parse_plain_error_body():
    from gemini_planning.clients.context7 import parse_rpc_body
    from gemini_planning.errors import UpstreamProtocolError

    with pytest.raises(UpstreamProtocolError, match="^boom$"):
        parse_rpc_body('{"error":{"message":"boom"}}')


def test_parse_unparseable_body_includes_raw_text():
    from gemini_planning.clients.context7 import parse_rpc_body
    from gemini_planning.errors import UpstreamProtocolError

    with pytest.raises(UpstreamProtocolError) as exc_info:
        parse_rpc_body("<html>gateway</html>")

    assert "Failed to parse Context7 response" in str(exc_info.value)
    assert exc_info.value.body == "<html>gateway</html>"


def test_call_sends_jsonrpc_envelope():
    seen = {}

    def handler(request):
        seen["body"] = json.loads(request.content)
        seen["accept"] = request.headers["accept"]
        seen["method"] = request.method
        return httpx.Response(200, json={"jsonrpc": "2.0", "id": "1", "result": {"tools": []}})

    client = _client(handler)
    result = run(client.call("tools/list"))

    assert result == {"tools": []}
    assert seen["method"] == "POST"
    assert seen["body"]["jsonrpc"] == "2.0"
    assert seen["body"]["method"] == "tools/list"
    assert seen["body"]["params"] == {}
    assert seen["body"]["id"].isdigit()
    assert "text/event-stream" in seen["accept"]


def test_request_ids_do_not_repeat():
    ids = []

    def handler(request):
        ids.append(json.loads(request.content)["id"])
        return httpx.Response(200, json={"result": {}})

    client = _client(handler)

    async def twice():
        await client.call("tools/list")
        await client.call("tools/list")

    run(twice())

    assert ids[0] != ids[1]


def test_call_http_error_includes_status_and_body():
    from gemini_planning.errors import UpstreamTransportError

    client = _client(_reply("rate limited", status=429))

    with pytest.raises(UpstreamTransportError) as exc_info:
        run(client.call("tools/list"))

    assert exc_info.value.status_code == 429
    assert str(exc_info.value) == "Context7 HTTP 429: rate limited"


def test_call_network_failure_is_transport_error():
    from gemini_planning.errors import UpstreamTransportError

    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(UpstreamTransportError, match="connection refused"):
        run(_client(handler).call("tools/list"))


def test_call_rpc_error_is_protocol_error():
    from gemini_planning.errors import UpstreamProtocolError

    client = _client(_reply('{"jsonrpc":"2.0","id":"1","error":{"code":-32601,"message":"Method not found"}}'))

    with pytest.raises(UpstreamProtocolError, match="Method not found"):
        run(client.call("nope"))


def test_resolve_library_id_trims_first_content_text():
    seen = {}

    def handler(request):
        seen["params"] = json.loads(request.content)["params"]
        body = {"result": {"content": [{"type": "text", "text": "  /facebook/react \n"}]}}
        return httpx.Response(200, text="data: " + json.dumps(body) + "\n")

    library_id = run(_client(handler).resolve_library_id("react"))

    assert library_id == "/facebook/react"
    assert seen["params"] == {"name": "resolve-library-id", "arguments": {"libraryName": "react"}}


def test_resolve_library_id_empty_result_fails():
    from gemini_planning.errors import UpstreamProtocolError

    client = _client(_reply('{"result":{"content":[]}}'))

    with pytest.raises(UpstreamProtocolError, match="could not resolve"):
        run(client.resolve_library_id("ghost"))


def test_get_library_docs_passes_optional_arguments():
    seen = []

    def handler(request):
        seen.append(json.loads(request.content)["params"]["arguments"])
        return httpx.Response(200, json={"result": {"content": [{"type": "text", "text": "DOCS"}]}})

    client = _client(handler)

    assert run(client.get_library_docs("/vercel/next.js", topic="routing", tokens=3000)) == "DOCS"
    assert run(client.get_library_docs("/vercel/next.js")) == "DOCS"

    assert seen[0] == {"context7CompatibleLibraryID": "/vercel/next.js", "topic": "routing", "tokens": 3000}
    assert seen[1] == {"context7CompatibleLibraryID": "/vercel/next.js"}


def test_dispatcher_with_real_client_over_event_stream(llm):
    """Full documentation path through the client and the dispatcher."""
    from gemini_planning.clients.context7 import Context7Client
    from gemini_planning.planning.store import ContextStore
    from gemini_planning.tools.dispatcher import ToolDispatcher

    def handler(request):
        params = json.loads(request.content)["params"]
        if params["name"] == "resolve-library-id":
            text = "/pallets/flask"
        else:
            text = "Flask routing docs"
        body = {"jsonrpc": "2.0", "id": "1", "result": {"content": [{"type": "text", "text": text}]}}
        return httpx.Response(200, text="event: message\ndata: " + json.dumps(body) + "\n\n")

    docs = Context7Client("https://context7.test/mcp", transport=httpx.MockTransport(handler))
    dispatcher = ToolDispatcher(ContextStore(), llm, docs)

    result = run(dispatcher.dispatch("generate_plan_with_gemini", {
        "projectName": "P",
        "requirements": "R",
        "libraries": [{"name": "flask", "topic": "routing"}],
    }))

    assert result.isError is False
    assert "Library: flask (routing)\nFlask routing docs" in llm.prompts[0]
