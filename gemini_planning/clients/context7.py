"""Context7 documentation service client.

Context7 speaks JSON-RPC 2.0 over HTTP POST. A response is either a plain
JSON document or an event stream whose last ``data:`` frame carries the
payload.
"""

import json
import logging
import time
from typing import Any, Optional

import httpx

from ..errors import UpstreamProtocolError, UpstreamTransportError

logger = logging.getLogger(__name__)

SSE_DATA_MARKER = "data:"

_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json, text/event-stream",
}


def parse_rpc_body(text: str) -> Any:
    """
    Unwrap a JSON-RPC response body.

    Args:
        text: Raw response body, plain JSON or event stream

    Returns:
        The envelope's ``result`` field

    Raises:
        UpstreamProtocolError: If the body is unparseable or carries an error
    """
    try:
        if SSE_DATA_MARKER in text:
            frames = [line for line in text.split("\n") if line.startswith(SSE_DATA_MARKER)]
            payload = frames[-1][len(SSE_DATA_MARKER):].strip()
        else:
            payload = text
        data = json.loads(payload)
    except (IndexError, ValueError) as e:
        raise UpstreamProtocolError(f"Failed to parse Context7 response: {text}", body=text) from e

    if not isinstance(data, dict):
        raise UpstreamProtocolError(f"Failed to parse Context7 response: {text}", body=text)

    error = data.get("error")
    if error:
        message = error.get("message") if isinstance(error, dict) else str(error)
        raise UpstreamProtocolError(message or "Context7 returned an error", body=text)

    return data.get("result")


def first_text(result: Any) -> str:
    """Return the text of the first content item of a ``tools/call`` result."""
    if not isinstance(result, dict):
        return ""
    content = result.get("content") or []
    if not content or not isinstance(content[0], dict):
        return ""
    return content[0].get("text") or ""


class Context7Client:
    """Async JSON-RPC client for the Context7 MCP endpoint."""

    def __init__(
        self,
        url: str,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.url = url
        self.timeout = timeout
        self._transport = transport
        self._last_request_id = 0

    def _next_request_id(self) -> str:
        # Millisecond timestamp, bumped when two requests share a millisecond
        request_id = max(int(time.time() * 1000), self._last_request_id + 1)
        self._last_request_id = request_id
        return str(request_id)

    async def call(self, method: str, params: Optional[dict] = None) -> Any:
        """
        Perform one JSON-RPC call.

        Raises:
            UpstreamTransportError: On network failure or non-success status
            UpstreamProtocolError: On unparseable or erroring responses
        """
        body = {
            "jsonrpc": "2.0",
            "id": self._next_request_id(),
            "method": method,
            "params": params or {},
        }

        logger.debug(f"Context7 request: {method}")
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(self.url, json=body, headers=_HEADERS)
        except httpx.HTTPError as e:
            raise UpstreamTransportError(f"Context7 request failed: {e}") from e

        text = response.text
        if not response.is_success:
            raise UpstreamTransportError(
                f"Context7 HTTP {response.status_code}: {text}",
                status_code=response.status_code,
                body=text,
            )

        return parse_rpc_body(text)

    async def list_tools(self) -> Any:
        """List the tools the documentation service offers."""
        return await self.call("tools/list")

    async def resolve_library_id(self, library_name: str) -> str:
        """Resolve a library name to a Context7-compatible library ID."""
        result = await self.call("tools/call", {
            "name": "resolve-library-id",
            "arguments": {"libraryName": library_name},
        })
        library_id = first_text(result).strip()
        if not library_id:
            raise UpstreamProtocolError(f"Context7 could not resolve library: {library_name}")
        return library_id

    async def get_library_docs(
        self,
        library_id: str,
        topic: Optional[str] = None,
        tokens: Optional[int] = None,
    ) -> str:
        """Fetch documentation text for a resolved library ID."""
        arguments = {"context7CompatibleLibraryID": library_id}
        if topic:
            arguments["topic"] = topic
        if tokens:
            arguments["tokens"] = tokens

        result = await self.call("tools/call", {
            "name": "get-library-docs",
            "arguments": arguments,
        })
        return first_text(result)
