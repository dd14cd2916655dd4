"""Error types for planning tools.

Every error carries an ``error_type`` that is reported in the tool's
error envelope.
"""


class PlanningError(Exception):
    """Base error for planning operations."""

    error_type = "error"


class ConfigurationError(PlanningError):
    """Missing or invalid server configuration."""

    error_type = "configuration"


class ValidationError(PlanningError):
    """Missing or invalid tool argument."""

    error_type = "validation"


class NotFoundError(PlanningError):
    """Unknown context, or a context without plans."""

    error_type = "not_found"


class UpstreamTransportError(PlanningError):
    """Network failure or non-success HTTP status from an external service."""

    error_type = "upstream_transport"

    def __init__(self, message: str, status_code: int = None, body: str = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class UpstreamProtocolError(PlanningError):
    """JSON-RPC error response, or a body that could not be parsed."""

    error_type = "upstream_protocol"

    def __init__(self, message: str, body: str = None):
        super().__init__(message)
        self.body = body


class PlanExtractionError(PlanningError):
    """Generated text contained no recoverable JSON plan."""

    error_type = "plan_extraction"

    def __init__(self, message: str, raw_text: str = None):
        super().__init__(message)
        self.raw_text = raw_text
