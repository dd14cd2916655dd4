"""Clients for external services."""

from .context7 import Context7Client, parse_rpc_body

__all__ = ["Context7Client", "parse_rpc_body"]
