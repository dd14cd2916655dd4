"""
Configuration for the Gemini Planning MCP server.

Values come from the process environment, optionally seeded from ``~/.env``.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from . import __version__
from .errors import ConfigurationError

DEFAULT_MODEL = "gemini-2.5-pro"
DEFAULT_CONTEXT7_URL = "https://mcp.context7.com/mcp"


def load_env_file(path: Optional[Path] = None) -> bool:
    """Load variables from ``~/.env`` without overriding the environment."""
    env_path = path or Path.home() / ".env"
    return load_dotenv(env_path, override=False)


@dataclass
class PlannerConfig:
    """Server configuration with environment variable support."""

    # Gemini
    gemini_api_key: str = ""
    gemini_model: str = DEFAULT_MODEL
    temperature: float = 0.3
    max_output_tokens: int = 8000

    # Context7
    context7_url: str = DEFAULT_CONTEXT7_URL
    context7_timeout: float = 30.0  # seconds

    # Server metadata
    server_name: str = "gemini-planning-server"
    server_version: str = field(default=__version__)
    debug: bool = False

    @classmethod
    def from_env(cls) -> "PlannerConfig":
        """Create configuration from environment variables."""
        return cls(
            gemini_api_key=os.environ.get("GEMINI_API_KEY", "").strip(),
            gemini_model=os.environ.get("GEMINI_MODEL", DEFAULT_MODEL),
            temperature=float(os.environ.get("GEMINI_TEMPERATURE", 0.3)),
            max_output_tokens=int(os.environ.get("GEMINI_MAX_TOKENS", 8000)),
            context7_url=os.environ.get("CONTEXT7_URL", DEFAULT_CONTEXT7_URL),
            context7_timeout=float(os.environ.get("CONTEXT7_TIMEOUT_SECONDS", 30.0)),
            server_name=os.environ.get("MCP_SERVER_NAME", "gemini-planning-server"),
            server_version=os.environ.get("MCP_SERVER_VERSION", __version__),
            debug=os.environ.get("DEBUG", "false").lower() == "true",
        )

    def validate(self) -> bool:
        """Validate configuration"""
        errors = []

        if not self.gemini_api_key:
            errors.append("GEMINI_API_KEY not set")

        if not 0.0 <= self.temperature <= 2.0:
            errors.append(f"Temperature out of range [0, 2]: {self.temperature}")

        if self.max_output_tokens <= 0:
            errors.append(f"Max output tokens must be positive: {self.max_output_tokens}")

        if errors:
            raise ConfigurationError("Configuration errors:\n" + "\n".join(f"  - {e}" for e in errors))

        return True

    @property
    def masked_api_key(self) -> str:
        if not self.gemini_api_key:
            return "(not set)"
        return "***" + self.gemini_api_key[-4:]

    def display(self) -> str:
        """Display configuration (for debugging)"""
        return f"""
Gemini Planning MCP Configuration
=================================
Server: {self.server_name} v{self.server_version}
Debug: {self.debug}

Gemini:
  Model: {self.gemini_model}
  Temperature: {self.temperature}
  Max output tokens: {self.max_output_tokens}
  API key: {self.masked_api_key}

Context7:
  URL: {self.context7_url}
  Timeout: {self.context7_timeout}s
=================================
"""
