"""LLM providers for plan generation."""

from .base import LLMProvider
from .gemini_provider import GeminiProvider

__all__ = ["LLMProvider", "GeminiProvider"]
