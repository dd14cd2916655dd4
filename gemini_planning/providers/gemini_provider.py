"""Google Gemini LLM provider."""

import logging
import os
from typing import Optional

import google.generativeai as genai

from ..config import DEFAULT_MODEL
from ..errors import UpstreamTransportError
from .base import LLMProvider

logger = logging.getLogger(__name__)


class GeminiProvider(LLMProvider):
    """Gemini-based plan generation provider."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = DEFAULT_MODEL,
        temperature: float = 0.3,
        max_output_tokens: int = 8000,
    ):
        self.api_key = api_key or os.environ.get("GEMINI_API_KEY")
        self._model_name = model
        self.temperature = temperature
        self.max_output_tokens = max_output_tokens

        genai.configure(api_key=self.api_key)
        self._client = genai.GenerativeModel(
            model_name=model,
            generation_config={
                "temperature": temperature,
                "max_output_tokens": max_output_tokens,
            },
        )

    @property
    def name(self) -> str:
        return "gemini"

    @property
    def model(self) -> str:
        return self._model_name

    async def generate(self, prompt: str) -> str:
        """Generate text using Gemini."""
        try:
            response = await self._client.generate_content_async(prompt)
            return response.text
        except Exception as e:
            logger.error(f"Gemini request failed for model '{self._model_name}': {e}")
            raise UpstreamTransportError(f"Gemini request failed: {e}") from e
