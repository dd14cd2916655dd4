"""Abstract base class for LLM providers."""

from abc import ABC, abstractmethod


class LLMProvider(ABC):
    """Abstract base class for LLM providers."""

    @abstractmethod
    async def generate(self, prompt: str) -> str:
        """
        Generate a text completion for a prompt.

        Args:
            prompt: Complete instruction text

        Returns:
            Raw response text
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name for logging (e.g., 'gemini')."""
        pass

    @property
    @abstractmethod
    def model(self) -> str:
        """Configured model identifier."""
        pass
