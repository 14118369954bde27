"""Text generation provider protocol."""

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class GenerationRequest:
    """A single prompt sent to a generative model."""

    prompt: str
    model: str | None = None
    temperature: float | None = None
    top_p: float | None = None


class ITextGenerator(Protocol):
    """Protocol for generative text providers."""

    async def generate(self, request: GenerationRequest) -> str:
        """
        Generate text for a prompt.

        Args:
            request: Prompt and optional sampling overrides

        Returns:
            The generated text, stripped of surrounding whitespace

        Raises:
            AINotConfiguredError: If the provider has no credentials
            AIServiceError: If the upstream call fails
            AIEmptyResponseError: If the model returns no text
        """
        ...
