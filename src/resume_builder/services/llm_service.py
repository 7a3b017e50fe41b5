"""LLM service with multi-provider support (Gemini, OpenAI)."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from resume_builder.services.llm_providers import LLMError, LLMProvider

logger = logging.getLogger(__name__)

__all__ = ["NOT_CONFIGURED_MESSAGE", "LLMService", "TextGeneration"]

NOT_CONFIGURED_MESSAGE = (
    "AI provider not configured. Please add your API key to environment variables."
)


@dataclass(frozen=True)
class TextGeneration:
    """Outcome of a generation request.

    ``text`` is ``None`` when no text could be produced; ``message`` then
    explains why.
    """

    text: str | None
    message: str | None = None

    @property
    def ok(self) -> bool:
        return self.text is not None


class LLMService:
    def __init__(self, provider: LLMProvider | None = None) -> None:
        """Initialize LLM service with an already-selected provider.

        Args:
            provider: LLM provider instance, or None when AI is disabled.
        """
        self.provider = provider

    @property
    def is_configured(self) -> bool:
        return self.provider is not None

    @property
    def provider_name(self) -> str:
        return self.provider.name if self.provider else "none"

    def generate_text(
        self,
        prompt: str,
        temperature: float | None = 0.7,
        max_tokens: int | None = None,
        seed: int | None = None,
    ) -> TextGeneration:
        """Send *prompt* to the provider.

        Never raises: an unconfigured service or a failed provider call is
        reported through :attr:`TextGeneration.message`.
        """
        if self.provider is None:
            return TextGeneration(text=None, message=NOT_CONFIGURED_MESSAGE)

        config = self.provider.generate_llm_config(temperature, max_tokens, seed)
        try:
            text = self.provider.send_prompt(prompt, config)
        except LLMError as exc:
            logger.warning("LLM generation failed: %s", exc)
            return TextGeneration(text=None, message=str(exc))
        return TextGeneration(text=text)
