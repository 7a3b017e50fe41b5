"""Text-generation backends for the AI writing assistant.

Each provider wraps one vendor SDK behind :meth:`LLMProvider.send_prompt`.
Credentials and model names are passed in explicitly; :func:`build_provider`
is the only place that reads :class:`~resume_builder.config.Settings`.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from resume_builder.config import Settings

logger = logging.getLogger(__name__)

__all__ = [
    "GeminiProvider",
    "LLMError",
    "LLMProvider",
    "OpenAIProvider",
    "build_provider",
]


class LLMError(RuntimeError):
    """A provider is misconfigured or its API call failed."""


class LLMProvider(ABC):
    """Common interface of the resume-writing backends."""

    name: str = "base"

    def generate_llm_config(
        self,
        temperature: float | None,
        max_tokens: int | None,
        seed: int | None,
    ) -> dict:
        """Return only the request options that were set.

        Subclasses rename keys where their SDK uses a different spelling.
        """
        options = {"temperature": temperature, "max_tokens": max_tokens, "seed": seed}
        return {key: value for key, value in options.items() if value is not None}

    @abstractmethod
    def send_prompt(self, prompt: str, config: dict) -> str:
        """Return the model's reply to *prompt*, stripped of outer whitespace.

        Raises:
            LLMError: If the vendor call fails for any reason.
        """


class GeminiProvider(LLMProvider):
    """Google Gemini through the ``google-genai`` SDK."""

    name = "gemini"
    default_model = "gemini-1.5-flash"

    def __init__(self, api_key: str | None, model: str | None = None) -> None:
        from google import genai

        if not api_key:
            raise LLMError("Missing GEMINI_API_KEY")

        self.model = model or self.default_model
        self.client = genai.Client(api_key=api_key)

    def generate_llm_config(
        self,
        temperature: float | None,
        max_tokens: int | None,
        seed: int | None,
    ) -> dict:
        config = super().generate_llm_config(temperature, max_tokens, seed)
        # google-genai calls the length limit max_output_tokens
        if "max_tokens" in config:
            config["max_output_tokens"] = config.pop("max_tokens")
        return config

    def send_prompt(self, prompt: str, config: dict) -> str:
        try:
            response = self.client.models.generate_content(
                model=self.model, contents=prompt, config=config
            )
        except Exception as exc:
            raise LLMError(f"Gemini request failed: {exc}") from exc
        return (response.text or "").strip()


class OpenAIProvider(LLMProvider):
    """OpenAI chat completions through the ``openai`` SDK."""

    name = "openai"
    default_model = "gpt-4o-mini"

    def __init__(self, api_key: str | None, model: str | None = None) -> None:
        from openai import OpenAI

        if not api_key:
            raise LLMError("Missing OPENAI_API_KEY")

        self.model = model or self.default_model
        self.client = OpenAI(api_key=api_key)

    def send_prompt(self, prompt: str, config: dict) -> str:
        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
                **config,
            )
        except Exception as exc:
            raise LLMError(f"OpenAI request failed: {exc}") from exc
        if not response.choices:
            return ""
        return (response.choices[0].message.content or "").strip()


def build_provider(settings: Settings) -> LLMProvider | None:
    """Construct the provider selected in *settings*.

    Returns ``None`` when AI is disabled or the selected provider is missing
    its API key; callers treat that as "AI unavailable", not as an error.
    """
    try:
        if settings.llm_provider == "gemini":
            return GeminiProvider(settings.gemini_api_key, settings.llm_model)
        if settings.llm_provider == "openai":
            return OpenAIProvider(settings.openai_api_key, settings.llm_model)
    except LLMError as exc:
        logger.warning("LLM provider %r unavailable: %s", settings.llm_provider, exc)
    return None
