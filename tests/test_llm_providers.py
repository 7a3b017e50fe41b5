from __future__ import annotations

from types import SimpleNamespace
from typing import Any

import pytest

from resume_builder.config import Settings
from resume_builder.services.llm_providers import (
    GeminiProvider,
    LLMError,
    LLMProvider,
    OpenAIProvider,
    build_provider,
)


class MockLLMProvider(LLMProvider):
    """Mock provider for testing abstract base class."""

    def send_prompt(self, prompt: str, config: dict) -> str:
        return f"Mock response to: {prompt}"


class _FakeGeminiClient:
    def __init__(self, api_key: str) -> None:
        self.api_key = api_key
        self.calls: list[dict[str, Any]] = []
        self.response_text: str | None = "  Gemini says hi  "
        self.models = self

    def generate_content(self, **kwargs: Any) -> SimpleNamespace:
        self.calls.append(kwargs)
        return SimpleNamespace(text=self.response_text)


class _FakeOpenAIClient:
    def __init__(self, api_key: str) -> None:
        self.api_key = api_key
        self.calls: list[dict[str, Any]] = []
        self.error: Exception | None = None
        self.chat = SimpleNamespace(completions=self)

    def create(self, **kwargs: Any) -> SimpleNamespace:
        if self.error is not None:
            raise self.error
        self.calls.append(kwargs)
        message = SimpleNamespace(content=" OpenAI says hi ")
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


@pytest.fixture
def fake_genai(monkeypatch: pytest.MonkeyPatch) -> None:
    import google.genai as _genai

    monkeypatch.setattr(_genai, "Client", _FakeGeminiClient, raising=True)


@pytest.fixture
def fake_openai(monkeypatch: pytest.MonkeyPatch) -> None:
    import openai

    monkeypatch.setattr(openai, "OpenAI", _FakeOpenAIClient, raising=True)


def test_generate_llm_config_with_all_parameters() -> None:
    """Test config generation with all parameters set."""
    provider = MockLLMProvider()
    config = provider.generate_llm_config(temperature=0.5, max_tokens=100, seed=42)

    assert config == {"temperature": 0.5, "max_tokens": 100, "seed": 42}


def test_generate_llm_config_with_no_parameters() -> None:
    """Test config generation with all parameters as None."""
    provider = MockLLMProvider()
    config = provider.generate_llm_config(temperature=None, max_tokens=None, seed=None)

    assert config == {}


def test_gemini_provider_requires_api_key(fake_genai: None) -> None:
    with pytest.raises(LLMError, match="GEMINI_API_KEY"):
        GeminiProvider(api_key=None)


def test_gemini_config_maps_max_tokens(fake_genai: None) -> None:
    provider = GeminiProvider(api_key="test-key")
    config = provider.generate_llm_config(temperature=0.2, max_tokens=50, seed=None)

    assert config == {"temperature": 0.2, "max_output_tokens": 50}


def test_gemini_send_prompt_strips_response(fake_genai: None) -> None:
    provider = GeminiProvider(api_key="test-key", model="gemini-test")

    assert provider.send_prompt("hello", {"temperature": 0.1}) == "Gemini says hi"
    call = provider.client.calls[0]
    assert call == {"model": "gemini-test", "contents": "hello", "config": {"temperature": 0.1}}


def test_gemini_empty_response_is_empty_string(fake_genai: None) -> None:
    provider = GeminiProvider(api_key="test-key")
    provider.client.response_text = None

    assert provider.send_prompt("hello", {}) == ""


def test_openai_provider_requires_api_key(fake_openai: None) -> None:
    with pytest.raises(LLMError, match="OPENAI_API_KEY"):
        OpenAIProvider(api_key="")


def test_openai_send_prompt(fake_openai: None) -> None:
    provider = OpenAIProvider(api_key="sk-test")

    assert provider.send_prompt("hello", {"temperature": 0.3}) == "OpenAI says hi"
    call = provider.client.calls[0]
    assert call["model"] == OpenAIProvider.default_model
    assert call["messages"] == [{"role": "user", "content": "hello"}]
    assert call["temperature"] == 0.3


def test_openai_errors_are_wrapped(fake_openai: None) -> None:
    provider = OpenAIProvider(api_key="sk-test")
    provider.client.error = RuntimeError("rate limited")

    with pytest.raises(LLMError, match="rate limited"):
        provider.send_prompt("hello", {})


def test_build_provider_selects_configured_strategy(fake_genai: None, fake_openai: None) -> None:
    gemini = build_provider(Settings(llm_provider="gemini", gemini_api_key="g"))
    openai_provider = build_provider(
        Settings(llm_provider="openai", openai_api_key="o", llm_model="gpt-test")
    )

    assert isinstance(gemini, GeminiProvider)
    assert isinstance(openai_provider, OpenAIProvider)
    assert openai_provider.model == "gpt-test"


def test_build_provider_returns_none_when_disabled_or_missing_key(
    fake_genai: None, fake_openai: None
) -> None:
    assert build_provider(Settings()) is None
    assert build_provider(Settings(llm_provider="gemini")) is None
    assert build_provider(Settings(llm_provider="openai", gemini_api_key="g")) is None
