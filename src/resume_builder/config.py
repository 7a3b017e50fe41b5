"""Application settings.

Values are read once from the environment (after loading a local ``.env``
file) into an immutable :class:`Settings` object. Components receive the
settings they need explicitly instead of reading ``os.environ`` themselves.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

from dotenv import load_dotenv

__all__ = ["DEFAULT_PDF_TIMEOUT_MS", "LLM_PROVIDERS", "Settings", "load_settings"]

DEFAULT_PDF_TIMEOUT_MS = 30_000

# "none" disables AI features without treating it as a misconfiguration.
LLM_PROVIDERS = ("gemini", "openai", "none")

_TRUTHY = {"1", "true", "yes", "on"}
_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


@dataclass(frozen=True)
class Settings:
    """Process-wide configuration resolved at startup."""

    llm_provider: str = "none"
    llm_model: str | None = None
    gemini_api_key: str | None = None
    openai_api_key: str | None = None
    pdf_timeout_ms: int = DEFAULT_PDF_TIMEOUT_MS
    cors_origins: tuple[str, ...] = field(default_factory=lambda: ("*",))
    log_level: str = "INFO"
    seed_templates: bool = True


def _parse_int(raw: str | None, default: int) -> int:
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build :class:`Settings` from *environ* (defaults to ``os.environ``).

    A ``.env`` file in the working directory is loaded first when reading the
    real process environment. Unknown provider names fall back to ``"none"``.
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    provider = (environ.get("LLM_PROVIDER") or "none").strip().lower()
    if provider not in LLM_PROVIDERS:
        provider = "none"

    log_level = (environ.get("LOG_LEVEL") or "INFO").strip().upper()

    origins = tuple(
        origin.strip() for origin in environ.get("CORS_ORIGINS", "*").split(",") if origin.strip()
    )

    return Settings(
        llm_provider=provider,
        llm_model=environ.get("LLM_MODEL") or None,
        gemini_api_key=environ.get("GEMINI_API_KEY") or None,
        openai_api_key=environ.get("OPENAI_API_KEY") or None,
        pdf_timeout_ms=_parse_int(environ.get("PDF_TIMEOUT_MS"), DEFAULT_PDF_TIMEOUT_MS),
        cors_origins=origins or ("*",),
        log_level=log_level if log_level in _LOG_LEVELS else "INFO",
        seed_templates=environ.get("SEED_TEMPLATES", "true").strip().lower() in _TRUTHY,
    )
