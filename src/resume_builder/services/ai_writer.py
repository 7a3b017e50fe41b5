"""AI drafting helpers for resume text.

Builds the summary and achievement prompts and turns the provider reply into
resume-ready text. Provider failures surface as soft messages, never raise.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from resume_builder.rendering.formatting import as_items, as_mapping
from resume_builder.services.llm_service import LLMService, TextGeneration

__all__ = [
    "build_achievements_prompt",
    "build_summary_prompt",
    "enhance_achievements",
    "generate_summary",
]


def _normalize_bullets(text: str) -> list[str]:
    lines = [ln.strip() for ln in text.splitlines()]
    out: list[str] = []
    for ln in lines:
        if not ln:
            continue
        for prefix in ("- ", "• ", "* ", "•", "-", "*"):
            if ln.startswith(prefix):
                ln = ln[len(prefix) :].strip()
                break
        if ln:
            out.append(ln)
    return out


def _clean(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


def build_summary_prompt(
    personal_info: Mapping[str, Any] | None,
    experience: Sequence[Mapping[str, Any]] | None,
    skills: Sequence[Mapping[str, Any]] | None,
) -> str:
    personal = as_mapping(personal_info)
    name = f"{_clean(personal.get('first_name'))} {_clean(personal.get('last_name'))}".strip()

    roles = [
        f"{_clean(exp.get('position'))} at {_clean(exp.get('company'))}"
        for exp in as_items(experience)
    ]
    skill_names = [
        _clean(item)
        for group in as_items(skills)
        for item in (group.get("items") or [])
        if _clean(item)
    ]

    return (
        "You are a professional resume writer. Write a concise, impactful professional "
        "summary for the following candidate. Focus on their strengths, experience, and "
        "what makes them stand out. Use a confident, positive tone.\n\n"
        "Candidate Info:\n"
        f"Name: {name}\n"
        f"Experience: {', '.join(roles)}\n"
        f"Skills: {', '.join(skill_names)}\n\n"
        "Summary:"
    )


def build_achievements_prompt(achievements: Sequence[str], job_title: str | None) -> str:
    lines = "\n".join(_clean(a) for a in achievements if _clean(a))
    return (
        f"Enhance these professional achievements for a {_clean(job_title) or 'professional'} "
        "position:\n\n"
        f"{lines}\n\n"
        "Make them more impactful by adding specific metrics, action verbs, and quantifiable "
        "results where appropriate. Return one achievement per line, prefixed with '- '."
    )


def generate_summary(
    service: LLMService,
    personal_info: Mapping[str, Any] | None,
    experience: Sequence[Mapping[str, Any]] | None,
    skills: Sequence[Mapping[str, Any]] | None,
) -> TextGeneration:
    """Draft a professional summary paragraph."""
    prompt = build_summary_prompt(personal_info, experience, skills)
    return service.generate_text(prompt, temperature=0.7)


def enhance_achievements(
    service: LLMService,
    achievements: Sequence[str],
    job_title: str | None,
) -> tuple[list[str], str | None]:
    """Rewrite *achievements* for *job_title*.

    Returns the rewritten list and an optional soft message. The input list is
    returned unchanged when the provider is unavailable or returns nothing.
    """
    original = [a for a in achievements if _clean(a)]
    if not original:
        return [], None

    result = service.generate_text(build_achievements_prompt(original, job_title))
    if not result.ok:
        return original, result.message

    enhanced = _normalize_bullets(result.text or "")
    return (enhanced or original), None
