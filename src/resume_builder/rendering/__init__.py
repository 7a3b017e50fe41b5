"""Resume rendering: structured record + template config -> HTML markup."""

from __future__ import annotations

from resume_builder.rendering.contracts import ResumeRecord, TemplateConfig
from resume_builder.rendering.formatting import format_date, format_date_range
from resume_builder.rendering.renderer import render
from resume_builder.rendering.template_config import (
    TemplateStyle,
    ordered_sections,
    resolve_style,
)

__all__ = [
    "ResumeRecord",
    "TemplateConfig",
    "TemplateStyle",
    "format_date",
    "format_date_range",
    "ordered_sections",
    "render",
    "resolve_style",
]
