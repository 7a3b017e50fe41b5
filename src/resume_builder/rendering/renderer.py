"""Resume-to-HTML rendering.

:func:`render` is a pure function of its two inputs: the same record and
template always produce byte-identical markup. The section fragments are
placed into ``templates/page.html`` in a fixed order.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from resume_builder.rendering.contracts import ResumeRecord, TemplateConfig
from resume_builder.rendering.environment import env
from resume_builder.rendering.formatting import as_mapping
from resume_builder.rendering.sections import (
    build_certifications,
    build_education,
    build_experience,
    build_header,
    build_projects,
    build_skills,
    build_summary,
    full_name,
)
from resume_builder.rendering.styles import build_stylesheet
from resume_builder.rendering.template_config import resolve_style

__all__ = ["SECTION_BUILDERS", "render"]

# Output order is fixed; the template's own section order is not consulted.
SECTION_BUILDERS: tuple[Callable[[ResumeRecord], str | None], ...] = (
    build_summary,
    build_experience,
    build_education,
    build_skills,
    build_projects,
    build_certifications,
)


def render(resume: ResumeRecord | Mapping[str, Any], template: TemplateConfig | None) -> str:
    """Render *resume* styled by *template* into a self-contained HTML page."""
    record = as_mapping(resume)
    style = resolve_style(template)

    fragments = [build_header(record)]
    for builder in SECTION_BUILDERS:
        fragment = builder(record)
        if fragment:
            fragments.append(fragment)

    return env.get_template("page.html").render(
        title=full_name(as_mapping(record.get("personal_info"))) or "Resume",
        stylesheet=build_stylesheet(style),
        layout=style.layout,
        fragments=fragments,
    )
