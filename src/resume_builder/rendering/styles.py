"""Inline stylesheet generation.

Every colour-bearing rule in ``templates/resume.css`` binds to one of the
template's three palette slots, so swapping the template recolours the whole
document at once.
"""

from __future__ import annotations

from resume_builder.rendering.environment import env
from resume_builder.rendering.template_config import TemplateStyle

__all__ = ["build_stylesheet"]


def build_stylesheet(style: TemplateStyle) -> str:
    """Return the CSS for *style*."""
    return env.get_template("resume.css").render(style=style)
