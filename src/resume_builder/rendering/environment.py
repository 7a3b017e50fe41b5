"""Jinja2 environment shared by the page and section templates."""

from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from resume_builder.rendering.formatting import format_date, format_date_range

__all__ = ["TEMPLATES_DIR", "env"]

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

# HTML templates are autoescaped; the stylesheet template is not.
env = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    autoescape=select_autoescape(enabled_extensions=("html",), default_for_string=True),
    undefined=StrictUndefined,
    trim_blocks=True,
    lstrip_blocks=True,
)

env.filters["format_date"] = format_date
env.filters["format_date_range"] = format_date_range
