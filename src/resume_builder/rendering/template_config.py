"""Resolution of a raw :class:`TemplateConfig` into concrete style values.

Any missing or unsafe value is replaced by its default so the stylesheet is
always valid CSS, whatever the stored template contains.
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from resume_builder.rendering.contracts import TemplateSection
from resume_builder.rendering.formatting import as_items, as_mapping

__all__ = [
    "DEFAULT_STYLE",
    "LAYOUT_COLUMNS",
    "TemplateStyle",
    "ordered_sections",
    "resolve_style",
]

LAYOUT_COLUMNS = {
    "single-column": 1,
    "two-column": 2,
    "three-column": 3,
}

_COLOR_RE = re.compile(
    r"^(?:#(?:[0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})"
    r"|[a-zA-Z]{3,30}"
    r"|rgba?\(\s*[0-9.%,\s]+\))$"
)
_FONT_RE = re.compile(r"^[A-Za-z0-9][A-Za-z0-9 \-]{0,63}$")


@dataclass(frozen=True)
class TemplateStyle:
    """Concrete, CSS-safe style values for one render."""

    layout: str = "single-column"
    primary: str = "#3B82F6"
    secondary: str = "#6B7280"
    accent: str = "#10B981"
    heading_font: str = "Inter"
    body_font: str = "Inter"
    section_spacing: int = 20
    item_spacing: int = 10

    @property
    def columns(self) -> int:
        return LAYOUT_COLUMNS[self.layout]


DEFAULT_STYLE = TemplateStyle()


def _color(value: Any, default: str) -> str:
    if isinstance(value, str) and _COLOR_RE.match(value.strip()):
        return value.strip()
    return default


def _font(value: Any, default: str) -> str:
    if isinstance(value, str) and _FONT_RE.match(value.strip()):
        return value.strip()
    return default


def _spacing(value: Any, default: int) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    if not math.isfinite(value) or value < 0 or value > 200:
        return default
    return int(value)


def resolve_style(template: Mapping[str, Any] | None) -> TemplateStyle:
    """Return the :class:`TemplateStyle` described by *template*."""
    config = as_mapping(template)
    colors = as_mapping(config.get("colors"))
    fonts = as_mapping(config.get("fonts"))
    spacing = as_mapping(config.get("spacing"))

    layout = config.get("layout")
    if not isinstance(layout, str) or layout not in LAYOUT_COLUMNS:
        layout = DEFAULT_STYLE.layout

    return TemplateStyle(
        layout=layout,
        primary=_color(colors.get("primary"), DEFAULT_STYLE.primary),
        secondary=_color(colors.get("secondary"), DEFAULT_STYLE.secondary),
        accent=_color(colors.get("accent"), DEFAULT_STYLE.accent),
        heading_font=_font(fonts.get("heading"), DEFAULT_STYLE.heading_font),
        body_font=_font(fonts.get("body"), DEFAULT_STYLE.body_font),
        section_spacing=_spacing(spacing.get("section"), DEFAULT_STYLE.section_spacing),
        item_spacing=_spacing(spacing.get("item"), DEFAULT_STYLE.item_spacing),
    )


def _order_key(section: Mapping[str, Any]) -> float:
    order = section.get("order")
    if isinstance(order, bool) or not isinstance(order, (int, float)):
        return math.inf
    return float(order)


def ordered_sections(sections: Any) -> list[TemplateSection]:
    """Return *sections* sorted by ``order``.

    The sort is stable, so equal orders keep their insertion order. Entries
    without a numeric order go last.
    """
    return [dict(section) for section in sorted(as_items(sections), key=_order_key)]
