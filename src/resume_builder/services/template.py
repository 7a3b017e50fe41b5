"""Template service: listing, lookup, creation, usage counting and seeding."""

from __future__ import annotations

import logging
from typing import Any, TypedDict

from resume_builder.data.db import get_session
from resume_builder.data.models import Template
from resume_builder.data.stock_templates import STOCK_TEMPLATES
from resume_builder.rendering.contracts import TemplateConfig
from resume_builder.rendering.template_config import ordered_sections

logger = logging.getLogger(__name__)

__all__ = [
    "TemplateData",
    "create_template",
    "get_template",
    "increment_usage",
    "list_templates",
    "seed_templates",
    "template_config",
]

_TEMPLATE_FIELDS = (
    "name",
    "description",
    "category",
    "preview",
    "config",
    "sections",
    "premium",
    "active",
    "usage",
    "rating_average",
    "rating_count",
)


class TemplateData(TypedDict, total=False):
    name: str
    description: str
    category: str
    preview: str
    config: dict[str, Any]
    sections: list[dict[str, Any]]
    premium: bool
    active: bool
    usage: int
    rating_average: float
    rating_count: int


def template_config(template: Template) -> TemplateConfig:
    """Build the renderer's read-only view of *template*."""
    config = dict(template.config or {})
    config["sections"] = ordered_sections(template.sections)
    return config  # type: ignore[return-value]


def _template_to_dict(template: Template) -> dict:
    return {
        "id": template.id,
        "name": template.name,
        "description": template.description,
        "category": template.category,
        "preview": template.preview,
        "config": template.config or {},
        "sections": ordered_sections(template.sections),
        "premium": template.premium,
        "active": template.active,
        "usage": template.usage,
        "rating": {"average": template.rating_average, "count": template.rating_count},
        "created_at": template.created_at,
        "updated_at": template.updated_at,
    }


def _new_template(template_data: TemplateData) -> Template:
    template = Template(name=template_data["name"], category=template_data["category"])
    for field in _TEMPLATE_FIELDS:
        if field in template_data:
            setattr(template, field, template_data[field])
    return template


def list_templates(category: str | None = None, premium: bool | None = None) -> list[dict]:
    """List active templates, most used first, then newest."""
    with get_session() as session:
        query = session.query(Template).filter(Template.active.is_(True))
        if category:
            query = query.filter(Template.category == category)
        if premium is not None:
            query = query.filter(Template.premium.is_(premium))
        templates = query.order_by(
            Template.usage.desc(), Template.created_at.desc(), Template.id.desc()
        ).all()
        return [_template_to_dict(t) for t in templates]


def get_template(template_id: int) -> dict | None:
    with get_session() as session:
        template = session.get(Template, template_id)
        return _template_to_dict(template) if template else None


def create_template(template_data: TemplateData) -> dict:
    with get_session() as session:
        template = _new_template(template_data)
        session.add(template)
        session.flush()
        logger.info("Created template %r (%s)", template.name, template.category)
        return _template_to_dict(template)


def increment_usage(template_id: int) -> bool:
    """Bump the usage counter. Returns False if the template does not exist."""
    with get_session() as session:
        template = session.get(Template, template_id)
        if template is None:
            return False
        template.usage = (template.usage or 0) + 1
        return True


def seed_templates() -> int:
    """Insert the stock templates if the table is empty.

    Returns:
        Number of templates inserted.
    """
    with get_session() as session:
        if session.query(Template.id).first() is not None:
            return 0
        session.add_all(_new_template(data) for data in STOCK_TEMPLATES)
    logger.info("Seeded %d stock templates", len(STOCK_TEMPLATES))
    return len(STOCK_TEMPLATES)
