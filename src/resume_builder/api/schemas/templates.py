"""Pydantic schemas for template API endpoints."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

from resume_builder.data.models.template import TemplateCategory

Layout = Literal["single-column", "two-column", "three-column"]
Category = TemplateCategory


class TemplateColors(BaseModel):
    primary: str = "#3B82F6"
    secondary: str = "#6B7280"
    accent: str = "#10B981"


class TemplateFonts(BaseModel):
    heading: str = "Inter"
    body: str = "Inter"


class TemplateSpacing(BaseModel):
    section: int = Field(20, ge=0, le=200)
    item: int = Field(10, ge=0, le=200)


class TemplateConfigModel(BaseModel):
    layout: Layout = "single-column"
    colors: TemplateColors = Field(default_factory=TemplateColors)
    fonts: TemplateFonts = Field(default_factory=TemplateFonts)
    spacing: TemplateSpacing = Field(default_factory=TemplateSpacing)


class SectionStyle(BaseModel):
    heading: str | None = None
    content: str | None = None


class TemplateSectionModel(BaseModel):
    name: str
    required: bool = False
    order: int
    style: SectionStyle | None = None


class TemplateRating(BaseModel):
    average: float = 0.0
    count: int = 0


class TemplateCreateRequest(BaseModel):
    """Request schema for creating a template."""

    name: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    category: Category
    preview: str = Field(..., min_length=1, description="URL of a preview image")
    config: TemplateConfigModel = Field(default_factory=TemplateConfigModel)
    sections: list[TemplateSectionModel] = Field(default_factory=list)
    premium: bool = False
    active: bool = True


class TemplateResponse(BaseModel):
    """Response schema for a template.

    ``config`` is returned as stored; ``sections`` are sorted by ``order``.
    """

    id: int
    name: str
    description: str
    category: str
    preview: str
    config: dict
    sections: list[dict]
    premium: bool
    active: bool
    usage: int
    rating: TemplateRating
    created_at: datetime
    updated_at: datetime
