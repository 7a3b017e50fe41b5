"""Template-agnostic data contracts for resume rendering.

These TypedDicts define the shape of data that flows from the persistence
layer into the renderer. The renderer depends ONLY on these contracts (not
ORM) and treats every key as optional, so partially filled records render
without errors.
"""

from __future__ import annotations

from typing import TypedDict

__all__ = [
    "CertificationEntry",
    "EducationEntry",
    "ExperienceEntry",
    "PersonalInfo",
    "ProjectEntry",
    "ResumeRecord",
    "SkillGroup",
    "TemplateColors",
    "TemplateConfig",
    "TemplateFonts",
    "TemplateSection",
    "TemplateSpacing",
]


class PersonalInfo(TypedDict, total=False):
    """User name, contact details and free-text summary."""

    first_name: str
    last_name: str
    email: str
    phone: str
    location: str
    linkedin: str
    github: str
    website: str
    summary: str


class ExperienceEntry(TypedDict, total=False):
    """A single work-experience record."""

    position: str
    company: str
    location: str
    start_date: str  # ISO date string
    end_date: str
    current: bool
    description: str
    achievements: list[str]


class EducationEntry(TypedDict, total=False):
    """A single education record."""

    degree: str
    field_of_study: str
    school: str
    start_date: str
    end_date: str
    current: bool
    description: str


class SkillGroup(TypedDict, total=False):
    """A labelled group of skills."""

    category: str
    items: list[str]


class ProjectEntry(TypedDict, total=False):
    """A single project record."""

    name: str
    role: str
    start_date: str
    end_date: str
    current: bool
    link: str
    description: str


class CertificationEntry(TypedDict, total=False):
    """A single certification record."""

    name: str
    issuer: str
    date: str
    expiration: str
    description: str


class ResumeRecord(TypedDict, total=False):
    """Top-level bundle passed to the renderer."""

    personal_info: PersonalInfo
    experience: list[ExperienceEntry]
    education: list[EducationEntry]
    skills: list[SkillGroup]
    projects: list[ProjectEntry]
    certifications: list[CertificationEntry]


class TemplateColors(TypedDict, total=False):
    primary: str
    secondary: str
    accent: str


class TemplateFonts(TypedDict, total=False):
    heading: str
    body: str


class TemplateSpacing(TypedDict, total=False):
    section: int
    item: int


class TemplateSection(TypedDict, total=False):
    """Per-section entry of a template's section schema."""

    name: str
    required: bool
    order: int
    style: dict[str, str]


class TemplateConfig(TypedDict, total=False):
    """Style descriptor of a template, read-only at render time."""

    layout: str  # single-column | two-column | three-column
    colors: TemplateColors
    fonts: TemplateFonts
    spacing: TemplateSpacing
    sections: list[TemplateSection]
