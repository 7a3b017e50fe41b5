"""Section builders.

Each builder takes the resume record, flattens the part it owns into plain
strings and renders ``templates/sections/<name>.html``. A builder returns
``None`` when the section has nothing to show, so an empty collection never
produces a section title.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from resume_builder.rendering.contracts import ResumeRecord
from resume_builder.rendering.environment import env
from resume_builder.rendering.formatting import (
    as_items,
    as_mapping,
    clean_text,
    join_present,
    text_list,
)

__all__ = [
    "CONTACT_SEPARATOR",
    "SECTION_TITLES",
    "build_certifications",
    "build_education",
    "build_experience",
    "build_header",
    "build_projects",
    "build_skills",
    "build_summary",
    "full_name",
]

CONTACT_SEPARATOR = " | "
SKILL_SEPARATOR = ", "

SECTION_TITLES = {
    "summary": "Professional Summary",
    "experience": "Professional Experience",
    "education": "Education",
    "skills": "Skills",
    "projects": "Projects",
    "certifications": "Certifications",
}


def _render(name: str, /, **context: Any) -> str:
    return env.get_template(f"sections/{name}.html").render(**context)


def _period(item: Mapping[str, Any]) -> dict[str, Any]:
    """Raw date fields, formatted in the template by ``format_date_range``."""
    return {
        "start_date": item.get("start_date"),
        "end_date": item.get("end_date"),
        "current": bool(item.get("current")),
    }


def full_name(personal: Mapping[str, Any]) -> str:
    """Return ``first last``, tolerating either part missing."""
    return join_present(
        (clean_text(personal.get("first_name")), clean_text(personal.get("last_name"))), " "
    )


def build_header(resume: ResumeRecord) -> str:
    """Render the name and contact line. Always present, possibly empty."""
    personal = as_mapping(resume.get("personal_info"))

    linkedin = clean_text(personal.get("linkedin"))
    github = clean_text(personal.get("github"))
    contact = join_present(
        (
            clean_text(personal.get("email")),
            clean_text(personal.get("phone")),
            clean_text(personal.get("location")),
            f"LinkedIn: {linkedin}" if linkedin else "",
            f"GitHub: {github}" if github else "",
        ),
        CONTACT_SEPARATOR,
    )
    return _render("header", name=full_name(personal), contact=contact)


def build_summary(resume: ResumeRecord) -> str | None:
    summary = clean_text(as_mapping(resume.get("personal_info")).get("summary"))
    if not summary:
        return None
    return _render("summary", title=SECTION_TITLES["summary"], summary=summary)


def build_experience(resume: ResumeRecord) -> str | None:
    entries = [
        {
            "position": clean_text(item.get("position")),
            "subtitle": join_present(
                (clean_text(item.get("company")), clean_text(item.get("location"))), ", "
            ),
            "description": clean_text(item.get("description")),
            "achievements": text_list(item.get("achievements")),
            **_period(item),
        }
        for item in as_items(resume.get("experience"))
    ]
    if not entries:
        return None
    return _render("experience", title=SECTION_TITLES["experience"], entries=entries)


def build_education(resume: ResumeRecord) -> str | None:
    entries = []
    for item in as_items(resume.get("education")):
        degree = clean_text(item.get("degree"))
        field = clean_text(item.get("field_of_study"))
        entries.append(
            {
                "degree": f"{degree} in {field}" if degree and field else degree or field,
                "school": clean_text(item.get("school")),
                "description": clean_text(item.get("description")),
                **_period(item),
            }
        )
    if not entries:
        return None
    return _render("education", title=SECTION_TITLES["education"], entries=entries)


def build_projects(resume: ResumeRecord) -> str | None:
    entries = [
        {
            "name": clean_text(item.get("name")),
            "role": clean_text(item.get("role")),
            "link": clean_text(item.get("link")),
            "description": clean_text(item.get("description")),
            **_period(item),
        }
        for item in as_items(resume.get("projects"))
    ]
    if not entries:
        return None
    return _render("projects", title=SECTION_TITLES["projects"], entries=entries)


def build_certifications(resume: ResumeRecord) -> str | None:
    entries = [
        {
            "name": clean_text(item.get("name")),
            "issuer": clean_text(item.get("issuer")),
            "date": item.get("date"),
            "expiration": item.get("expiration"),
            "description": clean_text(item.get("description")),
        }
        for item in as_items(resume.get("certifications"))
    ]
    if not entries:
        return None
    return _render("certifications", title=SECTION_TITLES["certifications"], entries=entries)


def build_skills(resume: ResumeRecord) -> str | None:
    """Render one line per category: label, then items joined by ``", "``."""
    groups = []
    for group in as_items(resume.get("skills")):
        category = clean_text(group.get("category"))
        skills = text_list(group.get("items"))
        if category or skills:
            groups.append({"category": category, "skills": skills})

    if not groups:
        return None
    return _render(
        "skills", title=SECTION_TITLES["skills"], groups=groups, separator=SKILL_SEPARATOR
    )
