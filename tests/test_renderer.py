"""Tests for resume-to-HTML rendering."""

from __future__ import annotations

import re
from typing import Any

import pytest

from resume_builder.rendering import render
from resume_builder.rendering.sections import (
    build_certifications,
    build_education,
    build_experience,
    build_header,
    build_projects,
    build_skills,
    build_summary,
)

MODERN_TEMPLATE: dict[str, Any] = {
    "layout": "single-column",
    "colors": {"primary": "#3B82F6", "secondary": "#6B7280", "accent": "#10B981"},
    "fonts": {"heading": "Inter", "body": "Inter"},
    "spacing": {"section": 20, "item": 10},
}


@pytest.fixture
def full_resume() -> dict[str, Any]:
    return {
        "personal_info": {
            "first_name": "Jane",
            "last_name": "Doe",
            "email": "jane@example.com",
            "phone": "555-0100",
            "location": "Austin, TX",
            "linkedin": "linkedin.com/in/janedoe",
            "github": "github.com/janedoe",
            "summary": "Engineer who ships.",
        },
        "experience": [
            {
                "position": "Engineer",
                "company": "Acme",
                "location": "Remote",
                "start_date": "2022-03-01",
                "current": True,
                "description": "Built things.",
                "achievements": ["Cut latency 40%", "Led migration"],
            }
        ],
        "education": [
            {
                "degree": "BSc",
                "field_of_study": "Computer Science",
                "school": "State University",
                "start_date": "2016-09-01",
                "end_date": "2020-05-15",
            }
        ],
        "skills": [
            {"category": "Languages", "items": ["Python", "Go"]},
            {"category": "Tools", "items": ["Docker"]},
        ],
        "projects": [
            {
                "name": "Resume Builder",
                "role": "Maintainer",
                "start_date": "2023-01-01",
                "link": "https://example.com/rb",
                "description": "Side project.",
            }
        ],
        "certifications": [
            {
                "name": "AWS SAA",
                "issuer": "Amazon",
                "date": "2023-01-15",
                "expiration": "2026-01-15",
            }
        ],
    }


def _body(markup: str) -> str:
    return markup.split("<body>", 1)[1]


class TestEmptyAndMalformedInput:
    def test_empty_record_renders_header_only(self) -> None:
        markup = render({}, MODERN_TEMPLATE)
        body = _body(markup)

        assert '<header class="header">' in body
        assert "<section" not in body
        assert "section-title" not in body

    def test_empty_collections_emit_no_section_titles(self) -> None:
        resume = {
            "personal_info": {"first_name": "Jane"},
            "experience": [],
            "education": [],
            "skills": [],
            "projects": [],
            "certifications": [],
        }
        body = _body(render(resume, MODERN_TEMPLATE))

        for title in (
            "Professional Summary",
            "Professional Experience",
            "Education",
            "Skills",
            "Projects",
            "Certifications",
        ):
            assert title not in body

    def test_null_fields_never_render_placeholder_tokens(self) -> None:
        resume = {
            "personal_info": {"first_name": "Jane", "last_name": None, "email": None},
            "experience": [
                {"position": None, "company": "Acme", "start_date": None, "end_date": "bogus"}
            ],
            "education": [{"degree": None, "school": None}],
            "skills": [{"category": None, "items": None}],
            "projects": [{"name": "X", "link": None}],
            "certifications": [{"name": "Y", "date": "not-a-date", "expiration": None}],
        }
        body = _body(render(resume, MODERN_TEMPLATE))

        for token in ("None", "null", "undefined", "Invalid Date", "NaN"):
            assert token not in body

    def test_wrongly_typed_collections_are_ignored(self) -> None:
        resume = {
            "personal_info": "Jane",
            "experience": "lots",
            "skills": {"category": "Languages"},
            "projects": [None, 3, "x"],
        }
        body = _body(render(resume, None))

        assert "<section" not in body

    def test_missing_template_uses_default_style(self, full_resume: dict[str, Any]) -> None:
        assert render(full_resume, None) == render(full_resume, {})
        assert "#3B82F6" in render(full_resume, None)


class TestContent:
    def test_header_joins_name_and_contact(self, full_resume: dict[str, Any]) -> None:
        header = build_header(full_resume)

        assert '<div class="name">Jane Doe</div>' in header
        assert (
            "jane@example.com | 555-0100 | Austin, TX | "
            "LinkedIn: linkedin.com/in/janedoe | GitHub: github.com/janedoe"
        ) in header

    def test_header_with_only_name(self) -> None:
        header = build_header(
            {"personal_info": {"first_name": "Jane", "last_name": "Doe", "email": "j@x.io"}}
        )

        assert "Jane Doe" in header
        assert "j@x.io" in header
        assert "LinkedIn" not in header
        assert "GitHub" not in header

    def test_current_role_shows_present(self, full_resume: dict[str, Any]) -> None:
        experience = build_experience(full_resume)

        assert experience is not None
        assert "Engineer" in experience
        assert "Acme, Remote" in experience
        assert "Mar 2022 - Present" in experience
        assert "<li>Cut latency 40%</li><li>Led migration</li>" in experience

    def test_current_wins_over_end_date(self) -> None:
        experience = build_experience(
            {
                "experience": [
                    {
                        "position": "Engineer",
                        "company": "Acme",
                        "start_date": "2022-03-01",
                        "end_date": "2023-01-01",
                        "current": True,
                    }
                ]
            }
        )

        assert experience is not None
        assert "Mar 2022 - Present" in experience
        assert "Jan 2023" not in experience

    @pytest.mark.parametrize(
        ("builder", "key", "item"),
        [
            (build_education, "education", {"degree": "BSc", "school": "State University"}),
            (build_projects, "projects", {"name": "Resume Builder", "role": "Maintainer"}),
        ],
    )
    def test_current_wins_over_end_date_in_other_sections(
        self, builder: Any, key: str, item: dict[str, Any]
    ) -> None:
        fragment = builder(
            {
                key: [
                    {
                        **item,
                        "start_date": "2020-01-01",
                        "end_date": "2024-05-01",
                        "current": True,
                    }
                ]
            }
        )

        assert fragment is not None
        assert "Jan 2020 - Present" in fragment
        assert "May 2024" not in fragment

    def test_education_title_combines_degree_and_field(self, full_resume: dict[str, Any]) -> None:
        education = build_education(full_resume)

        assert education is not None
        assert "BSc in Computer Science" in education
        assert "State University" in education
        assert "Sep 2016 - May 2020" in education

    def test_skills_render_one_line_per_category(self, full_resume: dict[str, Any]) -> None:
        skills = build_skills(full_resume)

        assert skills is not None
        assert "Languages:</span> <span class=\"skill-items\">Python, Go</span>" in skills
        assert "Tools:</span> <span class=\"skill-items\">Docker</span>" in skills
        assert skills.index("Languages") < skills.index("Tools")

    def test_skills_with_only_empty_groups_are_omitted(self) -> None:
        assert build_skills({"skills": [{"category": "", "items": []}]}) is None

    def test_projects_and_certifications(self, full_resume: dict[str, Any]) -> None:
        projects = build_projects(full_resume)
        certifications = build_certifications(full_resume)

        assert projects is not None
        assert "Maintainer" in projects
        assert "https://example.com/rb" in projects
        assert certifications is not None
        assert "Jan 2023" in certifications
        assert "Expires Jan 2026" in certifications

    def test_summary_comes_from_personal_info(self, full_resume: dict[str, Any]) -> None:
        summary = build_summary(full_resume)

        assert summary is not None
        assert "Professional Summary" in summary
        assert "Engineer who ships." in summary
        assert build_summary({"personal_info": {"summary": "   "}}) is None

    def test_user_text_is_escaped(self) -> None:
        markup = render(
            {
                "personal_info": {"first_name": "<script>alert(1)</script>"},
                "experience": [{"position": "R&D Lead", "company": "A<B>"}],
            },
            None,
        )

        assert "<script>" not in markup
        assert "&lt;script&gt;" in markup
        assert "R&amp;D Lead" in markup
        assert "A&lt;B&gt;" in markup

    def test_every_section_escapes_user_text(self) -> None:
        payload = "<img src=x>"
        markup = render(
            {
                "personal_info": {"first_name": payload, "summary": payload, "github": payload},
                "experience": [{"position": payload, "achievements": [payload]}],
                "education": [{"degree": payload, "field_of_study": payload}],
                "skills": [{"category": payload, "items": [payload]}],
                "projects": [{"name": payload, "link": payload}],
                "certifications": [{"name": payload, "description": payload}],
            },
            None,
        )

        assert payload not in markup
        assert "&lt;img src=x&gt;" in markup


class TestDocument:
    def test_sections_follow_fixed_order(self, full_resume: dict[str, Any]) -> None:
        template = dict(
            MODERN_TEMPLATE,
            sections=[
                {"name": "certifications", "order": 1},
                {"name": "skills", "order": 2},
            ],
        )
        body = _body(render(full_resume, template))

        keys = ("summary", "experience", "education", "skills", "projects", "certifications")
        positions = [body.index(f"section-{key}") for key in keys]
        assert positions == sorted(positions)
        assert body.index('<header class="header">') < positions[0]

    def test_render_is_deterministic(self, full_resume: dict[str, Any]) -> None:
        assert render(full_resume, MODERN_TEMPLATE) == render(full_resume, MODERN_TEMPLATE)

    def test_document_title_and_layout(self, full_resume: dict[str, Any]) -> None:
        markup = render(full_resume, dict(MODERN_TEMPLATE, layout="two-column"))

        assert markup.startswith("<!DOCTYPE html>")
        assert "<title>Jane Doe</title>" in markup
        assert '<div class="container layout-two-column">' in markup
        assert "<title>Resume</title>" in render({}, None)

    def test_swapping_palette_changes_only_styles(self, full_resume: dict[str, Any]) -> None:
        other = dict(
            MODERN_TEMPLATE,
            colors={"primary": "#123456", "secondary": "#654321", "accent": "#ABCDEF"},
        )
        first = render(full_resume, MODERN_TEMPLATE)
        second = render(full_resume, other)

        assert _body(first) == _body(second)
        style = re.search(r"<style>(.*)</style>", second, re.DOTALL)
        assert style is not None
        assert "#3B82F6" not in style.group(1)
        assert "#123456" in style.group(1)
        assert "#654321" in style.group(1)
        assert "#ABCDEF" in style.group(1)

    def test_engineer_scenario(self) -> None:
        resume = {
            "personal_info": {"first_name": "Sam", "last_name": "Lee"},
            "experience": [
                {
                    "position": "Engineer",
                    "company": "Acme",
                    "start_date": "2022-03-01",
                    "current": True,
                }
            ],
        }
        body = _body(render(resume, MODERN_TEMPLATE))

        assert "Professional Experience" in body
        assert "Mar 2022 - Present" in body
        assert "Education" not in body
        assert "Skills" not in body
