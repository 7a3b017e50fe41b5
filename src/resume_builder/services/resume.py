"""Resume service: owner-scoped CRUD plus export data loading.

Every lookup filters on both the resume id and the owning user id, so a
resume belonging to someone else is indistinguishable from a missing one.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, TypedDict

from sqlalchemy.orm import Session

from resume_builder.data.db import get_session
from resume_builder.data.models import Resume, Template
from resume_builder.rendering.contracts import ResumeRecord, TemplateConfig
from resume_builder.services.template import template_config

logger = logging.getLogger(__name__)

__all__ = [
    "ExportBundle",
    "ResumeData",
    "create_resume",
    "delete_resume",
    "get_resume",
    "get_resumes",
    "load_export_bundle",
    "update_resume",
]

# Fields that can be written on Resume
_RESUME_FIELDS = (
    "title",
    "template_id",
    "personal_info",
    "experience",
    "education",
    "skills",
    "projects",
    "certifications",
)


class ResumeData(TypedDict, total=False):
    """TypedDict for resume payloads coming from the API layer."""

    title: str
    template_id: int | None
    personal_info: dict[str, Any]
    experience: list[dict[str, Any]]
    education: list[dict[str, Any]]
    skills: list[dict[str, Any]]
    projects: list[dict[str, Any]]
    certifications: list[dict[str, Any]]


@dataclass(frozen=True)
class ExportBundle:
    """Everything the export pipeline needs for one resume."""

    title: str
    record: ResumeRecord
    template: TemplateConfig


def _resume_to_dict(resume: Resume) -> dict:
    """Convert a Resume model to a dictionary."""
    return {
        "id": resume.id,
        "user_id": resume.user_id,
        "template_id": resume.template_id,
        "title": resume.title,
        "personal_info": resume.personal_info or {},
        "experience": resume.experience or [],
        "education": resume.education or [],
        "skills": resume.skills or [],
        "projects": resume.projects or [],
        "certifications": resume.certifications or [],
        "created_at": resume.created_at,
        "updated_at": resume.updated_at,
    }


def _to_record(resume: Resume) -> ResumeRecord:
    return {
        "personal_info": resume.personal_info or {},
        "experience": resume.experience or [],
        "education": resume.education or [],
        "skills": resume.skills or [],
        "projects": resume.projects or [],
        "certifications": resume.certifications or [],
    }


def _get_owned_resume(session: Session, user_id: int, resume_id: int) -> Resume | None:
    """Get a resume by ID, ensuring it belongs to the user."""
    return (
        session.query(Resume).filter(Resume.id == resume_id, Resume.user_id == user_id).first()
    )


def _template_exists(session: Session, template_id: int | None) -> bool:
    return template_id is None or session.get(Template, template_id) is not None


def _apply_resume_updates(resume: Resume, resume_data: ResumeData) -> None:
    for field in _RESUME_FIELDS:
        if field in resume_data:
            setattr(resume, field, resume_data[field])


def get_resumes(user_id: int) -> list[dict]:
    """Get all resumes of a user, most recently updated first."""
    with get_session() as session:
        resumes = (
            session.query(Resume)
            .filter(Resume.user_id == user_id)
            .order_by(Resume.updated_at.desc(), Resume.id.desc())
            .all()
        )
        return [_resume_to_dict(r) for r in resumes]


def get_resume(user_id: int, resume_id: int) -> dict | None:
    """Get one resume, or None if missing or not owned by *user_id*."""
    with get_session() as session:
        resume = _get_owned_resume(session, user_id, resume_id)
        return _resume_to_dict(resume) if resume else None


def create_resume(user_id: int, resume_data: ResumeData) -> dict | None:
    """Create a resume.

    Returns:
        Dictionary with the created resume, or None if the title is missing or
        the referenced template does not exist.
    """
    if not resume_data.get("title"):
        return None

    try:
        with get_session() as session:
            if not _template_exists(session, resume_data.get("template_id")):
                logger.warning("Unknown template %s for new resume", resume_data.get("template_id"))
                return None

            resume = Resume(user_id=user_id, title=resume_data["title"])
            _apply_resume_updates(resume, resume_data)
            session.add(resume)
            session.flush()
            return _resume_to_dict(resume)

    except Exception:
        logger.exception("Failed to create resume for user %d", user_id)
        return None


def update_resume(user_id: int, resume_id: int, resume_data: ResumeData) -> dict | None:
    """Update the provided fields of an owned resume.

    Returns:
        The updated resume, or None if it is missing, not owned, or references
        an unknown template.
    """
    try:
        with get_session() as session:
            resume = _get_owned_resume(session, user_id, resume_id)
            if resume is None:
                return None
            if "template_id" in resume_data and not _template_exists(
                session, resume_data["template_id"]
            ):
                logger.warning(
                    "Unknown template %s for resume %d", resume_data["template_id"], resume_id
                )
                return None

            _apply_resume_updates(resume, resume_data)
            session.flush()
            return _resume_to_dict(resume)

    except Exception:
        logger.exception("Failed to update resume %d for user %d", resume_id, user_id)
        return None


def delete_resume(user_id: int, resume_id: int) -> bool:
    """Delete an owned resume. Returns False if nothing was deleted."""
    try:
        with get_session() as session:
            resume = _get_owned_resume(session, user_id, resume_id)
            if resume is None:
                return False
            session.delete(resume)
            return True

    except Exception:
        logger.exception("Failed to delete resume %d for user %d", resume_id, user_id)
        return False


def load_export_bundle(user_id: int, resume_id: int) -> ExportBundle | None:
    """Load the record and template config for exporting a resume.

    Returns None when the resume is missing, not owned by *user_id*, or points
    at a template that no longer exists. A resume without a template renders
    with the default style. Database errors propagate.
    """
    with get_session() as session:
        resume = _get_owned_resume(session, user_id, resume_id)
        if resume is None:
            return None

        config: TemplateConfig = {}
        if resume.template_id is not None:
            template = session.get(Template, resume.template_id)
            if template is None:
                return None
            config = template_config(template)

        return ExportBundle(title=resume.title, record=_to_record(resume), template=config)
