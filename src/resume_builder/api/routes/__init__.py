"""Route handlers for the API."""

from resume_builder.api.routes import ai, auth, export, health, resumes, templates

__all__ = [
    "ai",
    "auth",
    "export",
    "health",
    "resumes",
    "templates",
]
