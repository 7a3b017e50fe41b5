"""Pydantic schemas for resume API endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class PersonalInfo(BaseModel):
    """Name, contact details and summary. Every field is optional."""

    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    phone: str | None = None
    location: str | None = None
    linkedin: str | None = None
    github: str | None = None
    website: str | None = None
    summary: str | None = None


class ExperienceItem(BaseModel):
    position: str | None = None
    company: str | None = None
    location: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    current: bool = False
    description: str | None = None
    achievements: list[str] = Field(default_factory=list)


class EducationItem(BaseModel):
    degree: str | None = None
    field_of_study: str | None = None
    school: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    current: bool = False
    description: str | None = None


class SkillGroup(BaseModel):
    category: str | None = None
    items: list[str] = Field(default_factory=list)


class ProjectItem(BaseModel):
    name: str | None = None
    role: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    current: bool = False
    link: str | None = None
    description: str | None = None


class CertificationItem(BaseModel):
    name: str | None = None
    issuer: str | None = None
    date: str | None = None
    expiration: str | None = None
    description: str | None = None


class ResumeContent(BaseModel):
    """Structured resume sections shared by requests and responses."""

    personal_info: PersonalInfo = Field(default_factory=PersonalInfo)
    experience: list[ExperienceItem] = Field(default_factory=list)
    education: list[EducationItem] = Field(default_factory=list)
    skills: list[SkillGroup] = Field(default_factory=list)
    projects: list[ProjectItem] = Field(default_factory=list)
    certifications: list[CertificationItem] = Field(default_factory=list)


class ResumeCreateRequest(ResumeContent):
    """Request schema for creating a resume."""

    title: str = Field(..., min_length=1, max_length=255, description="Resume title")
    template_id: int | None = Field(None, description="Template used for rendering")


class ResumeUpdateRequest(BaseModel):
    """Request schema for updating a resume.

    All fields are optional; only provided fields are updated.
    """

    title: str | None = Field(None, min_length=1, max_length=255)
    template_id: int | None = None
    personal_info: PersonalInfo | None = None
    experience: list[ExperienceItem] | None = None
    education: list[EducationItem] | None = None
    skills: list[SkillGroup] | None = None
    projects: list[ProjectItem] | None = None
    certifications: list[CertificationItem] | None = None


class ResumeResponse(ResumeContent):
    """Response schema for a stored resume."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    template_id: int | None = None
    created_at: datetime
    updated_at: datetime
