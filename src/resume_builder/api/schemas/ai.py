"""Pydantic schemas for AI writing-assistant endpoints."""

from __future__ import annotations

from pydantic import BaseModel, Field

from resume_builder.api.schemas.resumes import ExperienceItem, PersonalInfo, SkillGroup


class SummaryRequest(BaseModel):
    personal_info: PersonalInfo = Field(default_factory=PersonalInfo)
    experience: list[ExperienceItem] = Field(default_factory=list)
    skills: list[SkillGroup] = Field(default_factory=list)


class SummaryResponse(BaseModel):
    """``summary`` is None and ``message`` set when AI is unavailable."""

    success: bool = True
    summary: str | None = None
    message: str | None = None


class AchievementsRequest(BaseModel):
    achievements: list[str] = Field(default_factory=list)
    job_title: str | None = None


class AchievementsResponse(BaseModel):
    success: bool = True
    achievements: list[str] = Field(default_factory=list)
    message: str | None = None


class ProviderAvailability(BaseModel):
    gemini: bool
    openai: bool


class AIStatusResponse(BaseModel):
    configured: bool
    providers: ProviderAvailability
    current: str
