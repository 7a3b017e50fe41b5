"""AI writing-assistant routes.

Provider unavailability never fails these routes: the response stays 200 and
carries an explanatory ``message`` instead.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from resume_builder.api.dependencies import CurrentUser, get_llm_service
from resume_builder.api.schemas.ai import (
    AchievementsRequest,
    AchievementsResponse,
    AIStatusResponse,
    ProviderAvailability,
    SummaryRequest,
    SummaryResponse,
)
from resume_builder.config import Settings
from resume_builder.services.ai_writer import enhance_achievements, generate_summary
from resume_builder.services.llm_service import LLMService

router = APIRouter(prefix="/ai", tags=["ai"])

LLMServiceDep = Annotated[LLMService, Depends(get_llm_service)]


@router.post("/summary", response_model=SummaryResponse)
def generate_summary_endpoint(
    data: SummaryRequest,
    current_user: CurrentUser,
    llm_service: LLMServiceDep,
) -> SummaryResponse:
    """Draft a professional summary from the resume content."""
    payload = data.model_dump()
    result = generate_summary(
        llm_service, payload["personal_info"], payload["experience"], payload["skills"]
    )
    return SummaryResponse(summary=result.text, message=result.message)


@router.post("/achievements", response_model=AchievementsResponse)
def enhance_achievements_endpoint(
    data: AchievementsRequest,
    current_user: CurrentUser,
    llm_service: LLMServiceDep,
) -> AchievementsResponse:
    """Rewrite achievements for impact; echoes the input when AI is unavailable."""
    achievements, message = enhance_achievements(llm_service, data.achievements, data.job_title)
    return AchievementsResponse(achievements=achievements, message=message)


@router.get("/status", response_model=AIStatusResponse)
def ai_status(
    request: Request,
    current_user: CurrentUser,
    llm_service: LLMServiceDep,
) -> AIStatusResponse:
    """Report which providers have credentials and which one is active."""
    settings = getattr(request.app.state, "settings", None) or Settings()
    return AIStatusResponse(
        configured=llm_service.is_configured,
        providers=ProviderAvailability(
            gemini=bool(settings.gemini_api_key),
            openai=bool(settings.openai_api_key),
        ),
        current=llm_service.provider_name,
    )
