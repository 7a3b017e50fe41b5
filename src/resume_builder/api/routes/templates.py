"""Template routes for the API."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, HTTPException, Query, status
from fastapi import Path as PathParam

from resume_builder.api.dependencies import CurrentUser
from resume_builder.api.schemas.common import MessageResponse
from resume_builder.api.schemas.templates import TemplateCreateRequest, TemplateResponse
from resume_builder.services.template import (
    create_template,
    get_template,
    increment_usage,
    list_templates,
)

router = APIRouter(prefix="/templates", tags=["templates"])

_NOT_FOUND = "Template not found"


@router.get("", response_model=list[TemplateResponse])
def list_templates_endpoint(
    category: Annotated[str | None, Query(description="Filter by category")] = None,
    premium: Annotated[bool | None, Query(description="Filter by premium flag")] = None,
) -> list[TemplateResponse]:
    """List active templates, most used first."""
    return [TemplateResponse(**t) for t in list_templates(category=category, premium=premium)]


@router.get("/{template_id}", response_model=TemplateResponse)
def get_template_endpoint(
    template_id: Annotated[int, PathParam(description="Template ID")],
) -> TemplateResponse:
    result = get_template(template_id)
    if not result:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=_NOT_FOUND)
    return TemplateResponse(**result)


@router.post("", response_model=TemplateResponse, status_code=status.HTTP_201_CREATED)
def create_template_endpoint(
    data: TemplateCreateRequest,
    current_user: CurrentUser,
) -> TemplateResponse:
    """Create a template. Requires authentication."""
    payload = data.model_dump(exclude_none=True)
    return TemplateResponse(**create_template(payload))


@router.patch("/{template_id}/usage", response_model=MessageResponse)
def increment_usage_endpoint(
    template_id: Annotated[int, PathParam(description="Template ID")],
) -> MessageResponse:
    """Record that a template was picked."""
    if not increment_usage(template_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=_NOT_FOUND)
    return MessageResponse(message="Usage updated successfully")
