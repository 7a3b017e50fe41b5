"""Resume routes for the API.

All routes are scoped to the authenticated caller; another user's resume is
reported exactly like a missing one.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, HTTPException, status
from fastapi import Path as PathParam

from resume_builder.api.dependencies import CurrentUser
from resume_builder.api.schemas.resumes import (
    ResumeCreateRequest,
    ResumeResponse,
    ResumeUpdateRequest,
)
from resume_builder.services.resume import (
    create_resume,
    delete_resume,
    get_resume,
    get_resumes,
    update_resume,
)

router = APIRouter(prefix="/resumes", tags=["resumes"])

_NOT_FOUND = "Resume not found"


@router.get("", response_model=list[ResumeResponse])
def list_resumes(current_user: CurrentUser) -> list[ResumeResponse]:
    """List the caller's resumes, most recently updated first."""
    return [ResumeResponse(**r) for r in get_resumes(current_user.id)]


@router.get("/{resume_id}", response_model=ResumeResponse)
def get_resume_endpoint(
    resume_id: Annotated[int, PathParam(description="Resume ID")],
    current_user: CurrentUser,
) -> ResumeResponse:
    result = get_resume(current_user.id, resume_id)
    if not result:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=_NOT_FOUND)
    return ResumeResponse(**result)


@router.post("", response_model=ResumeResponse, status_code=status.HTTP_201_CREATED)
def create_resume_endpoint(
    data: ResumeCreateRequest,
    current_user: CurrentUser,
) -> ResumeResponse:
    """Create a resume for the caller."""
    result = create_resume(current_user.id, data.model_dump())
    if not result:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Failed to create resume. Check that the template_id is valid.",
        )
    return ResumeResponse(**result)


@router.put("/{resume_id}", response_model=ResumeResponse)
def update_resume_endpoint(
    resume_id: Annotated[int, PathParam(description="Resume ID")],
    data: ResumeUpdateRequest,
    current_user: CurrentUser,
) -> ResumeResponse:
    """Update the provided fields of a resume."""
    if not get_resume(current_user.id, resume_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=_NOT_FOUND)

    result = update_resume(current_user.id, resume_id, data.model_dump(exclude_unset=True))
    if not result:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Failed to update resume. Check that the template_id is valid.",
        )
    return ResumeResponse(**result)


@router.delete("/{resume_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_resume_endpoint(
    resume_id: Annotated[int, PathParam(description="Resume ID")],
    current_user: CurrentUser,
) -> None:
    if not delete_resume(current_user.id, resume_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=_NOT_FOUND)
