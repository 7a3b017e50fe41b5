"""Shared dependencies for API routes."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from resume_builder.services.auth import AuthenticatedUser, resolve_token
from resume_builder.services.llm_service import LLMService
from resume_builder.services.pdf_export import PdfMaterializer

_bearer = HTTPBearer(auto_error=False, description="Token issued by /api/auth/login")


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_bearer)],
) -> AuthenticatedUser:
    """Resolve the caller from the ``Authorization: Bearer`` header.

    Raises:
        HTTPException: If the token is missing or unknown (401).
    """
    user = resolve_token(credentials.credentials) if credentials else None
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing or invalid authentication token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user


def get_llm_service(request: Request) -> LLMService:
    """Return the LLM service built at startup.

    Falls back to a disabled service when the app was started without its
    lifespan (e.g. a bare ``TestClient``).
    """
    service = getattr(request.app.state, "llm_service", None)
    return service if service is not None else LLMService()


def get_pdf_materializer(request: Request) -> PdfMaterializer:
    """Return the configured PDF materializer."""
    materializer = getattr(request.app.state, "pdf_materializer", None)
    return materializer if materializer is not None else PdfMaterializer()


CurrentUser = Annotated[AuthenticatedUser, Depends(get_current_user)]
