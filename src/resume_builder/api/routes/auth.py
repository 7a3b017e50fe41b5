"""Registration and login routes."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from resume_builder.api.schemas.auth import CredentialsRequest, TokenResponse
from resume_builder.services.auth import authenticate_user, create_user

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
def register(data: CredentialsRequest) -> TokenResponse:
    """Create an account and return its bearer token."""
    token, error = create_user(data.username, data.password)
    if token is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=error)
    return TokenResponse(username=data.username.strip(), token=token)


@router.post("/login", response_model=TokenResponse)
def login(data: CredentialsRequest) -> TokenResponse:
    """Exchange credentials for a fresh bearer token."""
    token, error = authenticate_user(data.username, data.password)
    if token is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=error,
            headers={"WWW-Authenticate": "Bearer"},
        )
    return TokenResponse(username=data.username.strip(), token=token)
