"""Shared Pydantic schemas for API responses."""

from __future__ import annotations

from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """Body of every error response and of plain acknowledgements."""

    message: str = Field(description="Human-readable outcome")
