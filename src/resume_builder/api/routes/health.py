"""Health check route."""

from __future__ import annotations

from datetime import UTC, datetime

from fastapi import APIRouter

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check() -> dict[str, str]:
    """Return the API status and the server time."""
    return {"status": "OK", "timestamp": datetime.now(UTC).isoformat()}
