"""FastAPI application entry point for the Resume Builder API."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from resume_builder.api.routes import ai, auth, export, health, resumes, templates
from resume_builder.config import Settings, load_settings

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

logger = logging.getLogger(__name__)


def configure_app_state(app: FastAPI, settings: Settings) -> None:
    """Build the settings-dependent collaborators once and attach them to *app*."""
    from resume_builder.services.llm_providers import build_provider
    from resume_builder.services.llm_service import LLMService
    from resume_builder.services.pdf_export import PdfMaterializer

    app.state.settings = settings
    app.state.llm_service = LLMService(build_provider(settings))
    app.state.pdf_materializer = PdfMaterializer(timeout_ms=settings.pdf_timeout_ms)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Initialize resources on startup and clean up on shutdown."""
    from resume_builder.data.db import init_db
    from resume_builder.services.template import seed_templates

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    init_db()
    if settings.seed_templates:
        seed_templates()
    configure_app_state(app, settings)
    logger.info("AI provider: %s", app.state.llm_service.provider_name)
    yield


settings = load_settings()

app = FastAPI(
    title="Resume Builder API",
    description="API for building resumes from structured data and exporting them as PDF",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Serialise every HTTP error as ``{"message": ...}``."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


app.include_router(health.router)
app.include_router(auth.router, prefix="/api")
app.include_router(resumes.router, prefix="/api")
app.include_router(templates.router, prefix="/api")
app.include_router(ai.router, prefix="/api")
app.include_router(export.router, prefix="/api")


def main() -> None:
    """Start the development server."""
    import uvicorn

    uvicorn.run(
        "resume_builder.api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )


if __name__ == "__main__":
    main()
