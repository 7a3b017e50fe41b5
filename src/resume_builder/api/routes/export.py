"""PDF export route: fetch -> render -> materialize -> stream."""

from __future__ import annotations

import logging
import re
from typing import Annotated
from urllib.parse import quote

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi import Path as PathParam
from fastapi.responses import Response

from resume_builder.api.dependencies import CurrentUser, get_pdf_materializer
from resume_builder.api.schemas.common import MessageResponse
from resume_builder.rendering import render
from resume_builder.services.pdf_export import PdfMaterializer
from resume_builder.services.resume import load_export_bundle

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/export", tags=["export"])

_EXPORT_FAILED = "Failed to export PDF"
_UNSAFE_FILENAME = re.compile(r'[\x00-\x1f\x7f"\\/]+')


def content_disposition(title: str) -> str:
    """Return an ``attachment`` header value naming the file after *title*.

    Non-ASCII titles additionally get an RFC 5987 ``filename*`` parameter.
    """
    stem = _UNSAFE_FILENAME.sub(" ", title).strip() or "resume"
    ascii_stem = stem.encode("ascii", "ignore").decode("ascii").strip() or "resume"
    value = f'attachment; filename="{ascii_stem}.pdf"'
    if ascii_stem != stem:
        value += f"; filename*=UTF-8''{quote(stem + '.pdf')}"
    return value


@router.post(
    "/pdf/{resume_id}",
    response_class=Response,
    responses={
        200: {"content": {"application/pdf": {}}},
        404: {"model": MessageResponse},
        500: {"model": MessageResponse},
    },
)
def export_pdf(
    resume_id: Annotated[int, PathParam(description="Resume ID")],
    current_user: CurrentUser,
    materializer: Annotated[PdfMaterializer, Depends(get_pdf_materializer)],
) -> Response:
    """Render the caller's resume and return it as a PDF download."""
    try:
        bundle = load_export_bundle(current_user.id, resume_id)
    except Exception:
        logger.exception("Failed to load resume %d for export", resume_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=_EXPORT_FAILED
        ) from None

    if bundle is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Resume not found")

    try:
        markup = render(bundle.record, bundle.template)
        pdf_bytes = materializer.materialize(markup)
    except Exception:
        logger.exception("PDF export failed for resume %d", resume_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=_EXPORT_FAILED
        ) from None

    logger.info("Exported resume %d (%d bytes)", resume_id, len(pdf_bytes))
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": content_disposition(bundle.title)},
    )
