"""HTML-to-PDF materialization with a headless Chromium instance.

Each call launches its own browser through Playwright, loads the markup,
prints it to A4 with half-inch margins and tears the browser down again,
whatever happens in between. Browsers are never pooled or shared.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from playwright.sync_api import Browser
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import sync_playwright

from resume_builder.config import DEFAULT_PDF_TIMEOUT_MS

logger = logging.getLogger(__name__)

__all__ = ["PAGE_FORMAT", "PAGE_MARGIN", "PdfExportError", "PdfMaterializer"]

PAGE_FORMAT = "A4"
PAGE_MARGIN = {"top": "0.5in", "bottom": "0.5in", "left": "0.5in", "right": "0.5in"}

_LAUNCH_ARGS = ["--no-sandbox", "--disable-setuid-sandbox"]


class PdfExportError(RuntimeError):
    """Raised when markup cannot be turned into a PDF."""


@contextmanager
def _launched_browser() -> Iterator[Browser]:
    """Yield a fresh headless browser, closing it on every exit path."""
    with sync_playwright() as playwright:
        browser = playwright.chromium.launch(headless=True, args=_LAUNCH_ARGS)
        try:
            yield browser
        finally:
            browser.close()


class PdfMaterializer:
    """Convert rendered resume markup into PDF bytes."""

    def __init__(self, timeout_ms: int = DEFAULT_PDF_TIMEOUT_MS) -> None:
        self.timeout_ms = timeout_ms

    def materialize(self, markup: str) -> bytes:
        """Return the PDF rendering of *markup*.

        Raises:
            PdfExportError: If the browser cannot be launched, the content does
                not settle within ``timeout_ms``, or printing fails. No partial
                output is ever returned.
        """
        try:
            with _launched_browser() as browser:
                page = browser.new_page()
                page.set_content(markup, wait_until="networkidle", timeout=self.timeout_ms)
                pdf_bytes = page.pdf(
                    format=PAGE_FORMAT,
                    print_background=True,
                    margin=PAGE_MARGIN,
                )
        except (PlaywrightError, OSError) as exc:
            logger.exception("PDF materialization failed")
            raise PdfExportError(f"PDF export failed: {exc}") from exc

        if not pdf_bytes:
            raise PdfExportError("PDF export failed: engine returned an empty document")
        return pdf_bytes
