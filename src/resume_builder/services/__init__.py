"""Services"""

from resume_builder.services.llm_service import LLMService, TextGeneration
from resume_builder.services.pdf_export import PdfExportError, PdfMaterializer
from resume_builder.services.resume import (
    create_resume,
    delete_resume,
    get_resume,
    get_resumes,
    load_export_bundle,
    update_resume,
)
from resume_builder.services.template import (
    create_template,
    get_template,
    increment_usage,
    list_templates,
    seed_templates,
)

__all__ = [
    "LLMService",
    "PdfExportError",
    "PdfMaterializer",
    "TextGeneration",
    "create_resume",
    "create_template",
    "delete_resume",
    "get_resume",
    "get_resumes",
    "get_template",
    "increment_usage",
    "list_templates",
    "load_export_bundle",
    "seed_templates",
    "update_resume",
]
