"""
Resume text extraction - PDF fallback chain plus DOCX/TXT readers.
"""
from .extractor import (
    ExtractionResult,
    extract_docx_text,
    extract_pdf_text,
    extract_plain_text,
    extract_resume_text,
)
from .pdf_utils import is_pdf_text_based

__all__ = [
    "ExtractionResult",
    "extract_docx_text",
    "extract_pdf_text",
    "extract_plain_text",
    "extract_resume_text",
    "is_pdf_text_based",
]
