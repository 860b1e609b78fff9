"""
PDF utilities for resume extraction - one function per extraction strategy.
"""
from pathlib import Path

import pdfplumber
import pytesseract
from pdf2image import convert_from_path
from pypdf import PdfReader

from resumelab.app.core.config import PDF_PROBE_MIN_CHARS, settings


def extract_text_native(file_path: str | Path) -> str:
    """Extract the PDF text layer using pdfplumber."""
    text_parts = []
    with pdfplumber.open(file_path) as pdf:
        for page in pdf.pages:
            page_text = page.extract_text()
            if page_text:
                text_parts.append(page_text)
    return "\n".join(text_parts)


def extract_text_alternate(file_path: str | Path) -> str:
    """Extract text with pypdf. Handles some encodings pdfplumber trips on."""
    reader = PdfReader(str(file_path))
    text_parts = []
    for page in reader.pages:
        page_text = page.extract_text()
        if page_text:
            text_parts.append(page_text)
    return "\n".join(text_parts)


def extract_text_ocr(file_path: str | Path) -> str:
    """Rasterise every page and run Tesseract OCR over it."""
    if settings.tesseract_cmd:
        pytesseract.pytesseract.tesseract_cmd = settings.tesseract_cmd
    images = convert_from_path(str(file_path), dpi=settings.ocr_dpi)
    text_parts = []
    for image in images:
        page_text = pytesseract.image_to_string(image, lang=settings.ocr_language)
        if page_text and page_text.strip():
            text_parts.append(page_text)
    return "\n".join(text_parts)


def is_pdf_text_based(file_path: str | Path) -> bool:
    """True when the first page carries a usable text layer (not a scanned image)."""
    try:
        with pdfplumber.open(file_path) as pdf:
            if not pdf.pages:
                return False
            first_page_text = pdf.pages[0].extract_text() or ""
    except Exception:
        return False
    return len(first_page_text.strip()) > PDF_PROBE_MIN_CHARS
