"""Tests for the resume text extraction pipeline"""
from unittest.mock import patch

import pytest

from resumelab.app.core.config import MIME_DOCX, MIME_PDF, MIME_TEXT
from resumelab.app.core.exceptions import TextExtractionError
from resumelab.app.services.text_extraction import (
    extract_docx_text,
    extract_pdf_text,
    extract_resume_text,
    is_pdf_text_based,
)

EXTRACTOR = "resumelab.app.services.text_extraction.extractor"
LONG_TEXT = "Senior Backend Engineer with ten years of Python, FastAPI and AWS experience."


def test_native_extraction_of_real_pdf(text_pdf):
    """A text-layer PDF is handled by the first strategy."""
    result = extract_pdf_text(text_pdf)
    assert result.method == "native"
    assert result.attempts == ["native"]
    assert "Jane Doe" in result.text
    assert "Acme Corp" in result.text


def test_falls_back_to_alternate_when_native_is_too_short(tmp_path):
    with patch(f"{EXTRACTOR}.extract_text_native", return_value="tiny") as native, \
         patch(f"{EXTRACTOR}.extract_text_alternate", return_value=LONG_TEXT) as alternate, \
         patch(f"{EXTRACTOR}.extract_text_ocr") as ocr:
        result = extract_pdf_text(tmp_path / "scan.pdf")
    assert result.method == "alternate"
    assert result.text == LONG_TEXT
    assert result.attempts == ["native", "alternate"]
    native.assert_called_once()
    alternate.assert_called_once()
    ocr.assert_not_called()


def test_failing_strategies_fall_through_to_ocr(tmp_path):
    """An exception in one strategy is treated as no text, not as a request failure."""
    with patch(f"{EXTRACTOR}.extract_text_native", side_effect=RuntimeError("broken xref")), \
         patch(f"{EXTRACTOR}.extract_text_alternate", side_effect=ValueError("bad stream")), \
         patch(f"{EXTRACTOR}.extract_text_ocr", return_value=LONG_TEXT):
        result = extract_pdf_text(tmp_path / "scan.pdf")
    assert result.method == "ocr"
    assert result.attempts == ["native", "alternate", "ocr"]


def test_no_strategy_succeeds(tmp_path):
    with patch(f"{EXTRACTOR}.extract_text_native", return_value=""), \
         patch(f"{EXTRACTOR}.extract_text_alternate", return_value="   "), \
         patch(f"{EXTRACTOR}.extract_text_ocr", return_value="x" * 50):
        with pytest.raises(TextExtractionError, match="could not be processed by any method"):
            extract_pdf_text(tmp_path / "scan.pdf")


def test_threshold_counts_stripped_text(tmp_path):
    """Whitespace padding does not make short text usable; 51 real characters do."""
    padded = "   " + "y" * 50 + "   "
    with patch(f"{EXTRACTOR}.extract_text_native", return_value=padded), \
         patch(f"{EXTRACTOR}.extract_text_alternate", return_value="z" * 51), \
         patch(f"{EXTRACTOR}.extract_text_ocr") as ocr:
        result = extract_pdf_text(tmp_path / "scan.pdf")
    assert result.method == "alternate"
    ocr.assert_not_called()


def test_is_pdf_text_based(text_pdf, tmp_path):
    assert is_pdf_text_based(text_pdf) is True
    not_a_pdf = tmp_path / "fake.pdf"
    not_a_pdf.write_bytes(b"definitely not a pdf")
    assert is_pdf_text_based(not_a_pdf) is False


def test_docx_extraction_reads_paragraphs_and_tables(resume_docx):
    text = extract_docx_text(resume_docx)
    assert text.splitlines()[0] == "Jane Doe"
    assert "Skills | Python, FastAPI, PostgreSQL" in text


def test_corrupt_docx_raises(tmp_path):
    path = tmp_path / "broken.docx"
    path.write_bytes(b"PK not really a zip")
    with pytest.raises(TextExtractionError, match="DOCX processing failed"):
        extract_docx_text(path)


def test_dispatch_by_content_type(tmp_path, resume_text, resume_docx, text_pdf):
    txt = tmp_path / "resume.txt"
    txt.write_text(resume_text, encoding="utf-8")

    assert extract_resume_text(txt, MIME_TEXT).text == resume_text
    assert extract_resume_text(resume_docx, MIME_DOCX).method == "docx"
    assert extract_resume_text(text_pdf, MIME_PDF).method == "native"


def test_unsupported_content_type(tmp_path):
    with pytest.raises(TextExtractionError, match="Unsupported file type"):
        extract_resume_text(tmp_path / "image.png", "image/png")
