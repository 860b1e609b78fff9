"""
Document download endpoints - analysis report PDF, resume DOCX, resume PDF
"""
from typing import Any

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import Response
from pydantic import BaseModel

from resumelab.app.core.config import MIME_DOCX, REPORT_FILENAME
from resumelab.app.core.exceptions import DocumentRenderError
from resumelab.app.core.logging_config import get_logger
from resumelab.app.services.docx_generator import resume_to_docx_bytes
from resumelab.app.services.pdf_generator import feedback_to_pdf_bytes
from resumelab.app.services.resume_generator import generate_resume_pdf
from resumelab.app.services.response_sanitizer import coerce_resume_document, sanitize_feedback
from resumelab.app.utils.filenames import document_filename

logger = get_logger("api.documents")
router = APIRouter()


class AnalysisPdfIn(BaseModel):
    analysisData: dict[str, Any] | None = None
    resumeData: dict[str, Any] | None = None


class ResumeDocIn(BaseModel):
    resumeData: dict[str, Any] | None = None


class ResumePdfIn(BaseModel):
    html: str | None = None
    fileName: str | None = None
    resumeData: dict[str, Any] | None = None


def _attachment(content: bytes, media_type: str, filename: str, extra_headers: dict | None = None) -> Response:
    headers = {"Content-Disposition": f'attachment; filename="{filename}"'}
    headers.update(extra_headers or {})
    return Response(content=content, media_type=media_type, headers=headers)


@router.post("/generate-analysis-pdf")
def generate_analysis_pdf(payload: AnalysisPdfIn):
    """Download the feedback from POST /api/resume/feedback as a PDF report."""
    if not payload.analysisData:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No analysis data provided")
    feedback = sanitize_feedback(payload.analysisData)
    try:
        pdf_bytes = feedback_to_pdf_bytes(feedback)
    except DocumentRenderError:
        raise HTTPException(status_code=500, detail="Failed to generate PDF")
    return _attachment(pdf_bytes, "application/pdf", REPORT_FILENAME)


@router.post("/generate-doc")
def generate_doc(payload: ResumeDocIn):
    """Download resume data as a Word document."""
    if not payload.resumeData:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No resume data provided")
    resume = coerce_resume_document(payload.resumeData)
    filename = document_filename(resume.name)
    logger.info("Generating DOCX filename=%s", filename)
    try:
        docx_bytes = resume_to_docx_bytes(resume)
    except DocumentRenderError as e:
        raise HTTPException(status_code=500, detail=f"Failed to generate DOC: {e}")
    return _attachment(docx_bytes, MIME_DOCX, f"{filename}.docx")


@router.post("/generate-pdf")
def generate_pdf(payload: ResumePdfIn):
    """
    Download the resume as an A4 PDF.
    Send the rendered resume `html` fragment, or `resumeData` to render it server-side.
    """
    resume = coerce_resume_document(payload.resumeData) if payload.resumeData else None
    html_fragment = payload.html if (payload.html or "").strip() else None
    if html_fragment is None and resume is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No resume content provided")

    filename = document_filename(resume.name if resume else None, payload.fileName)
    logger.info("Generating PDF filename=%s", filename)
    try:
        pdf_bytes = generate_resume_pdf(filename, html_fragment=html_fragment, document=resume)
    except DocumentRenderError:
        logger.exception("Resume PDF generation failed")
        raise HTTPException(status_code=500, detail="Failed to generate PDF")
    return _attachment(
        pdf_bytes,
        "application/pdf",
        f"{filename}.pdf",
        {"Cache-Control": "no-cache", "Pragma": "no-cache"},
    )
