"""
Dependency injection utilities
"""
import uuid
from pathlib import Path
from typing import Iterator

from fastapi import File, HTTPException, UploadFile, status
from pydantic import BaseModel

from resumelab.app.core.config import ALLOWED_UPLOAD_TYPES, MIME_DOCX, MIME_PDF, MIME_TEXT, settings
from resumelab.app.core.logging_config import get_logger
from resumelab.app.services.text_extraction import is_pdf_text_based

logger = get_logger("core.dependencies")

_SUFFIXES = {
    MIME_PDF: ".pdf",
    MIME_DOCX: ".docx",
    MIME_TEXT: ".txt",
}


class StoredUpload(BaseModel):
    """An uploaded resume written to the upload directory for the duration of a request."""
    path: Path
    filename: str
    content_type: str
    size: int


def get_resume_upload(resume: UploadFile | None = File(None)) -> Iterator[StoredUpload]:
    """Validate the `resume` form file, store it, and delete it once the request is done."""
    if resume is None or not resume.filename:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No file uploaded")

    content_type = (resume.content_type or "").split(";")[0].strip().lower()
    if content_type not in ALLOWED_UPLOAD_TYPES:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid file type. Only PDF, DOCX, and TXT files are allowed.",
        )

    contents = resume.file.read(settings.max_upload_bytes + 1)
    if len(contents) > settings.max_upload_bytes:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"File too large. Maximum size is {settings.max_upload_bytes // (1024 * 1024)}MB.",
        )

    upload_path = Path(settings.upload_dir)
    upload_path.mkdir(parents=True, exist_ok=True)
    file_path = upload_path / f"{uuid.uuid4()}{_SUFFIXES[content_type]}"
    try:
        file_path.write_bytes(contents)
    except OSError as e:
        logger.exception("Failed to save upload %s", resume.filename)
        raise HTTPException(status_code=500, detail=f"Failed to save file: {e}")

    if content_type == MIME_PDF and not is_pdf_text_based(file_path):
        logger.warning("Image-based PDF detected (%s), will try OCR fallback", resume.filename)

    try:
        yield StoredUpload(
            path=file_path,
            filename=resume.filename,
            content_type=content_type,
            size=len(contents),
        )
    finally:
        try:
            file_path.unlink(missing_ok=True)
        except OSError as e:
            logger.error("File cleanup error %s: %s", file_path, e)
