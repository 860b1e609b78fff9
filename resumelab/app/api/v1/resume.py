"""
Resume endpoints - upload for AI feedback, generate a resume from career details
"""
from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel

from resumelab.app.core.dependencies import StoredUpload, get_resume_upload
from resumelab.app.core.exceptions import (
    LLMNotConfiguredError,
    LLMResponseError,
    LLMServiceError,
    LLMTimeoutError,
    TextExtractionError,
)
from resumelab.app.core.logging_config import get_logger
from resumelab.app.services.resume_service import analyze_resume_file, generate_resume

logger = get_logger("api.resume")
router = APIRouter()

EXTRACTION_FAILED = (
    "Could not extract sufficient text from the resume. "
    "Please ensure the file is readable and try again."
)
ANALYSIS_TIMEOUT = (
    "Analysis timeout. Please try again with a shorter resume or check your internet connection."
)
ANALYSIS_UNPARSEABLE = "Failed to process analysis results. Please try again."
AI_NOT_CONFIGURED = "AI service is not configured. Please try again later."


class GenerateResumeIn(BaseModel):
    prompt: str | None = None


@router.post("/feedback")
def resume_feedback(upload: StoredUpload = Depends(get_resume_upload)):
    """
    Analyze an uploaded resume (multipart field `resume`: PDF, DOCX or TXT).

    Returns:
        - **success**: always true on 200
        - **data**: overallScore, categories, strengths, suggestions, jobTitleMatch, keywordAnalysis, atsScore
        - **metadata**: processedLength, analyzedDate, model
    """
    try:
        result = analyze_resume_file(upload.path, upload.content_type)
    except TextExtractionError as e:
        logger.warning("Resume extraction failed file=%s: %s", upload.filename, e)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=EXTRACTION_FAILED)
    except LLMNotConfiguredError:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=AI_NOT_CONFIGURED)
    except LLMTimeoutError:
        raise HTTPException(status_code=status.HTTP_504_GATEWAY_TIMEOUT, detail=ANALYSIS_TIMEOUT)
    except LLMResponseError:
        raise HTTPException(status_code=500, detail=ANALYSIS_UNPARSEABLE)
    except LLMServiceError as e:
        logger.exception("Resume feedback failed")
        raise HTTPException(status_code=500, detail=f"Failed to analyze resume: {e}")
    return result.model_dump()


@router.post("/generate")
def resume_generate(payload: GenerateResumeIn | None = None):
    """
    Write a complete resume from free-text career details.
    Returns the resume object (name, contactInfo, summary, experienceBullets, ... resumeMarkdown).
    """
    prompt = ((payload.prompt if payload else None) or "").strip()
    if not prompt:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Please provide your career details.")
    try:
        resume = generate_resume(prompt)
    except LLMNotConfiguredError:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=AI_NOT_CONFIGURED)
    except LLMTimeoutError as e:
        raise HTTPException(status_code=status.HTTP_504_GATEWAY_TIMEOUT, detail=str(e))
    except LLMServiceError as e:
        logger.exception("Resume generation failed")
        raise HTTPException(status_code=500, detail=str(e))
    return resume.model_dump()
