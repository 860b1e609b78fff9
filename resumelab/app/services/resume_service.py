"""
Resume service - feedback analysis and resume generation on top of the LLM client.
Used by POST /api/resume/feedback and POST /api/resume/generate.
"""
from datetime import datetime, timezone
from pathlib import Path

from resumelab.app.core.config import RESUME_MIN_CHARS, settings
from resumelab.app.core.exceptions import TextExtractionError
from resumelab.app.core.logging_config import get_logger
from resumelab.app.schemas.feedback import FeedbackMetadata, FeedbackResponse
from resumelab.app.schemas.resume import GeneratedResume
from resumelab.app.services.llm_client import chat_json
from resumelab.app.services.prompts import build_feedback_messages, build_generation_messages
from resumelab.app.services.response_sanitizer import sanitize_feedback, sanitize_generated_resume
from resumelab.app.services.text_extraction import extract_resume_text

logger = get_logger("services.resume")


def analyze_resume_text(resume_text: str) -> FeedbackResponse:
    """Ask the LLM for feedback on resume text and sanitize the reply."""
    if not resume_text or len(resume_text.strip()) < RESUME_MIN_CHARS:
        raise TextExtractionError("Resume text is too short or could not be extracted properly")

    messages = build_feedback_messages(resume_text, settings.resume_prompt_char_limit)
    raw = chat_json(messages)
    feedback = sanitize_feedback(raw)
    logger.info(
        "Resume analyzed chars=%d overall=%s ats=%s",
        len(resume_text), feedback.overallScore, feedback.atsScore,
    )
    return FeedbackResponse(
        data=feedback,
        metadata=FeedbackMetadata(
            processedLength=len(resume_text),
            analyzedDate=datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            model=settings.llm_model,
        ),
    )


def analyze_resume_file(file_path: str | Path, content_type: str) -> FeedbackResponse:
    """Extract text from an uploaded resume, then analyze it."""
    extraction = extract_resume_text(file_path, content_type)
    logger.info("Resume text extracted method=%s attempts=%s", extraction.method, extraction.attempts)
    return analyze_resume_text(extraction.text)


def generate_resume(career_details: str) -> GeneratedResume:
    """Write a full resume from free-text career details."""
    raw = chat_json(build_generation_messages(career_details.strip()))
    resume = sanitize_generated_resume(raw)
    logger.info(
        "Resume generated name=%r experiences=%d skills=%d",
        resume.name, len(resume.experienceBullets), len(resume.skills),
    )
    return resume
