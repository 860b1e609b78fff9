"""
Coerce untrusted LLM/client JSON into the fixed response schemas.

Every field is type-checked, numbers are clamped into range, and anything missing or
invalid falls back to a default so the frontend never has to guard against holes.
"""
import math
import sys
from typing import Any

from resumelab.app.core.config import (
    DEFAULT_ATS_SCORE,
    DEFAULT_CATEGORY_SCORE,
    DEFAULT_JOB_TITLE,
    DEFAULT_OVERALL_SCORE,
    KEYWORD_IMPORTANCE_LEVELS,
)
from resumelab.app.schemas.feedback import FeedbackCategory, KeywordInsight, ResumeFeedback
from resumelab.app.schemas.resume import (
    EducationEntry,
    ExperienceEntry,
    GeneratedResume,
    ProjectEntry,
    ResumeDocument,
)

FALLBACK_CATEGORIES = [
    {
        "name": "General Assessment",
        "score": DEFAULT_CATEGORY_SCORE,
        "feedback": "Comprehensive analysis could not be generated. Please try again.",
    },
]
FALLBACK_STRENGTHS = ["Strong foundational content", "Good structure"]
FALLBACK_SUGGESTIONS = ["Add more quantifiable achievements", "Include relevant keywords for your industry"]
STOCK_STRENGTHS = [
    "Clear section organization",
    "Relevant experience included",
    "Professional presentation",
]
STOCK_SUGGESTIONS = [
    "Use more action verbs (e.g., 'managed', 'developed', 'implemented')",
    "Quantify achievements with numbers and metrics",
    "Include relevant industry keywords",
    "Keep resume to 1-2 pages maximum",
    "Use consistent formatting throughout",
]


def _to_number(value: Any) -> float | None:
    """Loose numeric parse: numbers, numeric strings and booleans. None when invalid."""
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, int):
        try:
            number = float(value)
        except OverflowError:
            # Out of float range; the largest finite float still clamps to the bound
            number = sys.float_info.max if value > 0 else -sys.float_info.max
    elif isinstance(value, float):
        number = value
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def _compact(number: float) -> int | float:
    number = float(number)
    return int(number) if number.is_integer() else number


def _score(value: Any, default: int, low: float, high: float) -> int | float:
    number = _to_number(value)
    if number is None:
        number = float(default)
    return _compact(min(max(number, float(low)), float(high)))


def _text(value: Any, default: str = "") -> str:
    if value is None or isinstance(value, (dict, list)):
        return default
    text = str(value).strip()
    return text or default


def _string_list(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    items = (_text(item) for item in value)
    return [item for item in items if item]


def _objects(value: Any) -> list[dict]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, dict)]


def _category(raw: Any) -> FeedbackCategory:
    data = raw if isinstance(raw, dict) else {}
    return FeedbackCategory(
        name=_text(data.get("name"), "Uncategorized"),
        score=_score(data.get("score"), DEFAULT_CATEGORY_SCORE, 0, 10),
        feedback=_text(data.get("feedback"), "No specific feedback provided"),
    )


def _keyword(raw: dict) -> KeywordInsight:
    count = _to_number(raw.get("count"))
    importance = raw.get("importance")
    return KeywordInsight(
        keyword=_text(raw.get("keyword")),
        count=_compact(max(count if count is not None else 0.0, 0.0)),
        importance=importance if importance in KEYWORD_IMPORTANCE_LEVELS else "medium",
        recommendation=_text(raw.get("recommendation"), "Consider adding this keyword"),
    )


def sanitize_feedback(raw: Any) -> ResumeFeedback:
    """Build a complete ResumeFeedback from whatever the model returned."""
    data = raw if isinstance(raw, dict) else {}

    categories_raw = data.get("categories")
    if isinstance(categories_raw, list):
        categories = [_category(c) for c in categories_raw]
    else:
        categories = [FeedbackCategory(**c) for c in FALLBACK_CATEGORIES]

    strengths_raw = data.get("strengths")
    strengths = _string_list(strengths_raw) if isinstance(strengths_raw, list) else list(FALLBACK_STRENGTHS)
    if not strengths:
        strengths = list(STOCK_STRENGTHS)

    suggestions_raw = data.get("suggestions")
    suggestions = _string_list(suggestions_raw) if isinstance(suggestions_raw, list) else list(FALLBACK_SUGGESTIONS)
    if not suggestions:
        suggestions = list(STOCK_SUGGESTIONS)

    keywords = [_keyword(k) for k in _objects(data.get("keywordAnalysis"))]

    return ResumeFeedback(
        overallScore=_score(data.get("overallScore"), DEFAULT_OVERALL_SCORE, 0, 100),
        categories=categories,
        strengths=strengths,
        suggestions=suggestions,
        jobTitleMatch=_text(data.get("jobTitleMatch"), DEFAULT_JOB_TITLE),
        keywordAnalysis=[k for k in keywords if k.keyword],
        atsScore=_score(data.get("atsScore"), DEFAULT_ATS_SCORE, 0, 100),
    )


def _experience_entries(value: Any) -> list[ExperienceEntry]:
    return [
        ExperienceEntry(
            company=_text(e.get("company")),
            role=_text(e.get("role")),
            startDate=_text(e.get("startDate")),
            endDate=_text(e.get("endDate")),
            bullets=_string_list(e.get("bullets")),
        )
        for e in _objects(value)
    ]


def _education_entries(value: Any) -> list[EducationEntry]:
    return [
        EducationEntry(
            degree=_text(e.get("degree")),
            institution=_text(e.get("institution")),
            year=_text(e.get("year")),
        )
        for e in _objects(value)
    ]


def _project_entries(value: Any) -> list[ProjectEntry]:
    return [
        ProjectEntry(name=_text(p.get("name")), description=_text(p.get("description")))
        for p in _objects(value)
    ]


def sanitize_generated_resume(raw: Any) -> GeneratedResume:
    """Build a complete GeneratedResume from the model's reply."""
    data = raw if isinstance(raw, dict) else {}
    return GeneratedResume(
        name=_text(data.get("name")),
        contactInfo=_text(data.get("contactInfo")),
        summary=_text(data.get("summary")),
        experienceBullets=_experience_entries(data.get("experienceBullets")),
        skills=_string_list(data.get("skills")),
        education=_education_entries(data.get("education")),
        projects=_project_entries(data.get("projects")),
        certifications=_string_list(data.get("certifications")),
        languages=_string_list(data.get("languages")),
        tools=_string_list(data.get("tools")),
        resumeMarkdown=_text(data.get("resumeMarkdown")),
    )


def coerce_resume_document(raw: Any) -> ResumeDocument:
    """
    Client-supplied resume data for the download endpoints.
    Accepts the generator's `experienceBullets` key when `experience` is absent.
    """
    data = raw if isinstance(raw, dict) else {}
    experience = data.get("experience")
    if not isinstance(experience, list):
        experience = data.get("experienceBullets")
    return ResumeDocument(
        name=_text(data.get("name")),
        contactInfo=_text(data.get("contactInfo")),
        summary=_text(data.get("summary")),
        experience=_experience_entries(experience),
        skills=_string_list(data.get("skills")),
        education=_education_entries(data.get("education")),
        projects=_project_entries(data.get("projects")),
        certifications=_string_list(data.get("certifications")),
        languages=_string_list(data.get("languages")),
    )
