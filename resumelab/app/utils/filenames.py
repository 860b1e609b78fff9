"""Download file names - must match the frontend's slug rules (ASCII alphanumerics, dash-joined)."""
import re

from resumelab.app.core.config import DEFAULT_DOCUMENT_NAME


def slugify_filename(text: str) -> str:
    """Drop everything but letters, digits and whitespace, dash-join words, lowercase."""
    cleaned = re.sub(r"[^a-zA-Z0-9\s]", "", text or "")
    return re.sub(r"\s+", "-", cleaned.strip()).lower()


def document_filename(*candidates: str | None) -> str:
    """
    First candidate that slugifies to something non-empty, else "resume".
    Callers pass resume name first, then any client-supplied file name.
    """
    for candidate in candidates:
        slug = slugify_filename(candidate or "")
        if slug:
            return slug
    return DEFAULT_DOCUMENT_NAME
