"""
Pytest fixtures for ResumeLab API tests.
Sets env before config loads, isolates the upload dir per test, builds sample documents.
"""
import os
import tempfile
from pathlib import Path

import pytest
from docx import Document
from fastapi.testclient import TestClient
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

# Must be set before resumelab.app.core.config is imported
os.environ["GROQ_API_KEY"] = "test-groq-key"
os.environ["ENVIRONMENT"] = "test"
os.environ["UPLOAD_DIR"] = tempfile.mkdtemp(prefix="resumelab-uploads-")

from resumelab.app.core.config import settings
from resumelab.main import app

SAMPLE_RESUME_LINES = [
    "Jane Doe",
    "jane.doe@example.com | +1 555 123 4567 | Berlin, Germany",
    "Experience",
    "Senior Backend Engineer, Acme Corp (2019 - Present)",
    "Built Python/FastAPI services handling 20k requests per minute.",
    "Cut infrastructure cost by 30% by moving batch jobs to spot instances.",
    "Education",
    "B.Sc. Computer Science, TU Berlin, 2016",
    "Skills: Python, FastAPI, PostgreSQL, Docker, AWS",
]


@pytest.fixture
def resume_text() -> str:
    return "\n".join(SAMPLE_RESUME_LINES)


@pytest.fixture(autouse=True)
def upload_dir(tmp_path, monkeypatch) -> Path:
    """Each test gets its own upload dir so leftover files are easy to detect."""
    path = tmp_path / "uploads"
    path.mkdir()
    monkeypatch.setattr(settings, "upload_dir", str(path))
    return path


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def text_pdf(tmp_path) -> Path:
    """A real text-layer PDF with the sample resume."""
    path = tmp_path / "resume.pdf"
    c = canvas.Canvas(str(path), pagesize=letter)
    y = 720
    for line in SAMPLE_RESUME_LINES:
        c.drawString(72, y, line)
        y -= 16
    c.save()
    return path


@pytest.fixture
def resume_docx(tmp_path) -> Path:
    """A real DOCX with paragraphs and a skills table."""
    path = tmp_path / "resume.docx"
    doc = Document()
    for line in SAMPLE_RESUME_LINES[:-1]:
        doc.add_paragraph(line)
    table = doc.add_table(rows=1, cols=2)
    table.rows[0].cells[0].text = "Skills"
    table.rows[0].cells[1].text = "Python, FastAPI, PostgreSQL"
    doc.save(str(path))
    return path


@pytest.fixture
def llm_feedback() -> dict:
    """A well-formed model reply for resume feedback."""
    return {
        "overallScore": 78,
        "categories": [
            {"name": "Content Quality", "score": 8, "feedback": "Strong quantified impact."},
            {"name": "Formatting & Structure", "score": 7, "feedback": "Consistent headings."},
        ],
        "strengths": ["Quantified achievements", "Clear tech stack"],
        "suggestions": ["Add a summary", "List certifications"],
        "jobTitleMatch": "Senior Backend Engineer",
        "keywordAnalysis": [
            {"keyword": "Python", "count": 2, "importance": "high", "recommendation": "Keep it"},
        ],
        "atsScore": 82,
    }
