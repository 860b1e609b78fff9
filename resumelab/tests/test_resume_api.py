"""Tests for POST /api/resume/feedback and POST /api/resume/generate"""
import logging
from io import BytesIO
from unittest.mock import patch

import pytest
from reportlab.pdfgen import canvas

from resumelab.app.core.config import MIME_DOCX, settings
from resumelab.app.core.exceptions import LLMResponseError, LLMServiceError, LLMTimeoutError

CHAT_JSON = "resumelab.app.services.resume_service.chat_json"


def _upload(name: str, content: bytes, content_type: str) -> dict:
    return {"resume": (name, content, content_type)}


# --- feedback ---

def test_feedback_txt_upload(client, resume_text, llm_feedback):
    """Returns success, sanitized data and metadata."""
    with patch(CHAT_JSON, return_value=llm_feedback) as chat:
        r = client.post("/api/resume/feedback", files=_upload("resume.txt", resume_text.encode(), "text/plain"))
    assert r.status_code == 200
    body = r.json()
    assert body["success"] is True
    assert body["data"]["overallScore"] == 78
    assert body["data"]["jobTitleMatch"] == "Senior Backend Engineer"
    assert body["metadata"]["processedLength"] == len(resume_text)
    assert body["metadata"]["model"] == settings.llm_model
    assert body["metadata"]["analyzedDate"].endswith("Z")

    messages = chat.call_args.args[0]
    assert messages[0]["role"] == "system"
    assert "Acme Corp" in messages[1]["content"]


def test_feedback_fills_gaps_in_model_reply(client, resume_text):
    with patch(CHAT_JSON, return_value={"overallScore": "999", "categories": "n/a"}):
        r = client.post("/api/resume/feedback", files=_upload("resume.txt", resume_text.encode(), "text/plain"))
    data = r.json()["data"]
    assert data["overallScore"] == 100
    assert data["categories"][0]["name"] == "General Assessment"
    assert data["atsScore"] == 60
    assert len(data["strengths"]) >= 2


def test_feedback_truncates_resume_text_in_prompt(client, resume_text, llm_feedback, monkeypatch):
    monkeypatch.setattr(settings, "resume_prompt_char_limit", 60)
    with patch(CHAT_JSON, return_value=llm_feedback) as chat:
        r = client.post("/api/resume/feedback", files=_upload("resume.txt", resume_text.encode(), "text/plain"))
    assert r.status_code == 200
    user_content = chat.call_args.args[0][1]["content"]
    assert resume_text[:60] in user_content
    assert resume_text[60:] not in user_content
    assert r.json()["metadata"]["processedLength"] == len(resume_text)


def test_feedback_pdf_upload(client, text_pdf, llm_feedback):
    with patch(CHAT_JSON, return_value=llm_feedback) as chat:
        r = client.post("/api/resume/feedback", files=_upload("cv.pdf", text_pdf.read_bytes(), "application/pdf"))
    assert r.status_code == 200
    assert "Jane Doe" in chat.call_args.args[0][1]["content"]


def test_feedback_docx_upload(client, resume_docx, llm_feedback):
    with patch(CHAT_JSON, return_value=llm_feedback):
        r = client.post("/api/resume/feedback", files=_upload("cv.docx", resume_docx.read_bytes(), MIME_DOCX))
    assert r.status_code == 200
    assert r.json()["success"] is True


def test_feedback_removes_upload_afterwards(client, resume_text, llm_feedback, upload_dir):
    with patch(CHAT_JSON, return_value=llm_feedback):
        client.post("/api/resume/feedback", files=_upload("resume.txt", resume_text.encode(), "text/plain"))
    with patch(CHAT_JSON, side_effect=LLMServiceError("boom")):
        client.post("/api/resume/feedback", files=_upload("resume.txt", resume_text.encode(), "text/plain"))
    assert list(upload_dir.iterdir()) == []


def test_feedback_requires_file(client):
    r = client.post("/api/resume/feedback")
    assert r.status_code == 400
    assert r.json() == {"success": False, "error": "No file uploaded"}


def test_feedback_rejects_other_types(client):
    r = client.post("/api/resume/feedback", files=_upload("photo.png", b"\x89PNG\r\n", "image/png"))
    assert r.status_code == 400
    assert "Only PDF, DOCX, and TXT" in r.json()["error"]


def test_feedback_rejects_large_files(client, monkeypatch):
    monkeypatch.setattr(settings, "max_upload_bytes", 10)
    r = client.post("/api/resume/feedback", files=_upload("resume.txt", b"x" * 11, "text/plain"))
    assert r.status_code == 413


def test_feedback_short_text_is_rejected_before_llm(client):
    with patch(CHAT_JSON) as chat:
        r = client.post("/api/resume/feedback", files=_upload("resume.txt", b"Jane Doe, engineer", "text/plain"))
    assert r.status_code == 400
    assert r.json()["error"].startswith("Could not extract sufficient text")
    chat.assert_not_called()


def test_feedback_unreadable_pdf(client):
    with patch("resumelab.app.services.text_extraction.extractor.extract_text_ocr", return_value=""):
        r = client.post("/api/resume/feedback", files=_upload("scan.pdf", b"%PDF-1.4 garbage", "application/pdf"))
    assert r.status_code == 400
    assert r.json()["success"] is False


@pytest.mark.parametrize(
    "error,status,message",
    [
        (LLMTimeoutError("timeout"), 504, "Analysis timeout. Please try again with a shorter resume or check your internet connection."),
        (LLMResponseError("Failed to parse AI response as JSON"), 500, "Failed to process analysis results. Please try again."),
        (LLMServiceError("LLM API error 502: bad gateway"), 500, "Failed to analyze resume: LLM API error 502: bad gateway"),
    ],
)
def test_feedback_llm_errors(client, resume_text, error, status, message):
    with patch(CHAT_JSON, side_effect=error):
        r = client.post("/api/resume/feedback", files=_upload("resume.txt", resume_text.encode(), "text/plain"))
    assert r.status_code == status
    assert r.json() == {"success": False, "error": message}


def test_feedback_without_api_key(client, resume_text, monkeypatch):
    monkeypatch.setattr(settings, "groq_api_key", "")
    r = client.post("/api/resume/feedback", files=_upload("resume.txt", resume_text.encode(), "text/plain"))
    assert r.status_code == 503


# --- generate ---

@pytest.mark.parametrize("body", [{"prompt": "   "}, {"prompt": None}, {}])
def test_generate_requires_prompt(client, body):
    r = client.post("/api/resume/generate", json=body)
    assert r.status_code == 400
    assert r.json()["error"] == "Please provide your career details."


def test_generate_without_body(client):
    r = client.post("/api/resume/generate")
    assert r.status_code == 400


def test_generate_returns_sanitized_resume(client):
    reply = {
        "name": "Jane Doe",
        "summary": "Backend engineer.",
        "experienceBullets": [{"company": "Acme", "role": "SWE", "bullets": ["Built APIs"]}],
        "skills": ["Python", None],
        "resumeMarkdown": "# Jane Doe",
    }
    with patch(CHAT_JSON, return_value=reply) as chat:
        r = client.post("/api/resume/generate", json={"prompt": "  5 years backend at Acme  "})
    assert r.status_code == 200
    body = r.json()
    assert body["name"] == "Jane Doe"
    assert body["skills"] == ["Python"]
    assert body["experienceBullets"][0]["endDate"] == ""
    assert body["certifications"] == []
    assert body["resumeMarkdown"] == "# Jane Doe"
    assert chat.call_args.args[0][1]["content"].endswith("5 years backend at Acme")


def test_generate_llm_error(client):
    with patch(CHAT_JSON, side_effect=LLMResponseError("Failed to parse AI response as JSON")):
        r = client.post("/api/resume/generate", json={"prompt": "career details"})
    assert r.status_code == 500
    assert r.json() == {"success": False, "error": "Failed to parse AI response as JSON"}


def test_generate_timeout(client):
    with patch(CHAT_JSON, side_effect=LLMTimeoutError("LLM API request timeout")):
        r = client.post("/api/resume/generate", json={"prompt": "career details"})
    assert r.status_code == 504


def test_feedback_image_only_pdf_warns_and_uses_ocr(client, llm_feedback, caplog):
    """A PDF without a text layer is accepted; extraction falls through to OCR."""
    pdf = BytesIO()
    c = canvas.Canvas(pdf)
    c.rect(72, 600, 300, 150, fill=1)
    c.save()

    ocr_text = "Jane Doe\nSenior Backend Engineer at Acme Corp since 2019, Python and AWS."
    caplog.set_level(logging.INFO, logger="resumelab")
    with patch("resumelab.app.services.text_extraction.extractor.extract_text_ocr", return_value=ocr_text), \
         patch(CHAT_JSON, return_value=llm_feedback) as chat:
        r = client.post("/api/resume/feedback", files=_upload("scan.pdf", pdf.getvalue(), "application/pdf"))

    assert r.status_code == 200
    assert "will try OCR fallback" in caplog.text
    assert "Acme Corp" in chat.call_args.args[0][1]["content"]
