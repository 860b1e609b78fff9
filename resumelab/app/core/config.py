"""
Application configuration settings.
Loads from .env file first (overrides shell env for local dev), then pydantic reads from environment.
Production: set env vars in the platform (Docker, Render, etc.); .env is optional.

All backend-related configs and constants are centralized here.
"""
from pathlib import Path

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve .env path: resumelab/.env (absolute path, works regardless of cwd)
_BASE_DIR = Path(__file__).resolve().parent.parent.parent
_ENV_FILE = (_BASE_DIR / ".env").resolve()

# Load .env into environment BEFORE pydantic reads. override=True ensures .env
# values override any shell env. When .env doesn't exist (prod), this is a no-op.
if _ENV_FILE.exists():
    load_dotenv(_ENV_FILE, override=True)


class Settings(BaseSettings):
    """Application settings. Source: env vars (after dotenv load)."""

    # App
    app_name: str = "ResumeLab"
    app_version: str = "1.0.0"
    environment: str = "development"
    port: int = 5000

    # Upload & storage
    upload_dir: str = "uploads"
    max_upload_bytes: int = 5 * 1024 * 1024

    # LLM (Groq exposes an OpenAI-compatible API)
    groq_api_key: str = ""
    llm_base_url: str = "https://api.groq.com/openai/v1"
    llm_model: str = "llama3-70b-8192"
    llm_temperature: float = 0.7
    llm_max_tokens: int = 3500
    llm_top_p: float = 1.0
    llm_timeout: int = 30
    resume_prompt_char_limit: int = 10000

    # OCR
    ocr_language: str = "eng"
    ocr_dpi: int = 300
    tesseract_cmd: str = ""

    # Job search
    jobs_api_url: str = "https://remotive.com/api/remote-jobs"
    jobs_result_limit: int = 10

    # HTTP / network
    http_request_timeout: int = 30

    # Resume PDF page shell
    pdf_stylesheet_urls: list[str] = [
        "https://cdn.jsdelivr.net/npm/tailwindcss@2.2.19/dist/tailwind.min.css",
        "https://fonts.googleapis.com/css2?family=Inter:wght@400;600&display=swap",
    ]

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE) if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()


# --- Constants (non-env, business config) ---

# Upload validation
MIME_PDF: str = "application/pdf"
MIME_DOCX: str = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
MIME_TEXT: str = "text/plain"
ALLOWED_UPLOAD_TYPES: tuple[str, ...] = (MIME_PDF, MIME_DOCX, MIME_TEXT)

# Text extraction thresholds (characters of stripped text)
PDF_PROBE_MIN_CHARS: int = 20
PDF_STRATEGY_MIN_CHARS: int = 50
RESUME_MIN_CHARS: int = 50

# Feedback sanitization defaults
DEFAULT_OVERALL_SCORE: int = 50
DEFAULT_ATS_SCORE: int = 60
DEFAULT_CATEGORY_SCORE: int = 5
DEFAULT_JOB_TITLE: str = "Professional"
KEYWORD_IMPORTANCE_LEVELS: tuple[str, ...] = ("high", "medium", "low")

# Analysis report PDF (reportlab)
REPORT_FILENAME: str = "resume_analysis_report.pdf"
REPORT_TITLE: str = "Resume Analysis Report"
REPORT_LINE_HEIGHT: int = 14
REPORT_FONT_SIZE_TITLE: int = 20
REPORT_FONT_SIZE_SCORE: int = 36
REPORT_FONT_SIZE_HEADING: int = 14
REPORT_FONT_SIZE_BODY: int = 10
REPORT_SCORE_COLOR: str = "#d97706"

# Resume DOCX (python-docx)
DOCX_COLOR_TITLE: str = "2c3e50"
DOCX_COLOR_CONTACT: str = "7f8c8d"
DOCX_COLOR_ENTRY: str = "34495e"
DOCX_COLOR_MUTED: str = "95a5a6"
DOCX_MARGIN_INCHES: float = 0.5
DEFAULT_DOCUMENT_NAME: str = "resume"
