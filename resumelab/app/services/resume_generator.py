"""
Resume PDF generation.
Uses Jinja2 for HTML templates and WeasyPrint for HTML→PDF conversion.
The caller either sends a rendered resume HTML fragment, or structured resume data that
is rendered with templates/resume.html. Both are wrapped in an A4 page shell.
"""
import tempfile
from pathlib import Path

from jinja2 import Environment, FileSystemLoader
from markupsafe import Markup

from resumelab.app.core.config import settings
from resumelab.app.core.exceptions import DocumentRenderError
from resumelab.app.core.logging_config import get_logger
from resumelab.app.schemas.resume import ResumeDocument

logger = get_logger("services.resume_generator")

TEMPLATE_DIR = Path(__file__).resolve().parent.parent.parent / "templates"


def _template_env(template_dir: Path | None = None) -> Environment:
    return Environment(loader=FileSystemLoader(str(template_dir or TEMPLATE_DIR)), autoescape=True)


def _strip_bullet(text: str) -> str:
    return text.lstrip("•").strip()


def render_resume_fragment(document: ResumeDocument, template_dir: Path | None = None) -> str:
    """Render resume body HTML from structured data. Returns HTML string."""
    env = _template_env(template_dir)
    env.filters["strip_bullet"] = _strip_bullet
    template = env.get_template("resume.html")
    return template.render(resume=document)


def render_resume_page(fragment_html: str, title: str, template_dir: Path | None = None) -> str:
    """Wrap a resume HTML fragment in the A4 page shell. The fragment is trusted markup."""
    template = _template_env(template_dir).get_template("resume_page.html")
    return template.render(
        title=title,
        stylesheets=settings.pdf_stylesheet_urls,
        content=Markup(fragment_html),
    )


def html_to_pdf_weasyprint(html_content: str, work_dir: Path) -> bytes:
    """Convert HTML to PDF using WeasyPrint. Returns PDF bytes."""
    try:
        from weasyprint import HTML
        from weasyprint.text.fonts import FontConfiguration
    except (ImportError, OSError) as err:
        raise DocumentRenderError(
            "WeasyPrint not available. Run: pip install weasyprint (needs Pango)"
        ) from err

    html_path = work_dir / "resume.html"
    html_path.write_text(html_content, encoding="utf-8")
    pdf_path = work_dir / "resume.pdf"
    font_config = FontConfiguration()
    doc = HTML(filename=str(html_path))
    doc.write_pdf(pdf_path, font_config=font_config)
    if not pdf_path.exists():
        raise DocumentRenderError("WeasyPrint did not produce PDF")
    return pdf_path.read_bytes()


def generate_resume_pdf(
    title: str,
    html_fragment: str | None = None,
    document: ResumeDocument | None = None,
) -> bytes:
    """
    Render the resume page and convert it to PDF.
    A non-blank html_fragment wins over document when both are given.
    """
    if html_fragment and html_fragment.strip():
        fragment = html_fragment
    elif document is not None:
        fragment = render_resume_fragment(document)
    else:
        raise ValueError("No resume content provided")

    page_html = render_resume_page(fragment, title)
    with tempfile.TemporaryDirectory() as tmp:
        try:
            pdf_bytes = html_to_pdf_weasyprint(page_html, Path(tmp))
        except DocumentRenderError:
            raise
        except Exception as e:
            raise DocumentRenderError(f"WeasyPrint failed: {e}") from e
    logger.info("Resume PDF rendered title=%s bytes=%d", title, len(pdf_bytes))
    return pdf_bytes
