"""
Generate the resume analysis report PDF from sanitized feedback.
"""
from datetime import date
from io import BytesIO

from reportlab.lib.colors import HexColor, black
from reportlab.lib.pagesizes import A4
from reportlab.lib.units import inch
from reportlab.lib.utils import simpleSplit
from reportlab.pdfgen import canvas

from resumelab.app.core.config import (
    REPORT_FONT_SIZE_BODY,
    REPORT_FONT_SIZE_HEADING,
    REPORT_FONT_SIZE_SCORE,
    REPORT_FONT_SIZE_TITLE,
    REPORT_LINE_HEIGHT,
    REPORT_SCORE_COLOR,
    REPORT_TITLE,
)
from resumelab.app.core.exceptions import DocumentRenderError
from resumelab.app.core.logging_config import get_logger
from resumelab.app.schemas.feedback import ResumeFeedback

logger = get_logger("services.pdf_generator")

_FONT = "Helvetica"
_FONT_BOLD = "Helvetica-Bold"


class _ReportWriter:
    """Top-down text cursor over a reportlab canvas. Starts a new page when the bottom margin is hit."""

    def __init__(self, c: canvas.Canvas):
        self.c = c
        self.width, self.height = A4
        self.margin = 0.75 * inch
        self.y = self.height - self.margin

    def _ensure_room(self, needed: float) -> None:
        if self.y - needed < self.margin:
            self.c.showPage()
            self.y = self.height - self.margin

    def centered(self, text: str, font: str, size: int, color=black) -> None:
        self._ensure_room(size)
        self.c.setFont(font, size)
        self.c.setFillColor(color)
        self.c.drawCentredString(self.width / 2, self.y - size, text)
        self.c.setFillColor(black)
        self.y -= size * 1.4

    def paragraph(self, text: str, font: str = _FONT, size: int = REPORT_FONT_SIZE_BODY, indent: float = 0) -> None:
        max_width = self.width - 2 * self.margin - indent
        for line in simpleSplit(text or "", font, size, max_width) or [""]:
            self._ensure_room(REPORT_LINE_HEIGHT)
            self.c.setFont(font, size)
            self.c.drawString(self.margin + indent, self.y - size, line)
            self.y -= REPORT_LINE_HEIGHT

    def gap(self, points: float) -> None:
        self.y -= points


def feedback_to_pdf_bytes(feedback: ResumeFeedback, generated_on: date | None = None) -> bytes:
    """
    Draw the analysis report: overall score, category scores with feedback, suggestions.
    Returns PDF file content as bytes.
    """
    generated_on = generated_on or date.today()
    buffer = BytesIO()
    try:
        c = canvas.Canvas(buffer, pagesize=A4)
        c.setTitle(REPORT_TITLE)
        w = _ReportWriter(c)

        w.centered(REPORT_TITLE, _FONT_BOLD, REPORT_FONT_SIZE_TITLE)
        w.centered(f"{feedback.overallScore}/100", _FONT_BOLD, REPORT_FONT_SIZE_SCORE, HexColor(REPORT_SCORE_COLOR))
        w.centered(f"Generated on {generated_on.strftime('%m/%d/%Y')}", _FONT, REPORT_FONT_SIZE_BODY)
        w.gap(REPORT_LINE_HEIGHT)

        w.paragraph("Category Scores", _FONT_BOLD, REPORT_FONT_SIZE_HEADING)
        w.gap(REPORT_LINE_HEIGHT / 2)
        for category in feedback.categories:
            w.paragraph(f"{category.name} - {category.score}/10", _FONT_BOLD, REPORT_FONT_SIZE_BODY + 2)
            w.paragraph(category.feedback, indent=12)
            w.gap(REPORT_LINE_HEIGHT / 2)

        w.gap(REPORT_LINE_HEIGHT / 2)
        w.paragraph("Actionable Suggestions", _FONT_BOLD, REPORT_FONT_SIZE_HEADING)
        w.gap(REPORT_LINE_HEIGHT / 2)
        for suggestion in feedback.suggestions:
            w.paragraph(f"• {suggestion}")

        c.save()
    except Exception as e:
        logger.exception("Analysis report rendering failed")
        raise DocumentRenderError(f"Failed to render analysis report: {e}") from e
    return buffer.getvalue()
