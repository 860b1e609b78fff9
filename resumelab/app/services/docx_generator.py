"""
Resume DOCX generation with python-docx.
Section order and styling follow the website's resume preview.
"""
from io import BytesIO
from typing import NamedTuple

from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.shared import Inches, Pt, RGBColor

from resumelab.app.core.config import (
    DOCX_COLOR_CONTACT,
    DOCX_COLOR_ENTRY,
    DOCX_COLOR_MUTED,
    DOCX_COLOR_TITLE,
    DOCX_MARGIN_INCHES,
)
from resumelab.app.core.exceptions import DocumentRenderError
from resumelab.app.core.logging_config import get_logger
from resumelab.app.schemas.resume import ResumeDocument

logger = get_logger("services.docx_generator")

SEPARATOR = " • "


class Run(NamedTuple):
    text: str
    size: float = 11
    bold: bool = False
    italic: bool = False
    underline: bool = False
    color: str | None = None


def _add_paragraph(
    doc,
    runs: list[Run],
    align=None,
    space_before: float = 0,
    space_after: float = 0,
    indent_left: float | None = None,
):
    p = doc.add_paragraph()
    for r in runs:
        run = p.add_run(r.text)
        run.bold = r.bold
        run.italic = r.italic
        run.underline = r.underline
        run.font.size = Pt(r.size)
        if r.color:
            run.font.color.rgb = RGBColor.from_string(r.color.upper())
    if align is not None:
        p.alignment = align
    fmt = p.paragraph_format
    fmt.space_before = Pt(space_before)
    fmt.space_after = Pt(space_after)
    if indent_left is not None:
        fmt.left_indent = Pt(indent_left)
    return p


def _add_spacer(doc, space_after: float) -> None:
    p = doc.add_paragraph("")
    p.paragraph_format.space_after = Pt(space_after)


def _add_section_title(doc, title: str, space_before: float = 30, space_after: float = 15) -> None:
    _add_paragraph(
        doc,
        [Run(title, size=13, bold=True, underline=True, color=DOCX_COLOR_TITLE)],
        space_before=space_before,
        space_after=space_after,
    )


def _add_header(doc, resume: ResumeDocument) -> None:
    if resume.name:
        _add_paragraph(
            doc,
            [Run(resume.name, size=16, bold=True, color=DOCX_COLOR_TITLE)],
            align=WD_ALIGN_PARAGRAPH.CENTER,
            space_after=10,
        )
    if resume.contactInfo:
        _add_paragraph(
            doc,
            [Run(resume.contactInfo, size=11, color=DOCX_COLOR_CONTACT)],
            align=WD_ALIGN_PARAGRAPH.CENTER,
            space_after=30,
        )


def _add_education(doc, resume: ResumeDocument) -> None:
    _add_section_title(doc, "EDUCATION", space_before=0)
    for index, edu in enumerate(resume.education):
        if edu.institution or edu.degree:
            runs = [Run(edu.institution, bold=True, color=DOCX_COLOR_ENTRY)]
            if edu.institution and edu.degree:
                runs.append(Run(SEPARATOR))
            runs.append(Run(edu.degree, color=DOCX_COLOR_ENTRY))
            _add_paragraph(doc, runs, space_after=5)
        if edu.year:
            _add_paragraph(doc, [Run(edu.year, size=10, italic=True, color=DOCX_COLOR_MUTED)], space_after=10)
        if index < len(resume.education) - 1:
            _add_spacer(doc, 10)


def _add_summary(doc, resume: ResumeDocument) -> None:
    _add_section_title(doc, "PROFESSIONAL SUMMARY", space_after=10)
    _add_paragraph(doc, [Run(resume.summary)], space_after=20)


def _add_skills(doc, resume: ResumeDocument) -> None:
    _add_section_title(doc, "TECHNICAL SKILLS")
    _add_paragraph(doc, [Run(SEPARATOR.join(resume.skills))], space_after=20)


def _date_range(start: str, end: str) -> str:
    if start:
        return f"{start} - {end or 'Present'}"
    return end or "Present"


def _add_experience(doc, resume: ResumeDocument) -> None:
    _add_section_title(doc, "PROFESSIONAL EXPERIENCE")
    for index, exp in enumerate(resume.experience):
        if exp.company or exp.role:
            runs = [Run(exp.company, size=12, bold=True, color=DOCX_COLOR_ENTRY)]
            if exp.company and exp.role:
                runs.append(Run(" - ", size=12))
            runs.append(Run(exp.role, size=12, italic=True, color=DOCX_COLOR_ENTRY))
            _add_paragraph(doc, runs, space_after=5)
        if exp.startDate or exp.endDate:
            _add_paragraph(
                doc,
                [Run(_date_range(exp.startDate, exp.endDate), size=10, color=DOCX_COLOR_MUTED)],
                space_after=10,
            )
        for bullet in exp.bullets:
            _add_paragraph(
                doc,
                [Run("• ", bold=True), Run(bullet.lstrip("•").strip())],
                space_after=5,
                indent_left=20,
            )
        if index < len(resume.experience) - 1:
            _add_spacer(doc, 15)


def _add_projects(doc, resume: ResumeDocument) -> None:
    _add_section_title(doc, "KEY PROJECTS")
    for index, project in enumerate(resume.projects):
        if project.name:
            _add_paragraph(doc, [Run(project.name, bold=True, color=DOCX_COLOR_ENTRY)], space_after=5)
        if project.description:
            _add_paragraph(doc, [Run(project.description)], space_after=10)
        if index < len(resume.projects) - 1:
            _add_spacer(doc, 10)


def _add_certifications(doc, resume: ResumeDocument) -> None:
    _add_section_title(doc, "CERTIFICATIONS")
    for cert in resume.certifications:
        _add_paragraph(doc, [Run("• ", bold=True), Run(cert)], space_after=5)


def _add_languages(doc, resume: ResumeDocument) -> None:
    _add_section_title(doc, "LANGUAGES")
    _add_paragraph(doc, [Run(SEPARATOR.join(resume.languages))], space_after=20)


def resume_to_docx_bytes(resume: ResumeDocument) -> bytes:
    """Build the resume DOCX. Sections with no content are left out."""
    try:
        doc = Document()
        for section in doc.sections:
            section.top_margin = Inches(DOCX_MARGIN_INCHES)
            section.bottom_margin = Inches(DOCX_MARGIN_INCHES)
            section.left_margin = Inches(DOCX_MARGIN_INCHES)
            section.right_margin = Inches(DOCX_MARGIN_INCHES)

        _add_header(doc, resume)
        if resume.education:
            _add_education(doc, resume)
        if resume.summary:
            _add_summary(doc, resume)
        if resume.skills:
            _add_skills(doc, resume)
        if resume.experience:
            _add_experience(doc, resume)
        if resume.projects:
            _add_projects(doc, resume)
        if resume.certifications:
            _add_certifications(doc, resume)
        if resume.languages:
            _add_languages(doc, resume)

        buffer = BytesIO()
        doc.save(buffer)
    except Exception as e:
        logger.exception("DOCX generation failed")
        raise DocumentRenderError(str(e)) from e
    return buffer.getvalue()
