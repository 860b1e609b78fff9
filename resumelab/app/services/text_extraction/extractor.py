"""
Resume text extraction.
PDFs go through a LangGraph fallback chain: pdfplumber text layer -> pypdf -> Tesseract OCR,
stopping at the first strategy that yields usable text. DOCX and TXT are read directly.
"""
from pathlib import Path
from typing import Literal

from docx import Document
from langgraph.graph import END, START, StateGraph
from pydantic import BaseModel, Field
from typing_extensions import TypedDict

from resumelab.app.core.config import MIME_DOCX, MIME_PDF, MIME_TEXT, PDF_STRATEGY_MIN_CHARS
from resumelab.app.core.exceptions import TextExtractionError
from resumelab.app.core.logging_config import get_logger

from .pdf_utils import extract_text_alternate, extract_text_native, extract_text_ocr

logger = get_logger("services.text_extraction")


class ExtractionResult(BaseModel):
    """Text pulled out of an uploaded document and how it was obtained."""
    text: str
    method: str
    attempts: list[str] = Field(default_factory=list)


class PdfExtractionState(TypedDict):
    """State for the LangGraph PDF extraction flow."""
    file_path: str
    text: str
    method: str | None
    attempts: list[str]
    errors: list[str]


def _is_usable(text: str | None) -> bool:
    return bool(text) and len(text.strip()) > PDF_STRATEGY_MIN_CHARS


def _run_strategy(state: PdfExtractionState, name: str, extract) -> dict:
    """Run one extraction strategy. A failing strategy counts as producing no text."""
    attempts = [*state.get("attempts", []), name]
    logger.info("Trying %s PDF extraction for %s", name, state["file_path"])
    try:
        text = extract(state["file_path"]) or ""
    except Exception as e:
        logger.warning("%s PDF extraction failed: %s", name, e)
        return {
            "text": "",
            "attempts": attempts,
            "errors": [*state.get("errors", []), f"{name}: {e}"],
        }
    if _is_usable(text):
        logger.info("Extracted %d chars with %s PDF extraction", len(text), name)
        return {"text": text, "method": name, "attempts": attempts}
    logger.info("%s PDF extraction produced too little text", name)
    return {"text": "", "attempts": attempts}


def _native_node(state: PdfExtractionState) -> dict:
    """Node: pdfplumber text layer."""
    return _run_strategy(state, "native", extract_text_native)


def _alternate_node(state: PdfExtractionState) -> dict:
    """Node: pypdf."""
    return _run_strategy(state, "alternate", extract_text_alternate)


def _ocr_node(state: PdfExtractionState) -> dict:
    """Node: Tesseract OCR over rasterised pages."""
    return _run_strategy(state, "ocr", extract_text_ocr)


def _route_after_native(state: PdfExtractionState) -> Literal["alternate", "__end__"]:
    return "__end__" if state.get("method") else "alternate"


def _route_after_alternate(state: PdfExtractionState) -> Literal["ocr", "__end__"]:
    return "__end__" if state.get("method") else "ocr"


def _build_pdf_graph():
    """Build the LangGraph PDF fallback pipeline."""
    builder = StateGraph(PdfExtractionState)

    builder.add_node("native", _native_node)
    builder.add_node("alternate", _alternate_node)
    builder.add_node("ocr", _ocr_node)

    builder.add_edge(START, "native")
    builder.add_conditional_edges(
        "native",
        _route_after_native,
        path_map={"alternate": "alternate", "__end__": END},
    )
    builder.add_conditional_edges(
        "alternate",
        _route_after_alternate,
        path_map={"ocr": "ocr", "__end__": END},
    )
    builder.add_edge("ocr", END)

    return builder.compile()


def extract_pdf_text(file_path: str | Path) -> ExtractionResult:
    """
    Extract text from a PDF, trying each strategy in turn.
    Raises TextExtractionError when no strategy yields usable text.
    """
    graph = _build_pdf_graph()
    initial_state: PdfExtractionState = {
        "file_path": str(file_path),
        "text": "",
        "method": None,
        "attempts": [],
        "errors": [],
    }
    result = graph.invoke(initial_state)

    if not result.get("method"):
        logger.error(
            "PDF could not be processed by any method: attempts=%s errors=%s",
            result.get("attempts"),
            result.get("errors"),
        )
        raise TextExtractionError("PDF could not be processed by any method")
    return ExtractionResult(
        text=result["text"],
        method=result["method"],
        attempts=result.get("attempts", []),
    )


def extract_docx_text(file_path: str | Path) -> str:
    """Paragraph and table text from a DOCX file, one block per line."""
    try:
        document = Document(str(file_path))
    except Exception as e:
        raise TextExtractionError(f"DOCX processing failed: {e}") from e
    lines = [p.text for p in document.paragraphs if p.text.strip()]
    for table in document.tables:
        for row in table.rows:
            cells = [cell.text.strip() for cell in row.cells if cell.text.strip()]
            if cells:
                lines.append(" | ".join(cells))
    return "\n".join(lines)


def extract_plain_text(file_path: str | Path) -> str:
    try:
        return Path(file_path).read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise TextExtractionError(f"Text file processing failed: {e}") from e


def extract_resume_text(file_path: str | Path, content_type: str) -> ExtractionResult:
    """Dispatch on the upload's MIME type."""
    if content_type == MIME_PDF:
        return extract_pdf_text(file_path)
    if content_type == MIME_DOCX:
        return ExtractionResult(text=extract_docx_text(file_path), method="docx", attempts=["docx"])
    if content_type == MIME_TEXT:
        return ExtractionResult(text=extract_plain_text(file_path), method="text", attempts=["text"])
    raise TextExtractionError("Unsupported file type")
