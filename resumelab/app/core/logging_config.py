"""
Logging setup: one stdout stream for the `resumelab.*` loggers.
Extraction and rendering libraries log per page or per request, so they are held at WARNING.
"""
import logging
import sys

from resumelab.app.core.config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# pdfminer is pdfplumber's parser
NOISY_LIBRARY_LOGGERS = (
    "pdfminer",
    "PIL",
    "weasyprint",
    "fontTools",
    "httpx",
    "httpcore",
    "openai",
)


def setup_logging(level: str | None = None) -> logging.Logger:
    """Configure stdout logging at `level` (LOG_LEVEL by default). Returns the `resumelab` logger."""
    level_name = (level or settings.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    for name in NOISY_LIBRARY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    return logging.getLogger("resumelab")


def get_logger(name: str) -> logging.Logger:
    """Logger under the `resumelab` namespace, e.g. get_logger("api.resume")."""
    return logging.getLogger(f"resumelab.{name}")
