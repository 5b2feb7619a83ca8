"""Extract raw text from uploaded resume files (PDF, DOCX, DOC, TXT). In-memory only."""

import re
import unicodedata
import zipfile
from io import BytesIO

import pdfplumber
from docx import Document

from resume_match_ai.errors import ExtractionError
from resume_match_ai.utils.logger import get_logger

logger = get_logger(__name__)

MIME_PDF = "application/pdf"
MIME_DOCX = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
MIME_DOC = "application/msword"
MIME_TXT = "text/plain"

SUPPORTED_MIME_TYPES = (MIME_PDF, MIME_DOCX, MIME_DOC, MIME_TXT)


def _normalize_unicode(text: str) -> str:
    """Normalize unicode (NFC)."""
    if not text:
        return ""
    return unicodedata.normalize("NFC", text)


def _clean_cv_text(text: str) -> str:
    """Remove excessive whitespace and normalize unicode for CV content."""
    if not text or not text.strip():
        return ""
    t = _normalize_unicode(text)
    t = re.sub(r"[ \t]+", " ", t)
    t = re.sub(r"\n\s*\n\s*\n", "\n\n", t)
    return t.strip()


def _extract_pdf(data: bytes) -> str:
    """Extract the text layer of every page with pdfplumber."""
    with pdfplumber.open(BytesIO(data)) as pdf:
        parts = []
        for page in pdf.pages:
            ptext = page.extract_text()
            if ptext:
                parts.append(ptext)
    return "\n\n".join(parts)


def _extract_docx(data: bytes) -> str:
    """Extract paragraph and table text with python-docx."""
    doc = Document(BytesIO(data))
    parts = [p.text for p in doc.paragraphs if p.text.strip()]
    for table in doc.tables:
        for row in table.rows:
            cells = [cell.text.strip() for cell in row.cells if cell.text.strip()]
            if cells:
                parts.append(" | ".join(cells))
    return "\n\n".join(parts)


def _extract_doc(data: bytes, filename: str) -> str:
    """Legacy .doc: only DOCX-compatible containers can be read."""
    if not zipfile.is_zipfile(BytesIO(data)):
        raise ExtractionError(
            "Unable to process .doc file. Please convert to .docx or PDF format.",
            filename=filename,
        )
    return _extract_docx(data)


def _extract_txt(data: bytes) -> str:
    return data.decode("utf-8-sig")


def extract_text(data: bytes, mime_type: str, filename: str = "") -> str:
    """
    Extract and clean text from an uploaded resume file, dispatching on mime type.
    Raises ExtractionError for unsupported types, parser failures and empty results.
    """
    mime = (mime_type or "").split(";")[0].strip().lower()
    if mime not in SUPPORTED_MIME_TYPES:
        logger.warning("Unsupported file type %s for %s", mime_type, filename)
        raise ExtractionError(f"Unsupported file type: {mime_type}", filename=filename)

    try:
        if mime == MIME_PDF:
            raw = _extract_pdf(data)
        elif mime == MIME_DOCX:
            raw = _extract_docx(data)
        elif mime == MIME_DOC:
            raw = _extract_doc(data, filename)
        else:
            raw = _extract_txt(data)
    except ExtractionError:
        raise
    except Exception as e:
        logger.error("Text extraction failed for %s: %s", filename, e)
        raise ExtractionError(f"Failed to extract text from file: {e}", filename=filename) from e

    text = _clean_cv_text(raw)
    if not text:
        raise ExtractionError("No text content could be extracted from the file", filename=filename)
    logger.info("Extracted %s characters from %s (%s)", len(text), filename, mime)
    return text
