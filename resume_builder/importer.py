# resume_builder/importer.py
import io
import logging

from pypdf import PdfReader
from pypdf.errors import PdfReadError

logger = logging.getLogger(__name__)


class ResumeImportError(ValueError):
    """Raised when an uploaded resume file cannot be read"""


def extract_pdf_text(data: bytes) -> str:
    """Text of every page, one page per line block"""
    try:
        reader = PdfReader(io.BytesIO(data))
        pages = [page.extract_text() or "" for page in reader.pages]
    except (PdfReadError, ValueError, OSError) as e:
        raise ResumeImportError(f"PDF parse failed: {e}") from e
    return "\n".join(pages).strip()


def extract_text(filename: str, data: bytes) -> str:
    """
    Extract plain text from an uploaded resume file

    Args:
        filename: Original file name, used to pick the reader
        data: File contents

    Returns:
        Extracted text (PDF) or the decoded contents (anything else)
    """
    name = (filename or "").lower()
    if name.endswith(".pdf"):
        text = extract_pdf_text(data)
    else:
        text = data.decode("utf-8", errors="ignore").strip()

    logger.info(f"Extracted {len(text)} chars from {filename or 'upload'}")
    return text
