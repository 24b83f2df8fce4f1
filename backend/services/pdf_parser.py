import io
import logging

import pdfplumber

logger = logging.getLogger(__name__)


def extract_text(pdf_bytes: bytes) -> str:
    """Extract all text from a PDF file."""
    with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
        pages = [page.extract_text() or "" for page in pdf.pages]
    logger.debug("Extracted text from %d PDF pages", len(pages))
    return "\n".join(pages).strip()
