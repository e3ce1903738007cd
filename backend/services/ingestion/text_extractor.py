import io
import logging

from pypdf import PdfReader


logger = logging.getLogger(__name__)


class TextExtractionError(Exception):
    """Raised when a source's bytes cannot be turned into text."""
    pass


def extract_text_from_pdf_bytes(data: bytes) -> str:
    try:
        reader = PdfReader(io.BytesIO(data))
        pages = [(page.extract_text() or "") for page in reader.pages]
    except Exception as e:
        raise TextExtractionError(f"PDF could not be read: {e}") from e
    logger.info("text_extractor: pdf pages=%d", len(pages))
    return "\n".join(pages).strip()


def extract_text(name: str, data: bytes) -> str:
    """
    Decode an uploaded source into text.

    PDFs (by extension or %PDF magic) go through pypdf, everything else is
    decoded as UTF-8 with undecodable bytes replaced.

    Raises:
        TextExtractionError: If the source yields no readable text
    """
    if name.lower().endswith(".pdf") or data[:5] == b"%PDF-":
        text = extract_text_from_pdf_bytes(data)
    else:
        text = data.decode("utf-8", errors="replace")
        # BOM from Windows editors
        text = text.lstrip("\ufeff")

    if not text.strip():
        raise TextExtractionError("no readable text")
    return text
