import io

import pytest
from pypdf import PdfWriter

from services.ingestion.text_extractor import TextExtractionError, extract_text


def _blank_pdf() -> bytes:
    writer = PdfWriter()
    writer.add_blank_page(width=200, height=200)
    buf = io.BytesIO()
    writer.write(buf)
    return buf.getvalue()


def test_utf8_text_is_decoded():
    assert extract_text("reqs.txt", "Patient data must be encrypted – always.".encode("utf-8")) == (
        "Patient data must be encrypted – always."
    )


def test_invalid_utf8_bytes_are_replaced():
    text = extract_text("reqs.txt", b"valid \xff\xfe bytes")
    assert text.startswith("valid ")
    assert "\ufffd" in text


def test_bom_is_stripped():
    assert extract_text("reqs.md", b"\xef\xbb\xbf# Requirements") == "# Requirements"


def test_blank_text_is_rejected():
    with pytest.raises(TextExtractionError):
        extract_text("empty.txt", b" \n\t ")


def test_pdf_without_text_is_rejected():
    with pytest.raises(TextExtractionError):
        extract_text("scan.pdf", _blank_pdf())


def test_corrupt_pdf_is_rejected():
    with pytest.raises(TextExtractionError):
        extract_text("broken.pdf", b"%PDF-1.7 this is not really a pdf")
