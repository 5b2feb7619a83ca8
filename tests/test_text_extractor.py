"""Tests for text extraction from PDF, DOCX, DOC and TXT uploads."""

from io import BytesIO

import pytest
from docx import Document

from resume_match_ai.cv_pipeline.text_extractor import MIME_DOC, MIME_DOCX, MIME_PDF, MIME_TXT, extract_text
from resume_match_ai.errors import ExtractionError


def _docx_bytes() -> bytes:
    doc = Document()
    doc.add_paragraph("Jane Doe")
    doc.add_paragraph("Skills: Python, SQL")
    doc.add_paragraph("   ")
    table = doc.add_table(rows=1, cols=2)
    table.rows[0].cells[0].text = "Python"
    table.rows[0].cells[1].text = "5 years"
    buffer = BytesIO()
    doc.save(buffer)
    return buffer.getvalue()


def _pdf_bytes(*lines: str) -> bytes:
    """Single-page PDF with a Helvetica text layer, one line per string."""
    ops = ["BT", "/F1 12 Tf", "14 TL", "72 720 Td"]
    for line in lines:
        ops.append(f"({line}) Tj T*")
    ops.append("ET")
    stream = "\n".join(ops).encode("latin-1")
    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
        b"/Resources << /Font << /F1 5 0 R >> >> /Contents 4 0 R >>",
        b"<< /Length " + str(len(stream)).encode() + b" >>\nstream\n" + stream + b"\nendstream",
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]
    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += f"{number} 0 obj\n".encode() + body + b"\nendobj\n"
    xref = len(out)
    out += f"xref\n0 {len(objects) + 1}\n0000000000 65535 f \n".encode()
    for offset in offsets:
        out += f"{offset:010d} 00000 n \n".encode()
    out += f"trailer\n<< /Size {len(objects) + 1} /Root 1 0 R >>\nstartxref\n{xref}\n%%EOF\n".encode()
    return bytes(out)


class TestPlainText:
    def test_whitespace_is_collapsed(self):
        text = extract_text(b"Jane   Doe\n\n\n\nPython\tdeveloper  ", MIME_TXT, "cv.txt")
        assert text == "Jane Doe\n\nPython developer"

    def test_mime_parameters_are_ignored(self):
        assert extract_text("Résumé".encode("utf-8"), "text/plain; charset=utf-8") == "Résumé"

    def test_bom_is_stripped(self):
        assert extract_text(b"\xef\xbb\xbfJane Doe", MIME_TXT) == "Jane Doe"

    def test_whitespace_only_is_an_error(self):
        with pytest.raises(ExtractionError):
            extract_text(b" \n\t \n", MIME_TXT, "blank.txt")

    def test_invalid_utf8_is_an_error(self):
        with pytest.raises(ExtractionError) as exc_info:
            extract_text(b"\xff\xfe\xfa", MIME_TXT, "bad.txt")
        assert exc_info.value.filename == "bad.txt"


class TestPdf:
    def test_text_layer_is_extracted(self):
        text = extract_text(_pdf_bytes("Jane Doe", "Skills: Python, SQL"), MIME_PDF, "cv.pdf")
        assert "Jane Doe" in text
        assert "Skills: Python, SQL" in text

    def test_zero_length_pdf(self):
        with pytest.raises(ExtractionError) as exc_info:
            extract_text(b"", MIME_PDF, "empty.pdf")
        assert "empty.pdf" in str(exc_info.value)

    def test_corrupt_pdf(self):
        with pytest.raises(ExtractionError):
            extract_text(b"this is not a pdf", MIME_PDF, "corrupt.pdf")


class TestWordDocuments:
    def test_docx_paragraphs_and_tables(self):
        text = extract_text(_docx_bytes(), MIME_DOCX, "cv.docx")
        assert text.startswith("Jane Doe")
        assert "Skills: Python, SQL" in text
        assert "Python | 5 years" in text

    def test_doc_with_docx_container_is_read(self):
        text = extract_text(_docx_bytes(), MIME_DOC, "cv.doc")
        assert "Jane Doe" in text

    def test_legacy_doc_binary_is_rejected(self):
        with pytest.raises(ExtractionError) as exc_info:
            extract_text(b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1" + b"\x00" * 64, MIME_DOC, "old.doc")
        assert "convert to .docx or PDF" in str(exc_info.value)

    def test_corrupt_docx(self):
        with pytest.raises(ExtractionError):
            extract_text(b"PK\x03\x04 broken", MIME_DOCX, "broken.docx")


class TestUnsupported:
    @pytest.mark.parametrize("mime", ["image/png", "application/zip", "", None])
    def test_unsupported_mime_type(self, mime):
        with pytest.raises(ExtractionError) as exc_info:
            extract_text(b"data", mime, "file.bin")
        assert exc_info.value.filename == "file.bin"
