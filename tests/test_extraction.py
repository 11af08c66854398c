"""Tests for upload validation and text extraction."""

from io import BytesIO

import pytest
from docx import Document

from resume_scorer.config import settings
from resume_scorer.core.errors import ExtractionError
from resume_scorer.core.extraction import (
    DOCX_CONTENT_TYPE,
    UploadRejected,
    detect_file_type,
    extract_document,
    validate_upload,
)
from resume_scorer.core.docx_extractor import extract_docx_text
from resume_scorer.core.pdf_extractor import extract_pdf_text

from pdf_fixture import build_pdf


def build_docx(paragraphs, table_rows=()):
    doc = Document()
    for p in paragraphs:
        doc.add_paragraph(p)
    if table_rows:
        table = doc.add_table(rows=len(table_rows), cols=len(table_rows[0]))
        for r, row in enumerate(table_rows):
            for c, value in enumerate(row):
                table.cell(r, c).text = value
    buf = BytesIO()
    doc.save(buf)
    return buf.getvalue()


class TestDetectFileType:
    def test_by_extension(self):
        assert detect_file_type("cv.PDF", "") == "pdf"
        assert detect_file_type("cv.docx", "") == "docx"
        assert detect_file_type("cv.txt", "") == "txt"
        assert detect_file_type("cv.md", "") == "txt"

    def test_by_content_type(self):
        assert detect_file_type("upload", "application/pdf") == "pdf"
        assert detect_file_type("upload", DOCX_CONTENT_TYPE) == "docx"
        assert detect_file_type("upload", "text/plain") == "txt"

    def test_unknown(self):
        assert detect_file_type("cv.exe", "application/octet-stream") is None


class TestValidateUpload:
    def test_empty_file(self):
        with pytest.raises(UploadRejected) as exc:
            validate_upload("cv.pdf", 0)
        assert exc.value.status_code == 400

    @pytest.mark.parametrize("name", ["../cv.pdf", "dir/cv.pdf", "dir\\cv.pdf"])
    def test_unsafe_names(self, name):
        with pytest.raises(UploadRejected) as exc:
            validate_upload(name, 100)
        assert exc.value.status_code == 400

    def test_too_large(self):
        with pytest.raises(UploadRejected) as exc:
            validate_upload("cv.pdf", settings.max_upload_bytes + 1)
        assert exc.value.status_code == 400
        assert f"{settings.max_upload_mb}MB" in exc.value.message

    def test_unsupported_type(self):
        with pytest.raises(UploadRejected) as exc:
            validate_upload("cv.exe", 100, "application/octet-stream")
        assert exc.value.status_code == 415
        assert exc.value.code == "UNSUPPORTED_FILE_TYPE"

    def test_accepted(self):
        assert validate_upload("cv.docx", 100) == "docx"


def test_docx_paragraphs_and_tables():
    raw = build_docx(["Jane Doe", "Skills"], table_rows=[("Python", "Docker"), ("", "AWS")])
    text = extract_docx_text(raw)
    assert [line for line in text.split("\n") if line] == ["Jane Doe", "Skills", "Python | Docker", "AWS"]


def test_corrupt_docx():
    with pytest.raises(ExtractionError) as exc:
        extract_docx_text(b"not a zip archive")
    assert exc.value.code == "DOCX_EXTRACTION_FAILED"


def test_corrupt_pdf():
    with pytest.raises(ExtractionError) as exc:
        extract_pdf_text(b"%PDF-1.4 garbage")
    assert exc.value.code == "PDF_EXTRACTION_FAILED"


def test_pdf_text_layer_lines():
    raw = build_pdf(["Jane Doe", "Skills", "Python, Docker (AWS)"])
    assert extract_pdf_text(raw) == "Jane Doe\nSkills\nPython, Docker (AWS)"


def test_pdf_without_text_is_empty():
    assert extract_pdf_text(build_pdf([])) == ""


def test_extract_document_normalizes_text():
    doc = extract_document(b"Jane   Doe\r\n\r\n\r\n\r\nSkills:\tPython", "cv.txt", "text/plain")
    assert doc.text == "Jane Doe\n\nSkills: Python"
    assert doc.word_count == 4
    assert doc.file_type == "txt"
    assert doc.sections is None
