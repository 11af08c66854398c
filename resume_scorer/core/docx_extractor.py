from io import BytesIO

from docx import Document

from resume_scorer.core.errors import ExtractionError


def extract_docx_text(docx_bytes: bytes) -> str:
    """
    Deterministically extract paragraph and table text from a DOCX.
    Paragraphs are joined with newlines; table cells on one row are joined with ' | '.
    """
    try:
        doc = Document(BytesIO(docx_bytes))
    except Exception as exc:
        raise ExtractionError(
            "Failed to extract text from DOCX. The file may be corrupted.",
            code="DOCX_EXTRACTION_FAILED",
        ) from exc

    out = [(p.text or "").strip() for p in doc.paragraphs]

    # Skills and contact blocks are often laid out in tables
    for table in doc.tables:
        for row in table.rows:
            cells = [(c.text or "").strip() for c in row.cells]
            row_text = " | ".join(c for c in cells if c)
            if row_text:
                out.append(row_text)

    return "\n".join(out)
