from io import BytesIO
from typing import Any, Dict, List

import pdfplumber

from resume_scorer.core.errors import ExtractionError


def _words_to_lines(page: Any, *, x_tolerance: float = 2, y_tolerance: float = 2, line_y_tolerance: float = 3) -> List[str]:
    """
    Group a page's words into lines by vertical position.

    pdfplumber's word objects carry a `top` coordinate; words whose tops are
    within `line_y_tolerance` points of each other belong to the same line.
    Words inside a line are ordered left to right and joined with single spaces.
    """
    words: List[Dict[str, Any]] = page.extract_words(
        x_tolerance=x_tolerance,
        y_tolerance=y_tolerance,
        keep_blank_chars=False,
        use_text_flow=True,
    )
    if not words:
        return []

    rows: List[List[Dict[str, Any]]] = []
    for w in sorted(words, key=lambda w: (round(w["top"]), w["x0"])):
        if rows and abs(rows[-1][0]["top"] - w["top"]) <= line_y_tolerance:
            rows[-1].append(w)
        else:
            rows.append([w])

    return [" ".join(w["text"] for w in sorted(row, key=lambda w: w["x0"])) for row in rows]


def extract_pdf_text(pdf_bytes: bytes) -> str:
    """
    Deterministically extract text from a text-layer PDF.

    Pages are separated by a blank line. Scanned (image-only) PDFs yield an
    empty string; OCR is not attempted.
    """
    pages: List[str] = []
    try:
        with pdfplumber.open(BytesIO(pdf_bytes)) as pdf:
            for page in pdf.pages:
                lines = [ln.strip() for ln in _words_to_lines(page) if ln.strip()]
                if lines:
                    pages.append("\n".join(lines))
    except Exception as exc:
        raise ExtractionError(
            "Failed to extract text from PDF. Ensure it is a text-based PDF, not a scanned image.",
            code="PDF_EXTRACTION_FAILED",
        ) from exc

    return "\n\n".join(pages)
