"""
Text normalization for text extracted from PDF/DOCX résumés.

Produces the canonical form every downstream analyzer works on:
- '\\n' line endings only
- no ASCII control characters
- single spaces inside lines, no leading/trailing spaces on a line
- at most one blank line between paragraphs
"""

import math
import re

from resume_scorer.config import settings


# Minimum length of normalized text; anything shorter means extraction failed.
MIN_TEXT_LENGTH = settings.min_text_length

LINE_BREAK_RE = re.compile(r"\r\n?")
# Everything in 0x00-0x1F except '\n' (0x0A), plus DEL
CONTROL_CHARS_RE = re.compile(r"[\x00-\x09\x0b-\x1f\x7f]")
INLINE_WHITESPACE_RE = re.compile(r"[^\S\n]+")
EXCESS_BLANK_LINES_RE = re.compile(r"\n{3,}")


def normalize_text(text: str) -> str:
    """
    Convert raw extracted text into canonical form.

    Examples:
        "Hello    world\\r\\n\\r\\n\\r\\n\\r\\nHow  are you?" -> "Hello world\\n\\nHow are you?"
        "  \\t Skills\\x00 \\n"                            -> "Skills"
        ""                                               -> ""
    """
    if not text:
        return ""

    t = LINE_BREAK_RE.sub("\n", text)
    # Tabs separate words; turn them into spaces before control chars are dropped
    t = t.replace("\t", " ")
    t = CONTROL_CHARS_RE.sub("", t)

    lines = [INLINE_WHITESPACE_RE.sub(" ", line).strip() for line in t.split("\n")]
    t = "\n".join(lines)

    t = EXCESS_BLANK_LINES_RE.sub("\n\n", t)
    return t.strip()


def count_words(text: str) -> int:
    return len(text.split())


def count_lines(text: str) -> int:
    """Number of non-blank lines."""
    return sum(1 for line in text.split("\n") if line.strip())


def estimate_pages(word_count: int, words_per_page: int = settings.words_per_page) -> int:
    """Rough page estimate: one page per `words_per_page` words, never less than one."""
    return max(1, math.ceil(word_count / words_per_page))


def is_sufficient(text: str, minimum: int = MIN_TEXT_LENGTH) -> bool:
    return len(text) >= minimum
