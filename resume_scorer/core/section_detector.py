"""
Section detection: partition normalized résumé text into named sections.

A section starts at a line that is exactly one of the known header phrases
(e.g. "Work Experience", "SKILLS:") and runs until the next header line or
the end of the document. Text before the first header is not sectioned.
"""

import logging
from typing import List, Optional

from resume_scorer.core.patterns import SECTION_PATTERNS
from resume_scorer.core.schemas import DetectedSection

logger = logging.getLogger(__name__)

HEADER_CONFIDENCE = 0.9


def classify_header(line: str) -> Optional[str]:
    """Return the section name a header line introduces, or None. First match wins."""
    t = line.strip()
    if not t:
        return None
    for name, pattern in SECTION_PATTERNS:
        if pattern.match(t):
            return name
    return None


def detect_sections(text: str) -> List[DetectedSection]:
    sections: List[DetectedSection] = []

    current_name: Optional[str] = None
    current_lines: List[str] = []
    start_line = end_line = 0

    def close() -> None:
        if current_name is None:
            return
        sections.append(
            DetectedSection(
                name=current_name,
                content="\n".join(current_lines),
                start_line=start_line,
                end_line=end_line,
                confidence=HEADER_CONFIDENCE,
            )
        )

    for idx, line in enumerate(text.split("\n")):
        name = classify_header(line)
        if name:
            logger.debug(f"SECTION HEADER DETECTED at line {idx}: '{line.strip()}' -> section='{name}'")
            close()
            current_name = name
            current_lines = []
            start_line = idx

        if current_name is not None:
            current_lines.append(line)
            end_line = idx

    close()

    logger.debug(f"Detected {len(sections)} sections: {[s.name for s in sections]}")
    return sections


def has_section(sections: List[DetectedSection], name: str) -> bool:
    return any(s.name == name for s in sections)


def get_section_content(sections: List[DetectedSection], name: str) -> Optional[str]:
    """Content of the first section with this name, or None."""
    for s in sections:
        if s.name == name:
            return s.content
    return None
