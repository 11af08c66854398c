"""Exceptions raised by the extraction collaborators and the scoring pipeline."""


class ScorerError(Exception):
    """Base class for all résumé scorer errors."""


class ExtractionError(ScorerError):
    """Text could not be obtained from an uploaded file."""

    def __init__(self, message: str, code: str = "EXTRACTION_FAILED"):
        super().__init__(message)
        self.message = message
        self.code = code


class InsufficientTextError(ExtractionError):
    """Normalized text is too short to be scored meaningfully."""

    def __init__(self, length: int, minimum: int):
        super().__init__(
            f"Extracted text is too short ({length} characters, minimum {minimum}). "
            "The CV may be empty or a scanned image.",
            code="INSUFFICIENT_TEXT",
        )
        self.length = length
        self.minimum = minimum
