import logging
import re
import time
from datetime import datetime, timezone

from fastapi import APIRouter, File, HTTPException, UploadFile

from resume_scorer.core.errors import ExtractionError
from resume_scorer.core.extraction import UploadRejected, extract_document
from resume_scorer.core.schemas import FileInfo, ScoreResponse
from resume_scorer.core.scoring import calculate_score

logger = logging.getLogger(__name__)

router = APIRouter(tags=["score"])

UNSAFE_NAME_CHARS_RE = re.compile(r"[^\w\s.-]")


@router.post(
    "/score",
    response_model=ScoreResponse,
    summary="Score Resume",
    description="Score a resume file (PDF, DOCX or TXT) against the 100-point rubric. Returns the total score, per-category breakdown with feedback, a grade and up to five prioritized recommendations.",
    responses={
        200: {
            "description": "Successfully scored resume",
            "content": {
                "application/json": {
                    "example": {
                        "success": True,
                        "result": {
                            "total_score": 78,
                            "max_score": 100,
                            "grade": "Good",
                            "message": "Good job! Your CV is solid but has room for improvement to stand out more.",
                            "breakdown": {
                                "structure": {
                                    "category": "structure",
                                    "score": 12,
                                    "max_score": 15,
                                    "feedback": [
                                        {
                                            "type": "success",
                                            "message": "Contact section found",
                                            "tag": "contact_section",
                                            "icon": "✅",
                                            "passed": True,
                                        }
                                    ],
                                }
                            },
                            "recommendations": [
                                {
                                    "priority": 1,
                                    "title": "Add a Professional Summary",
                                    "description": "Include 2-3 sentences at the top highlighting your key strengths, experience, and career goals.",
                                    "category": "structure",
                                    "impact": "high",
                                }
                            ],
                        },
                        "file": {
                            "file_name": "resume.pdf",
                            "file_size": 48213,
                            "file_type": "pdf",
                            "processed_at": "2025-01-01T12:00:00+00:00",
                            "processing_time_ms": 42.0,
                        },
                    }
                }
            }
        },
        400: {"description": "Empty file, invalid file name, or file too large"},
        415: {"description": "Unsupported file format"},
        422: {"description": "No usable text could be extracted from the file"}
    }
)
async def score_resume(
    file: UploadFile = File(..., description="Resume file (PDF, DOCX, or TXT format)")
):
    """
    Score a resume file.

    **Supported formats:**
    - PDF (.pdf) - Text-layer extraction only, OCR not supported
    - DOCX (.docx)
    - TXT (.txt, .md)

    **Returns:**
    - **result.total_score**: 0-100, the sum of the five category scores
    - **result.breakdown**: score, max score and feedback per category
    - **result.recommendations**: up to five actions, highest priority first
    - **result.suggestions**: general advice for weak categories
    - **file**: upload details and processing time
    """
    started = time.perf_counter()
    raw = await file.read()
    filename = file.filename or ""
    content_type = file.content_type or ""

    try:
        document = extract_document(raw, filename, content_type)
        result = calculate_score(document)
    except UploadRejected as exc:
        logger.warning(f"Upload rejected ({exc.code}): '{filename}' - {exc.message}")
        raise HTTPException(status_code=exc.status_code, detail={"error": exc.message, "code": exc.code})
    except ExtractionError as exc:
        logger.warning(f"Extraction failed ({exc.code}): '{filename}' - {exc.message}")
        raise HTTPException(status_code=422, detail={"error": exc.message, "code": exc.code})

    elapsed_ms = round((time.perf_counter() - started) * 1000, 2)
    logger.info(f"Scored '{filename}': {result.total_score}/100 ({result.grade}) in {elapsed_ms}ms")

    return ScoreResponse(
        result=result,
        file=FileInfo(
            file_name=UNSAFE_NAME_CHARS_RE.sub("", filename),
            file_size=len(raw),
            file_type=document.file_type,
            processed_at=datetime.now(timezone.utc).isoformat(),
            processing_time_ms=elapsed_ms,
        ),
    )
