"""
Rule engine that turns detected sections and extracted signals into the
100-point score.

Five categories, each scored by an independent function:

    structure        15   required sections + summary bonus
    technicalSkills  20   distinct skill keywords
    workExperience   30   action verbs, bullets, quantified achievements
    education        15   section, degree, graduation year
    formatting       20   length, contact channels, page estimate, organization

Every rule adds a fixed number of points (possibly 0) and appends exactly one
feedback item. A category's score is clamped to [0, max_score].
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from resume_scorer.config import settings
from resume_scorer.core.errors import InsufficientTextError
from resume_scorer.core.patterns import DEGREE_PATTERNS, YEAR_RE
from resume_scorer.core.recommendations import generate_recommendations, generate_suggestions
from resume_scorer.core.schemas import (
    CategoryName,
    CategoryScore,
    DetectedSection,
    FeedbackItem,
    FeedbackType,
    ParsedDocument,
    ResultMetadata,
    ScoreResult,
)
from resume_scorer.core.section_detector import detect_sections, get_section_content, has_section
from resume_scorer.core.signals import (
    analyze_contact_info,
    count_action_verbs,
    count_bullet_points,
    count_quantifications,
    count_technical_skills,
    detect_social_profiles,
    extract_years_of_experience,
)
from resume_scorer.core.text_normalization import (
    MIN_TEXT_LENGTH,
    count_lines,
    count_words,
    estimate_pages,
    is_sufficient,
    normalize_text,
)

logger = logging.getLogger(__name__)

SCORING_WEIGHTS: Dict[str, int] = {
    "structure": 15,
    "technicalSkills": 20,
    "workExperience": 30,
    "education": 15,
    "formatting": 20,
}
TOTAL_MAX_SCORE = 100

REQUIRED_SECTIONS = ("contact", "experience", "education", "skills")
REQUIRED_SECTION_POINTS = 3
SUMMARY_BONUS = 3

# (lower bound inclusive, grade, message), highest band first
GRADE_BANDS: Tuple[Tuple[int, str, str], ...] = (
    (90, "Excellent",
     "Outstanding! Your CV is extremely well-crafted and should perform excellently with ATS systems and recruiters."),
    (80, "Very Good",
     "Great work! Your CV is strong with minor areas for refinement."),
    (70, "Good",
     "Good job! Your CV is solid but has room for improvement to stand out more."),
    (60, "Satisfactory",
     "Your CV covers the basics but needs significant improvements to be competitive."),
    (50, "Needs Improvement",
     "Your CV requires substantial work in multiple areas. Focus on the recommendations below."),
    (0, "Poor",
     "Your CV needs major improvements across most categories. Please review all recommendations carefully."),
)


@dataclass(frozen=True)
class ScoringContext:
    """Everything a category scorer may look at for one document."""
    text: str
    sections: Tuple[DetectedSection, ...]
    word_count: int
    estimated_pages: int


class _Rules:
    """Accumulates points and feedback for one category."""

    def __init__(self, category: CategoryName):
        self.category = category
        self.max_score = SCORING_WEIGHTS[category]
        self.score = 0
        self.feedback: List[FeedbackItem] = []

    def add(self, points: int, type_: FeedbackType, message: str, tag: str) -> None:
        self.score += points
        self.feedback.append(FeedbackItem(type=type_, message=message, tag=tag))

    def result(self) -> CategoryScore:
        return CategoryScore(
            category=self.category,
            score=max(0, min(self.score, self.max_score)),
            max_score=self.max_score,
            feedback=self.feedback,
        )


# ============================================================================
# Category scorers
# ============================================================================

def score_structure(ctx: ScoringContext) -> CategoryScore:
    rules = _Rules("structure")
    sections = list(ctx.sections)

    for name in REQUIRED_SECTIONS:
        if has_section(sections, name):
            rules.add(REQUIRED_SECTION_POINTS, "success", f"{name.capitalize()} section found", f"{name}_section")
        else:
            rules.add(0, "error", f"Missing {name} section", f"{name}_section")

    if has_section(sections, "summary"):
        rules.add(SUMMARY_BONUS, "success", "Professional summary included", "summary")
    else:
        rules.add(0, "warning", "Consider adding a professional summary", "summary")

    return rules.result()


def score_technical_skills(ctx: ScoringContext) -> CategoryScore:
    rules = _Rules("technicalSkills")
    sections = list(ctx.sections)

    skills_content = get_section_content(sections, "skills") or ctx.text
    count = count_technical_skills(skills_content).count

    if count >= 15:
        rules.add(20, "success", f"Excellent! {count} technical skills identified", "skill_count")
    elif count >= 10:
        rules.add(16, "success", f"Good! {count} technical skills found", "skill_count")
    elif count >= 5:
        rules.add(12, "warning", f"{count} technical skills found - consider adding more", "skill_count")
    elif count >= 3:
        rules.add(8, "warning", f"Only {count} technical skills found - add more relevant skills", "skill_count")
    else:
        rules.add(0, "error", "Very few technical skills identified", "skill_count")

    if has_section(sections, "skills"):
        rules.add(0, "success", "Dedicated skills section found", "skills_section")
    else:
        rules.add(0, "warning", "No dedicated skills section found", "skills_section")

    return rules.result()


def score_work_experience(ctx: ScoringContext) -> CategoryScore:
    rules = _Rules("workExperience")

    content = get_section_content(list(ctx.sections), "experience")
    if content is None:
        # No partial credit without an experience section
        rules.add(0, "error", "No work experience section found", "experience_section")
        return rules.result()

    verbs = count_action_verbs(content).count
    if verbs >= 8:
        rules.add(10, "success", f"Excellent use of action verbs ({verbs} found)", "action_verbs")
    elif verbs >= 5:
        rules.add(7, "success", f"Good use of action verbs ({verbs} found)", "action_verbs")
    elif verbs >= 3:
        rules.add(4, "warning", f"Use more action verbs in experience descriptions ({verbs} found)", "action_verbs")
    else:
        rules.add(0, "error", "Very few action verbs - start bullets with strong action words", "action_verbs")

    bullets = count_bullet_points(content)
    if bullets >= 6:
        rules.add(10, "success", f"Well-structured with {bullets} bullet points", "bullets")
    elif bullets >= 3:
        rules.add(7, "success", f"{bullets} bullet points found", "bullets")
    else:
        rules.add(3, "warning", "Add more bullet points to describe achievements", "bullets")

    quant = count_quantifications(content)
    if quant.count >= 5:
        rules.add(
            10, "success",
            f"Excellent! {quant.count} quantified achievements (e.g., {quant.examples[0]})",
            "quantification",
        )
    elif quant.count >= 3:
        rules.add(7, "success", f"Good! {quant.count} quantified achievements found", "quantification")
    elif quant.count >= 1:
        rules.add(4, "warning", "Add more metrics and numbers to quantify your impact", "quantification")
    else:
        rules.add(0, "error", "No quantified achievements - add numbers, percentages, or metrics", "quantification")

    return rules.result()


def score_education(ctx: ScoringContext) -> CategoryScore:
    rules = _Rules("education")

    content = get_section_content(list(ctx.sections), "education")
    if content is None:
        rules.add(0, "error", "Education section missing", "education_section")
        return rules.result()

    rules.add(10, "success", "Education section found", "education_section")

    if any(pattern.search(content) for _, pattern in DEGREE_PATTERNS):
        rules.add(3, "success", "Degree information included", "degree")
    else:
        rules.add(0, "warning", "Include degree or certification details", "degree")

    if YEAR_RE.search(content):
        rules.add(2, "success", "Graduation dates included", "graduation_year")
    else:
        rules.add(0, "warning", "Add graduation dates", "graduation_year")

    return rules.result()


def score_formatting(ctx: ScoringContext) -> CategoryScore:
    rules = _Rules("formatting")
    words = ctx.word_count

    # Bands overlap; the first matching one wins
    if 300 <= words <= 800:
        rules.add(4, "success", f"Good length: {words} words", "word_count")
    elif 200 <= words <= 1000:
        rules.add(2, "warning", f"{words} words - aim for 300-800 for optimal length", "word_count")
    elif words < 200:
        rules.add(1, "error", f"Too short ({words} words) - add more detail", "word_count")
    else:
        rules.add(1, "warning", f"Long CV ({words} words) - consider condensing", "word_count")

    contact = analyze_contact_info(ctx.text)
    if contact.has_email:
        rules.add(2, "success", "Email address found", "email")
    else:
        rules.add(0, "error", "Add email address", "email")

    if contact.has_phone:
        rules.add(1, "success", "Phone number included", "phone")
    else:
        rules.add(0, "warning", "Add a phone number", "phone")

    if contact.has_linkedin:
        rules.add(3, "success", "LinkedIn profile included - excellent for networking!", "linkedin")
    else:
        rules.add(0, "warning", "Add LinkedIn profile to boost visibility", "linkedin")

    if contact.has_github:
        rules.add(2, "success", "GitHub profile included - great for tech roles!", "github")
    else:
        rules.add(0, "warning", "Add GitHub profile to showcase your work", "github")

    pages = ctx.estimated_pages
    if pages <= 2:
        rules.add(4, "success", f"Concise length (~{pages} page{'s' if pages > 1 else ''})", "page_count")
    elif pages == 3:
        rules.add(2, "warning", f"Consider condensing to 2 pages (currently ~{pages} pages)", "page_count")
    else:
        rules.add(1, "warning", f"Too long (~{pages} pages) - aim for 1-2 pages", "page_count")

    section_count = len({s.name for s in ctx.sections})
    if section_count >= 3:
        rules.add(4, "success", f"Well-organized with {section_count} distinct sections", "organization")
    else:
        rules.add(2, "warning", "Use clear section headings to organize content", "organization")

    return rules.result()


# Fixed evaluation order; also the order of ScoreResult.breakdown
CATEGORY_SCORERS: Tuple[Tuple[CategoryName, Callable[[ScoringContext], CategoryScore]], ...] = (
    ("structure", score_structure),
    ("technicalSkills", score_technical_skills),
    ("workExperience", score_work_experience),
    ("education", score_education),
    ("formatting", score_formatting),
)


# ============================================================================
# Aggregation
# ============================================================================

def get_grade(score: int) -> Tuple[str, str]:
    """(grade, message) for a total score. Bands partition 0-100."""
    for lower, grade, message in GRADE_BANDS:
        if score >= lower:
            return grade, message
    return GRADE_BANDS[-1][1], GRADE_BANDS[-1][2]


def build_context(document: ParsedDocument, min_length: Optional[int] = None) -> ScoringContext:
    """Normalize the document and resolve sections and counts. Raises InsufficientTextError."""
    minimum = MIN_TEXT_LENGTH if min_length is None else min_length
    text = normalize_text(document.text)
    if not is_sufficient(text, minimum):
        raise InsufficientTextError(len(text), minimum)

    sections = document.sections if document.sections is not None else detect_sections(text)
    word_count = document.word_count if document.word_count is not None else count_words(text)

    return ScoringContext(
        text=text,
        sections=tuple(sections),
        word_count=word_count,
        estimated_pages=estimate_pages(word_count),
    )


def calculate_score(document: ParsedDocument) -> ScoreResult:
    """
    Score a parsed résumé.

    `document.sections` may be supplied by the caller; when it is None the
    sections are detected from the normalized text. Raises
    InsufficientTextError when the text is too short to score.
    """
    ctx = build_context(document)

    breakdown: Dict[CategoryName, CategoryScore] = {}
    for name, scorer in CATEGORY_SCORERS:
        breakdown[name] = scorer(ctx)
        logger.debug(f"Category '{name}': {breakdown[name].score}/{breakdown[name].max_score}")

    total = sum(c.score for c in breakdown.values())
    grade, message = get_grade(total)
    recommendations = generate_recommendations(breakdown, ctx.word_count)

    social = detect_social_profiles(ctx.text)
    metadata = ResultMetadata(
        word_count=ctx.word_count,
        line_count=count_lines(ctx.text),
        estimated_pages=ctx.estimated_pages,
        sections_detected=[s.name for s in ctx.sections],
        years_of_experience=extract_years_of_experience(ctx.text).total_years,
        contact_completeness=analyze_contact_info(ctx.text).completeness,
        social_profiles=social.profiles,
        skills_found=count_technical_skills(ctx.text).found,
        version=settings.app_version,
    )

    logger.debug(f"Total score {total}/{TOTAL_MAX_SCORE} ({grade}), {len(recommendations)} recommendations")

    return ScoreResult(
        total_score=total,
        max_score=TOTAL_MAX_SCORE,
        breakdown=breakdown,
        recommendations=recommendations,
        suggestions=generate_suggestions(breakdown),
        grade=grade,
        message=message,
        metadata=metadata,
    )
