"""
Signal extractors: independent, pure functions over text.

Each one can be applied to a whole document or to a single section's
content. None of them depend on section detection.
"""

from typing import List, Pattern, Tuple

from resume_scorer.core.patterns import (
    BULLET_RE,
    CITY_STATE_RE,
    EMAIL_RE,
    LOCATION_KEYWORD_RE,
    PHONE_RE,
    QUANTIFICATION_PATTERNS,
    SKILL_PATTERNS,
    SOCIAL_PATTERNS,
    VERB_PATTERNS,
    YEARS_OF_EXPERIENCE_RE,
)
from resume_scorer.core.schemas import (
    ContactInfo,
    QuantificationMatch,
    SkillMatch,
    SocialProfiles,
    VerbMatch,
    YearsOfExperience,
)

MAX_QUANTIFICATION_EXAMPLES = 10

# Contact completeness weights (sum to 100)
CONTACT_WEIGHTS = {
    "email": 25,
    "phone": 20,
    "linkedin": 25,
    "github": 15,
    "location": 15,
}


def _distinct_matches(text: str, patterns: Tuple[Tuple[str, Pattern[str]], ...]) -> List[str]:
    """Keywords with at least one occurrence in text, sorted. Repeats count once."""
    if not text:
        return []
    return sorted(kw for kw, pattern in patterns if pattern.search(text))


def count_technical_skills(text: str) -> SkillMatch:
    found = _distinct_matches(text, SKILL_PATTERNS)
    return SkillMatch(count=len(found), found=found)


def count_action_verbs(text: str) -> VerbMatch:
    found = _distinct_matches(text, VERB_PATTERNS)
    return VerbMatch(count=len(found), found=found)


def count_bullet_points(text: str) -> int:
    """Number of bullet lines (occurrences, not distinct bullets)."""
    if not text:
        return 0
    return len(BULLET_RE.findall(text))


def count_quantifications(text: str) -> QuantificationMatch:
    """
    Count quantified statements: percentages, currency amounts, timeframes
    and scale counts ("10 developers").

    Example:
        "Cut costs by $1.2M (15%) in 6 months" -> count=3, examples=['15%', '$1.2M', '6 months']
    """
    examples: List[str] = []
    if text:
        for _, pattern in QUANTIFICATION_PATTERNS:
            examples.extend(m.group(0) for m in pattern.finditer(text))
    return QuantificationMatch(count=len(examples), examples=examples[:MAX_QUANTIFICATION_EXAMPLES])


def detect_social_profiles(text: str) -> SocialProfiles:
    profiles = [label for label, pattern in SOCIAL_PATTERNS if text and pattern.search(text)]
    return SocialProfiles(
        linkedin="LinkedIn" in profiles,
        github="GitHub" in profiles,
        portfolio="Portfolio" in profiles,
        profiles=profiles,
    )


def analyze_contact_info(text: str) -> ContactInfo:
    """Check which contact channels are present and compute a weighted completeness."""
    text = text or ""
    social = detect_social_profiles(text)

    present = {
        "email": bool(EMAIL_RE.search(text)),
        "phone": bool(PHONE_RE.search(text)),
        "linkedin": social.linkedin,
        "github": social.github,
        "location": bool(LOCATION_KEYWORD_RE.search(text) or CITY_STATE_RE.search(text)),
    }
    completeness = sum(weight for key, weight in CONTACT_WEIGHTS.items() if present[key])

    return ContactInfo(
        has_email=present["email"],
        has_phone=present["phone"],
        has_linkedin=present["linkedin"],
        has_github=present["github"],
        has_location=present["location"],
        completeness=completeness,
    )


def extract_years_of_experience(text: str) -> YearsOfExperience:
    """
    Largest "N years" claim in the text. Claims overlap ("5+ years of Python",
    "3 years at Acme"), so the maximum is reported rather than the sum.
    """
    total = 0
    statements: List[str] = []
    for m in YEARS_OF_EXPERIENCE_RE.finditer(text or ""):
        total = max(total, int(m.group(1)))
        statements.append(m.group(0))
    return YearsOfExperience(total_years=total, statements=statements)
