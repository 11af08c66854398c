"""
Recommendation engine: turns failed or weak feedback items into a short,
prioritized list of actions.

Categories are walked in breakdown order and, inside a category, in the order
the scorer emitted its feedback. A non-success item whose tag has a template
produces a recommendation. Categories at full marks contribute nothing.
"""

from dataclasses import dataclass
from typing import Dict, List, Mapping, Tuple

from resume_scorer.core.schemas import CategoryName, CategoryScore, Impact, Recommendation

MAX_RECOMMENDATIONS = 5
LONG_CV_WORDS = 800


@dataclass(frozen=True)
class Template:
    tag: str
    title: str
    description: str
    impact: Impact


CONTACT_DETAILS = (
    "Add Contact Details",
    "Make sure your email address and phone number are written out in plain text near the top of your CV.",
)

RULES: Dict[str, Tuple[Template, ...]] = {
    "structure": (
        Template(
            "contact_section",
            "Add Complete Contact Information",
            "Include your email, phone number, location, and professional links (LinkedIn, GitHub) at the top of your CV.",
            "high",
        ),
        Template(
            "experience_section",
            "Add Work Experience Section",
            "Include your professional experience with job titles, companies, dates, and key achievements.",
            "high",
        ),
        Template(
            "education_section",
            "Add Education Section",
            "Include your degrees, institutions, graduation dates, and relevant coursework or honors.",
            "high",
        ),
        Template(
            "skills_section",
            "Add Skills Section",
            "Create a dedicated section listing your technical skills, tools, and technologies.",
            "high",
        ),
        Template(
            "summary",
            "Add a Professional Summary",
            "Include 2-3 sentences at the top highlighting your key strengths, experience, and career goals.",
            "high",
        ),
    ),
    "technicalSkills": (
        Template(
            "skill_count",
            "Add More Technical Skills",
            "List 10+ relevant technical skills, programming languages, frameworks, and tools you are proficient in.",
            "high",
        ),
    ),
    "workExperience": (
        Template(
            "bullets",
            "Use Bullet Points in Experience",
            "Format all job descriptions as bullet lists (not paragraphs) for better readability and ATS compatibility.",
            "high",
        ),
        Template(
            "action_verbs",
            "Start Bullets with Action Verbs",
            'Begin each bullet point with a strong action verb (e.g., "Developed", "Managed", "Implemented") '
            "to showcase your contributions.",
            "high",
        ),
        Template(
            "quantification",
            "Quantify Your Achievements",
            'Add numbers, percentages, or metrics to show the impact of your work (e.g., "Increased sales by 25%", '
            '"Managed team of 5").',
            "high",
        ),
    ),
    "education": (
        Template(
            "degree",
            "Add Degree Details",
            "State the degree or certification you earned, e.g. \"Bachelor of Science in Computer Science\".",
            "medium",
        ),
        Template(
            "graduation_year",
            "Add Graduation Dates",
            "Include the year you graduated or expect to graduate for each entry.",
            "low",
        ),
    ),
    "formatting": (
        # word_count is resolved by _length_template
        Template("word_count", "", "", "medium"),
        Template("email", *CONTACT_DETAILS, "medium"),
        Template("phone", *CONTACT_DETAILS, "medium"),
        Template(
            "linkedin",
            "Add LinkedIn Profile",
            "Include your LinkedIn URL in the contact section to make it easy for recruiters to find you.",
            "medium",
        ),
        Template(
            "github",
            "Add GitHub Profile",
            "For technical roles, include your GitHub URL to showcase your code and projects.",
            "medium",
        ),
        Template(
            "page_count",
            "Condense to Two Pages",
            "Recruiters skim; keep your CV to 1-2 pages by trimming older roles and repeated details.",
            "medium",
        ),
        Template(
            "organization",
            "Use Clear Section Headings",
            'Organize your CV under standard headings such as "Experience", "Education" and "Skills".',
            "medium",
        ),
    ),
}

TEMPLATES_BY_TAG: Dict[str, Dict[str, Template]] = {
    category: {t.tag: t for t in templates} for category, templates in RULES.items()
}


def _length_template(word_count: int) -> Template:
    if word_count > LONG_CV_WORDS:
        return Template(
            "word_count",
            "Reduce CV Length",
            "Aim for 1-2 pages (300-800 words). Remove outdated experience or irrelevant details.",
            "medium",
        )
    return Template(
        "word_count",
        "Expand CV Content",
        "Add more detail to your experience and skills. Aim for at least 300 words.",
        "medium",
    )


def generate_recommendations(
    breakdown: Mapping[CategoryName, CategoryScore],
    word_count: int,
    limit: int = MAX_RECOMMENDATIONS,
) -> List[Recommendation]:
    """
    Build at most `limit` recommendations with priorities 1, 2, 3, ...

    Each title appears at most once (e.g. a missing email and a missing phone
    both map to "Add Contact Details").
    """
    recommendations: List[Recommendation] = []
    seen_titles = set()

    for name, category in breakdown.items():
        if category.score >= category.max_score:
            continue
        templates = TEMPLATES_BY_TAG.get(name, {})

        for item in category.feedback:
            template = templates.get(item.tag)
            if item.passed or template is None:
                continue
            chosen = _length_template(word_count) if template.tag == "word_count" else template
            if chosen.title in seen_titles:
                continue
            seen_titles.add(chosen.title)
            recommendations.append(
                Recommendation(
                    priority=len(recommendations) + 1,
                    title=chosen.title,
                    description=chosen.description,
                    category=name,
                    impact=chosen.impact,
                )
            )
            if len(recommendations) >= limit:
                return recommendations

    return recommendations


# Broad advice for categories scoring under 60%, in breakdown order
GENERAL_SUGGESTIONS: Dict[str, Tuple[str, ...]] = {
    "structure": (
        "Add all required sections: Contact, Experience, Education, and Skills",
        "Include a professional summary at the top of your CV",
    ),
    "technicalSkills": (
        "List more relevant technical skills (programming languages, frameworks, tools)",
        'Create a dedicated "Technical Skills" or "Skills" section',
    ),
    "workExperience": (
        "Start each bullet point with a strong action verb",
        "Add specific numbers, percentages, or metrics to quantify your achievements",
        "Use bullet points to list your accomplishments (aim for 3-5 per role)",
    ),
    "education": (
        "Add a clear Education section with degree, institution, and graduation year",
    ),
    "formatting": (
        "Ensure your CV is 1-2 pages long",
        "Include contact information (email and phone number)",
        "Use clear section headings to organize your content",
    ),
}
WEAK_CATEGORY_RATIO = 0.6
STRONG_CV_SUGGESTIONS = (
    "Your CV is strong! Consider tailoring it to specific job descriptions",
    "Keep your CV updated as you gain new skills and experiences",
)


def generate_suggestions(
    breakdown: Mapping[CategoryName, CategoryScore],
    limit: int = MAX_RECOMMENDATIONS,
) -> List[str]:
    """General advice for weak categories, or encouragement when none are weak."""
    suggestions: List[str] = []
    for name, category in breakdown.items():
        if category.score < category.max_score * WEAK_CATEGORY_RATIO:
            suggestions.extend(GENERAL_SUGGESTIONS.get(name, ()))

    if not suggestions:
        return list(STRONG_CV_SUGGESTIONS)
    return suggestions[:limit]
