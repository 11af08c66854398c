"""Tests for the recommendation engine."""

from resume_scorer.core.recommendations import (
    MAX_RECOMMENDATIONS,
    generate_recommendations,
    generate_suggestions,
)
from resume_scorer.core.schemas import CategoryScore, FeedbackItem, ParsedDocument
from resume_scorer.core.scoring import SCORING_WEIGHTS, calculate_score

from sample_resumes import WEAK_RESUME


def category(name, score, *items):
    return CategoryScore(
        category=name,
        score=score,
        max_score=SCORING_WEIGHTS[name],
        feedback=[FeedbackItem(type=t, message=m, tag=tag) for t, m, tag in items],
    )


def full_marks(*skip):
    return {
        name: category(name, weight)
        for name, weight in SCORING_WEIGHTS.items()
        if name not in skip
    }


def test_perfect_breakdown_yields_nothing():
    assert generate_recommendations(full_marks(), word_count=500) == []


def test_structure_recommendations_follow_feedback_order():
    breakdown = full_marks()
    breakdown["structure"] = category(
        "structure", 6,
        ("error", "Missing contact section", "contact_section"),
        ("success", "Experience section found", "experience_section"),
        ("success", "Education section found", "education_section"),
        ("error", "Missing skills section", "skills_section"),
        ("warning", "Consider adding a professional summary", "summary"),
    )
    recs = generate_recommendations(breakdown, word_count=500)
    assert [r.title for r in recs] == [
        "Add Complete Contact Information",
        "Add Skills Section",
        "Add a Professional Summary",
    ]
    assert [r.priority for r in recs] == [1, 2, 3]
    assert all(r.category == "structure" and r.impact == "high" for r in recs)


def test_summary_is_last_structure_recommendation():
    recs = calculate_score(ParsedDocument(text=WEAK_RESUME)).recommendations
    assert [r.title for r in recs] == [
        "Add Complete Contact Information",
        "Add Work Experience Section",
        "Add Education Section",
        "Add Skills Section",
        "Add a Professional Summary",
    ]


def test_category_at_full_marks_is_skipped():
    """An informational warning in a full-score category produces no recommendation."""
    breakdown = full_marks()
    breakdown["technicalSkills"] = category(
        "technicalSkills", 20,
        ("success", "Excellent! 16 technical skills identified", "skill_count"),
        ("warning", "No dedicated skills section found", "skills_section"),
    )
    assert generate_recommendations(breakdown, word_count=500) == []


def test_matching_uses_tags_not_message_text():
    breakdown = full_marks()
    breakdown["workExperience"] = category(
        "workExperience", 17,
        ("error", "Very few action verbs - start bullets with strong action words", "action_verbs"),
        ("success", "7 bullet points found", "bullets"),
        ("success", "Good! 3 quantified achievements found", "quantification"),
    )
    titles = [r.title for r in generate_recommendations(breakdown, word_count=500)]
    assert titles == ["Start Bullets with Action Verbs"]


def test_contact_details_deduplicated():
    breakdown = full_marks()
    breakdown["formatting"] = category(
        "formatting", 14,
        ("success", "Good length: 500 words", "word_count"),
        ("error", "Add email address", "email"),
        ("warning", "Add a phone number", "phone"),
    )
    titles = [r.title for r in generate_recommendations(breakdown, word_count=500)]
    assert titles == ["Add Contact Details"]


def test_length_recommendation_depends_on_word_count():
    breakdown = full_marks()
    breakdown["formatting"] = category(
        "formatting", 16,
        ("warning", "Long CV (1200 words) - consider condensing", "word_count"),
    )
    assert generate_recommendations(breakdown, word_count=1200)[0].title == "Reduce CV Length"
    assert generate_recommendations(breakdown, word_count=150)[0].title == "Expand CV Content"


def test_capped_with_ascending_priorities():
    breakdown = {
        "structure": category(
            "structure", 0,
            ("error", "Missing contact section", "contact_section"),
            ("error", "Missing experience section", "experience_section"),
            ("error", "Missing education section", "education_section"),
            ("error", "Missing skills section", "skills_section"),
            ("warning", "Consider adding a professional summary", "summary"),
        ),
        "technicalSkills": category(
            "technicalSkills", 0,
            ("error", "Very few technical skills identified", "skill_count"),
        ),
        "workExperience": category(
            "workExperience", 0,
            ("error", "No work experience section found", "experience_section"),
        ),
        "education": category("education", 0, ("error", "Education section missing", "education_section")),
        "formatting": category("formatting", 7, ("error", "Add email address", "email")),
    }
    recs = generate_recommendations(breakdown, word_count=50)
    assert len(recs) == MAX_RECOMMENDATIONS
    assert [r.priority for r in recs] == [1, 2, 3, 4, 5]
    assert len({r.title for r in recs}) == len(recs)


def test_custom_limit():
    breakdown = full_marks()
    breakdown["education"] = category(
        "education", 10,
        ("warning", "Include degree or certification details", "degree"),
        ("warning", "Add graduation dates", "graduation_year"),
    )
    recs = generate_recommendations(breakdown, word_count=500, limit=1)
    assert [r.title for r in recs] == ["Add Degree Details"]
    assert recs[0].impact == "medium"


def test_suggestions_only_for_weak_categories():
    breakdown = full_marks()
    breakdown["education"] = category("education", 8)
    assert generate_suggestions(breakdown) == [
        "Add a clear Education section with degree, institution, and graduation year",
    ]


def test_suggestions_capped():
    breakdown = {name: category(name, 0) for name in SCORING_WEIGHTS}
    assert len(generate_suggestions(breakdown)) == MAX_RECOMMENDATIONS
