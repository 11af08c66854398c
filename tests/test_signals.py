"""
Tests for the signal extractors.

Each extractor is a pure function over text, so these run on short snippets
rather than whole résumés.
"""

from resume_scorer.core.signals import (
    analyze_contact_info,
    count_action_verbs,
    count_bullet_points,
    count_quantifications,
    count_technical_skills,
    detect_social_profiles,
    extract_years_of_experience,
)


class TestTechnicalSkills:
    def test_repeats_count_once(self):
        result = count_technical_skills("JavaScript JavaScript JavaScript")
        assert result.count == 1
        assert result.found == ["javascript"]

    def test_case_insensitive(self):
        assert count_technical_skills("PYTHON Python python").count == 1

    def test_whole_words_only(self):
        """'java' must not be found inside 'JavaScript'."""
        result = count_technical_skills("JavaScript")
        assert "java" not in result.found

    def test_symbol_keywords(self):
        result = count_technical_skills("C++ and C# on CI/CD pipelines")
        assert "c++" in result.found
        assert "c#" in result.found
        assert "ci/cd" in result.found

    def test_multi_word_keywords(self):
        result = count_technical_skills("Shipped apps with React Native and Spring Boot")
        assert "react native" in result.found
        assert "spring boot" in result.found

    def test_fifteen_distinct_skills(self):
        text = (
            "JavaScript, TypeScript, React, Node.js, Python, Django, PostgreSQL, MongoDB, "
            "Docker, Kubernetes, AWS, Git, Jest, Webpack, Tailwind CSS"
        )
        assert count_technical_skills(text).count >= 15

    def test_everyday_words_are_not_skills(self):
        text = "I like to go home and shell out; spring is here. R. Smith made a sketch in a notion"
        assert count_technical_skills(text).count == 0

    def test_empty(self):
        result = count_technical_skills("")
        assert result.count == 0
        assert result.found == []


class TestActionVerbs:
    def test_distinct_verbs(self):
        result = count_action_verbs("Led the team. Developed APIs and developed tests. LED migration")
        assert result.count == 2
        assert result.found == ["developed", "led"]

    def test_multi_word_verb(self):
        assert "rolled out" in count_action_verbs("Rolled out the new platform").found

    def test_no_partial_words(self):
        assert count_action_verbs("cutting-edge leadership").count == 0


class TestBulletPoints:
    def test_supported_glyphs(self):
        text = "• one\n▪ two\n▸ three\n→ four\n- five\n* six\nplain line\n-nospace"
        assert count_bullet_points(text) == 6

    def test_indented_bullets(self):
        assert count_bullet_points("  • indented\n\t- tabbed") == 2

    def test_dash_inside_line_is_not_a_bullet(self):
        assert count_bullet_points("2019 - Present") == 0


class TestQuantifications:
    def test_patterns_in_order(self):
        text = (
            "• Improved performance by 50%\n"
            "• Led team of 10 developers\n"
            "• Reduced costs by $100,000"
        )
        result = count_quantifications(text)
        assert result.count == 3
        assert result.examples == ["50%", "$100,000", "10 developers"]

    def test_mixed_example(self):
        result = count_quantifications("Cut costs by $1.2M (15%) in 6 months")
        assert result.examples == ["15%", "$1.2M", "6 months"]

    def test_examples_capped_at_ten(self):
        text = " ".join(f"{i}%" for i in range(1, 13))
        result = count_quantifications(text)
        assert result.count == 12
        assert len(result.examples) == 10

    def test_none(self):
        assert count_quantifications("Worked on several things").count == 0


class TestContactInfo:
    def test_all_channels(self):
        text = (
            "john.doe@example.com | (555) 123-4567 | linkedin.com/in/johndoe | "
            "github.com/johndoe | Location: Austin"
        )
        info = analyze_contact_info(text)
        assert info.has_email and info.has_phone and info.has_linkedin
        assert info.has_github and info.has_location
        assert info.completeness == 100

    def test_empty(self):
        assert analyze_contact_info("").completeness == 0

    def test_email_only(self):
        info = analyze_contact_info("Reach me at jane@example.org")
        assert info.has_email
        assert info.completeness == 25

    def test_city_state_counts_as_location(self):
        assert analyze_contact_info("Jane Doe\nAustin, TX\n").has_location


def test_social_profiles_in_reporting_order():
    profiles = detect_social_profiles("https://gitlab.com/jane and my portfolio")
    assert profiles.profiles == ["GitLab", "Portfolio"]
    assert profiles.portfolio
    assert not profiles.github
    assert not profiles.linkedin


def test_years_of_experience_reports_maximum():
    result = extract_years_of_experience(
        "5+ years of experience in Python; 3 years at Acme; 10 yrs leading teams"
    )
    assert result.total_years == 10
    assert len(result.statements) == 3


def test_years_of_experience_none():
    result = extract_years_of_experience("No numbers here")
    assert result.total_years == 0
    assert result.statements == []


def test_years_of_experience_ignores_calendar_years():
    result = extract_years_of_experience("Graduated in 2019 years ago, 8 years in industry")
    assert result.total_years == 8
    assert result.statements == ["8 years"]
