"""Tests for suggestion and improvement text."""

from seo_text_metrics.config import AdviceThresholds
from seo_text_metrics.recommendations import (
    FEW_OCCURRENCES_SUGGESTION,
    GENERAL_IMPROVEMENTS,
    GENERAL_SUGGESTIONS,
    SHORT_CONTENT_IMPROVEMENTS,
    SHORT_CONTENT_SUGGESTION,
    WEAK_SCORE_IMPROVEMENT,
    density_band,
    generate_improvements,
    generate_suggestions,
    occurrence_band,
)


class TestBands:
    """Tests for the advice bands."""

    def test_density_band(self):
        assert density_band(0.49) == "low"
        assert density_band(0.5) == "optimal"
        assert density_band(3.0) == "optimal"
        assert density_band(3.01) == "high"

    def test_occurrence_band(self):
        assert occurrence_band(2) == "few"
        assert occurrence_band(3) == "ok"
        assert occurrence_band(15) == "ok"
        assert occurrence_band(16) == "many"

    def test_custom_thresholds(self):
        thresholds = AdviceThresholds(low_density=1.0, high_density=2.0)

        assert density_band(0.8, thresholds) == "low"
        assert density_band(2.5, thresholds) == "high"


class TestGenerateSuggestions:
    """Tests for generate_suggestions."""

    def test_low_density(self):
        suggestions = generate_suggestions(0.2, 1, 100, "seo tools")

        assert suggestions[0] == (
            'Keyword density is too low (0.20%). Consider adding "seo tools" '
            "naturally throughout the content."
        )
        assert suggestions[1] == "Use the target keyword in headings, subheadings, and the first paragraph."
        assert FEW_OCCURRENCES_SUGGESTION in suggestions
        assert SHORT_CONTENT_SUGGESTION in suggestions
        assert suggestions[-3:] == list(GENERAL_SUGGESTIONS)

    def test_high_density(self):
        suggestions = generate_suggestions(4.5, 9, 200, "seo")

        assert suggestions[0].startswith("Keyword density is too high (4.50%)")
        assert suggestions[1] == "Replace some keyword instances with synonyms or related terms."

    def test_optimal_density_on_long_content(self):
        suggestions = generate_suggestions(1.0, 5, 500, "seo")

        assert suggestions == [
            "Keyword density is within the optimal range (1.00%).",
            *GENERAL_SUGGESTIONS,
        ]

    def test_formatted_density_is_shown(self):
        suggestions = generate_suggestions(0.125, 1, 800, "seo", formatted_density="0.13")

        assert "(0.13%)" in suggestions[0]


class TestGenerateImprovements:
    """Tests for generate_improvements."""

    def test_weak_short_content(self):
        improvements = generate_improvements(0.2, 1, 100, 20)

        assert improvements == [
            WEAK_SCORE_IMPROVEMENT,
            "Increase keyword usage naturally throughout the content.",
            "Add the target keyword to H2 and H3 headings.",
            *SHORT_CONTENT_IMPROVEMENTS,
            "Use the target keyword more frequently (aim for 3-7 times).",
            *GENERAL_IMPROVEMENTS,
        ]

    def test_over_optimized(self):
        improvements = generate_improvements(4.0, 20, 600, 55)

        assert WEAK_SCORE_IMPROVEMENT not in improvements
        assert "Reduce keyword density to avoid over-optimization." in improvements
        assert "Reduce keyword frequency to appear more natural." in improvements

    def test_healthy_content_gets_general_tips_only(self):
        assert generate_improvements(1.0, 5, 500, 100) == list(GENERAL_IMPROVEMENTS)
