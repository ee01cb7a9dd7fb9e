"""
Advisory text for keyword density results.

Suggestions describe the current state of the content; improvements list
next steps. Both are picked from fixed templates using the same thresholds
(AdviceThresholds) so the advice agrees with the SEO score.
"""

from typing import Optional

from .config import AdviceThresholds


# Density band -> suggestion templates
DENSITY_SUGGESTIONS = {
    "low": (
        'Keyword density is too low ({density}%). Consider adding "{keyword}" naturally throughout the content.',
        "Use the target keyword in headings, subheadings, and the first paragraph.",
    ),
    "high": (
        "Keyword density is too high ({density}%). This might be considered keyword stuffing by search engines.",
        "Replace some keyword instances with synonyms or related terms.",
    ),
    "optimal": (
        "Keyword density is within the optimal range ({density}%).",
    ),
}

FEW_OCCURRENCES_SUGGESTION = "Consider using the target keyword at least 3-5 times in the content."
SHORT_CONTENT_SUGGESTION = "Content is quite short. Consider expanding to at least 300-500 words for better SEO."

GENERAL_SUGGESTIONS = (
    "Use keyword variations and LSI (Latent Semantic Indexing) keywords to make content more natural.",
    "Include the target keyword in meta description, title tag, and image alt text.",
    "Focus on user intent and content quality rather than just keyword density.",
)

WEAK_SCORE_IMPROVEMENT = "Overall SEO score needs significant improvement."

# Density band -> improvement templates (optimal density needs none)
DENSITY_IMPROVEMENTS = {
    "low": (
        "Increase keyword usage naturally throughout the content.",
        "Add the target keyword to H2 and H3 headings.",
    ),
    "high": (
        "Reduce keyword density to avoid over-optimization.",
        "Replace some keyword instances with synonyms.",
    ),
    "optimal": (),
}

SHORT_CONTENT_IMPROVEMENTS = (
    "Expand content length to at least 300-500 words.",
    "Add more detailed explanations and examples.",
)

# Occurrence band -> improvement templates
OCCURRENCE_IMPROVEMENTS = {
    "few": ("Use the target keyword more frequently (aim for 3-7 times).",),
    "many": ("Reduce keyword frequency to appear more natural.",),
    "ok": (),
}

GENERAL_IMPROVEMENTS = (
    "Include related keywords and LSI terms.",
    "Ensure keyword placement in title, meta description, and first paragraph.",
    "Focus on semantic relevance and user intent.",
    "Add internal links with keyword-rich anchor text.",
)


def density_band(density: float, thresholds: Optional[AdviceThresholds] = None) -> str:
    """Classify density as 'low', 'high' or 'optimal'."""
    thresholds = thresholds or AdviceThresholds()
    if density < thresholds.low_density:
        return "low"
    if density > thresholds.high_density:
        return "high"
    return "optimal"


def occurrence_band(keyword_count: int, thresholds: Optional[AdviceThresholds] = None) -> str:
    """Classify the occurrence count as 'few', 'many' or 'ok'."""
    thresholds = thresholds or AdviceThresholds()
    if keyword_count < thresholds.min_occurrences:
        return "few"
    if keyword_count > thresholds.max_occurrences:
        return "many"
    return "ok"


def generate_suggestions(
    density: float,
    keyword_count: int,
    total_words: int,
    target_keyword: str,
    thresholds: Optional[AdviceThresholds] = None,
    formatted_density: Optional[str] = None,
) -> list[str]:
    """
    Generate suggestions describing the current keyword usage.

    Args:
        density: Keyword density percentage used for band selection.
        keyword_count: Target phrase occurrences.
        total_words: Total tokens in the content.
        target_keyword: The target phrase as given by the caller.
        thresholds: Optional advice thresholds.
        formatted_density: Density text to show; defaults to density
            formatted with two decimals.

    Returns:
        List of suggestion strings.
    """
    thresholds = thresholds or AdviceThresholds()
    shown = formatted_density if formatted_density is not None else f"{density:.2f}"

    suggestions = [
        template.format(density=shown, keyword=target_keyword)
        for template in DENSITY_SUGGESTIONS[density_band(density, thresholds)]
    ]

    if occurrence_band(keyword_count, thresholds) == "few":
        suggestions.append(FEW_OCCURRENCES_SUGGESTION)

    if total_words < thresholds.min_words:
        suggestions.append(SHORT_CONTENT_SUGGESTION)

    suggestions.extend(GENERAL_SUGGESTIONS)
    return suggestions


def generate_improvements(
    density: float,
    keyword_count: int,
    total_words: int,
    seo_score: int,
    thresholds: Optional[AdviceThresholds] = None,
) -> list[str]:
    """
    Generate improvement recommendations.

    Args:
        density: Keyword density percentage.
        keyword_count: Target phrase occurrences.
        total_words: Total tokens in the content.
        seo_score: Composite SEO score.
        thresholds: Optional advice thresholds.

    Returns:
        List of improvement strings.
    """
    thresholds = thresholds or AdviceThresholds()
    improvements = []

    if seo_score < thresholds.weak_score:
        improvements.append(WEAK_SCORE_IMPROVEMENT)

    improvements.extend(DENSITY_IMPROVEMENTS[density_band(density, thresholds)])

    if total_words < thresholds.min_words:
        improvements.extend(SHORT_CONTENT_IMPROVEMENTS)

    improvements.extend(OCCURRENCE_IMPROVEMENTS[occurrence_band(keyword_count, thresholds)])

    improvements.extend(GENERAL_IMPROVEMENTS)
    return improvements
