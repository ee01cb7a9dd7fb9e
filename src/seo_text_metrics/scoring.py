"""
SEO score calculation.

The composite score is the sum of four independently capped bands:

- Density (max 30): how close the keyword density is to the optimal range
- Frequency (max 20): how often the target phrase occurs
- Length (max 20): total word count of the content
- Diversity (max 30): how many related keywords the content supports

The sum is clamped to [0, 100].
"""

from typing import Optional

from .config import ScoringConfig
from .models import ScoreBreakdown


def score_density(density: float, config: Optional[ScoringConfig] = None) -> int:
    """
    Score the keyword density band.

    Args:
        density: Keyword density as a percentage (unrounded).
        config: Optional scoring tiers.

    Returns:
        Points awarded (0-30 with default tiers).
    """
    config = config or ScoringConfig()
    for low, high, points in config.density_tiers:
        if low <= density <= high:
            return points
    if 0 < density <= config.density_fallback_max:
        return config.density_fallback_points
    return 0


def score_frequency(keyword_count: int, config: Optional[ScoringConfig] = None) -> int:
    """Score the keyword frequency band."""
    config = config or ScoringConfig()
    for low, high, points in config.frequency_tiers:
        if low <= keyword_count <= high:
            return points
    if keyword_count > 0:
        return config.frequency_fallback_points
    return 0


def score_length(total_words: int, config: Optional[ScoringConfig] = None) -> int:
    """Score the content length band."""
    config = config or ScoringConfig()
    for min_words, points in config.length_tiers:
        if total_words >= min_words:
            return points
    return 0


def score_diversity(related_count: int, config: Optional[ScoringConfig] = None) -> int:
    """Score the keyword diversity band (number of related keywords found)."""
    config = config or ScoringConfig()
    for min_related, points in config.diversity_tiers:
        if related_count >= min_related:
            return points
    return 0


def calculate_score_breakdown(
    density: float,
    keyword_count: int,
    total_words: int,
    related_count: int,
    config: Optional[ScoringConfig] = None,
) -> ScoreBreakdown:
    """
    Calculate the points awarded by each score band.

    Args:
        density: Keyword density as a percentage.
        keyword_count: Target phrase occurrences.
        total_words: Total tokens in the content.
        related_count: Number of related keywords reported.
        config: Optional scoring tiers.

    Returns:
        ScoreBreakdown whose total is the composite SEO score.
    """
    config = config or ScoringConfig()
    return ScoreBreakdown(
        density=score_density(density, config),
        frequency=score_frequency(keyword_count, config),
        length=score_length(total_words, config),
        diversity=score_diversity(related_count, config),
        max_score=config.max_score,
    )


def calculate_seo_score(
    density: float,
    keyword_count: int,
    total_words: int,
    related_count: int,
    config: Optional[ScoringConfig] = None,
) -> int:
    """Calculate the composite SEO score (0-100)."""
    return calculate_score_breakdown(
        density, keyword_count, total_words, related_count, config
    ).total
