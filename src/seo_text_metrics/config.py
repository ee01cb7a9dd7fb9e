# -*- coding: utf-8 -*-
"""
Centralized configuration for the keyword density analyzer.

This module provides immutable configuration dataclasses that control
analysis behavior: the stop-word list, related keyword selection,
scoring tiers, and the thresholds used to pick advisory text.
"""

from dataclasses import dataclass, field, replace
from typing import Literal


# Type alias for analysis mode
# - "basic": Top 10 related keywords, the target phrase itself is excluded.
# - "extended": Top 15 related keywords for SEO audits, nothing excluded.
AnalysisMode = Literal["basic", "extended"]


# Common English function words, never reported as related keywords.
DEFAULT_STOP_WORDS: frozenset[str] = frozenset({
    "the", "be", "to", "of", "and", "a", "in", "that", "have", "i", "it", "for", "not", "on", "with",
    "he", "as", "you", "do", "at", "this", "but", "his", "by", "from", "they", "we", "say", "her",
    "she", "or", "an", "will", "my", "one", "all", "would", "there", "their", "what", "so", "up",
    "out", "if", "about", "who", "get", "which", "go", "me", "when", "make", "can", "like", "time",
    "no", "just", "him", "know", "take", "people", "into", "year", "your", "good", "some", "could",
    "them", "see", "other", "than", "then", "now", "look", "only", "come", "its", "over", "think",
    "also", "back", "after", "use", "two", "how", "our", "work", "first", "well", "way", "even",
    "new", "want", "because", "any", "these", "give", "day", "most", "us",
})


@dataclass(frozen=True)
class ScoringConfig:
    """
    Point tiers for the four SEO score bands.

    Tiers are checked in order and the first match wins.

    Attributes:
        density_tiers: (low, high, points) with both bounds inclusive.
        density_fallback_max: Any density in (0, max] not matched above.
        density_fallback_points: Points for the fallback density range.
        frequency_tiers: (low, high, points) on the occurrence count.
        frequency_fallback_points: Points for any other positive count.
        length_tiers: (min_words, points) in descending order.
        diversity_tiers: (min_related_keywords, points) in descending order.
        max_score: Upper clamp for the composite score.
    """

    density_tiers: tuple[tuple[float, float, int], ...] = ((0.5, 2.5, 30), (0.3, 3.5, 20))
    density_fallback_max: float = 5.0
    density_fallback_points: int = 10

    frequency_tiers: tuple[tuple[int, int, int], ...] = ((3, 10, 20), (1, 15, 15))
    frequency_fallback_points: int = 5

    length_tiers: tuple[tuple[int, int], ...] = ((500, 20), (300, 15), (150, 10), (50, 5))

    diversity_tiers: tuple[tuple[int, int], ...] = ((15, 30), (10, 20), (5, 15), (3, 10))

    max_score: int = 100

    def __post_init__(self):
        """Validate tier ordering."""
        for low, high, _ in self.density_tiers:
            if low > high:
                raise ValueError(f"density tier low bound {low} exceeds high bound {high}")
        for low, high, _ in self.frequency_tiers:
            if low > high:
                raise ValueError(f"frequency tier low bound {low} exceeds high bound {high}")
        for name in ("length_tiers", "diversity_tiers"):
            minimums = [minimum for minimum, _ in getattr(self, name)]
            if minimums != sorted(minimums, reverse=True):
                raise ValueError(f"{name} must be in descending order, got {minimums}")
        if self.max_score < 0:
            raise ValueError(f"max_score must be >= 0, got {self.max_score}")


@dataclass(frozen=True)
class AdviceThresholds:
    """
    Thresholds that select suggestion and improvement templates.

    Density bounds line up with the optimal density tier of ScoringConfig
    so the score and the advice agree.
    """

    low_density: float = 0.5
    high_density: float = 3.0
    min_occurrences: int = 3
    max_occurrences: int = 15
    min_words: int = 300
    weak_score: int = 50


@dataclass(frozen=True)
class AnalyzerConfig:
    """
    Configuration for a keyword density analysis.

    Attributes:
        stop_words: Words never reported as related keywords.
        min_related_length: Minimum token length for related keywords.
            The default of 4 keeps only tokens longer than three characters.
        related_keyword_limit: Number of related keywords to report.
        exclude_target_from_related: Skip tokens equal to the target phrase
            when building the related keyword table (basic mode).
        count_distributed_matches: Add the per-word match credit for
            multi-word phrases on top of the exact phrase count. The two
            methods can count the same occurrence twice. Disable to count
            exact phrase matches only.
        scoring: Score band tiers.
        advice: Advisory text thresholds.
    """

    stop_words: frozenset[str] = DEFAULT_STOP_WORDS
    min_related_length: int = 4
    related_keyword_limit: int = 15
    exclude_target_from_related: bool = False
    count_distributed_matches: bool = True
    scoring: ScoringConfig = field(default_factory=ScoringConfig)
    advice: AdviceThresholds = field(default_factory=AdviceThresholds)

    def __post_init__(self):
        """Validate configuration values."""
        # Accept any iterable of words but store it lower-cased and immutable
        object.__setattr__(self, "stop_words", frozenset(w.lower() for w in self.stop_words))
        if self.min_related_length < 1:
            raise ValueError(
                f"min_related_length must be >= 1, got {self.min_related_length}"
            )
        if self.related_keyword_limit < 0:
            raise ValueError(
                f"related_keyword_limit must be >= 0, got {self.related_keyword_limit}"
            )

    def is_stop_word(self, word: str) -> bool:
        """Check if a (lower-cased) token is a stop word."""
        return word in self.stop_words

    def with_overrides(self, **overrides) -> "AnalyzerConfig":
        """Return a copy of this config with the given fields replaced."""
        return replace(self, **overrides)

    @classmethod
    def basic(cls, **overrides) -> "AnalyzerConfig":
        """Create config for the plain density tool.

        Basic mode:
        - Reports the top 10 related keywords
        - Excludes the target phrase from the related keywords

        Args:
            **overrides: Override any config values

        Returns:
            AnalyzerConfig with basic mode defaults
        """
        defaults = {
            "related_keyword_limit": 10,
            "exclude_target_from_related": True,
        }
        defaults.update(overrides)
        return cls(**defaults)

    @classmethod
    def extended(cls, **overrides) -> "AnalyzerConfig":
        """Create config for the SEO audit endpoint.

        Extended mode:
        - Reports the top 15 related keywords
        - Ranks every qualifying token, the target phrase included

        Args:
            **overrides: Override any config values

        Returns:
            AnalyzerConfig with extended mode defaults
        """
        defaults = {
            "related_keyword_limit": 15,
            "exclude_target_from_related": False,
        }
        defaults.update(overrides)
        return cls(**defaults)

    @classmethod
    def for_mode(cls, mode: AnalysisMode, **overrides) -> "AnalyzerConfig":
        """Create config for a named analysis mode."""
        if mode == "basic":
            return cls.basic(**overrides)
        if mode == "extended":
            return cls.extended(**overrides)
        raise ValueError(f"mode must be 'basic' or 'extended', got '{mode}'")
