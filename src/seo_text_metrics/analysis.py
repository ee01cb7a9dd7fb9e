"""
Keyword density analysis module.

This module analyzes raw page text to:
- Count tokens and target phrase occurrences
- Measure keyword density
- Rank related keywords by frequency
- Score the content and produce advisory text

All functions are pure: no I/O, no randomness, no shared state.
"""

import logging
import math
import re
from collections import Counter
from typing import Optional

from .config import AnalyzerConfig
from .models import AnalysisResult, RelatedKeyword
from .recommendations import generate_improvements, generate_suggestions
from .scoring import calculate_score_breakdown

logger = logging.getLogger(__name__)

# Anything that is not an ASCII word character or whitespace
_NON_WORD_PATTERN = re.compile(r"[^\w\s]", re.ASCII)
_WHITESPACE_PATTERN = re.compile(r"\s+")


def normalize_text(text: Optional[str]) -> str:
    """
    Normalize text for counting.

    Lower-cases, replaces punctuation with spaces, collapses whitespace
    and trims.

    Args:
        text: Raw text (None is treated as empty).

    Returns:
        Normalized text.
    """
    if not text:
        return ""
    cleaned = _NON_WORD_PATTERN.sub(" ", text.lower())
    return _WHITESPACE_PATTERN.sub(" ", cleaned).strip()


def tokenize(text: Optional[str]) -> list[str]:
    """Split text into normalized tokens."""
    return normalize_text(text).split()


def round_percentage(value: float) -> float:
    """Round a percentage to 2 decimals, halves rounding up."""
    return math.floor(value * 100 + 0.5) / 100


def percentage(count: int, total: int) -> float:
    """Return count as a percentage of total, 0 when total is 0."""
    if total <= 0:
        return 0.0
    return (count / total) * 100


def count_phrase_occurrences(
    normalized_text: str,
    tokens: list[str],
    normalized_phrase: str,
    count_distributed_matches: bool = True,
) -> int:
    """
    Count occurrences of a normalized phrase.

    The exact count is the number of non-overlapping substring matches in
    the normalized text. For multi-word phrases each phrase word adds
    floor(matches / number_of_phrase_words) on top, so scattered words
    earn partial credit. A phrase found both ways is counted twice.

    Args:
        normalized_text: Text from normalize_text().
        tokens: Tokens of the normalized text.
        normalized_phrase: Phrase from normalize_text().
        count_distributed_matches: Whether to add the per-word credit.

    Returns:
        Occurrence count.
    """
    if not normalized_phrase:
        return 0

    occurrences = normalized_text.count(normalized_phrase)

    phrase_words = normalized_phrase.split(" ")
    if count_distributed_matches and len(phrase_words) > 1:
        token_counts = Counter(tokens)
        for word in phrase_words:
            occurrences += token_counts[word] // len(phrase_words)

    return occurrences


def calculate_keyword_density(
    text: str,
    phrase: str,
    config: Optional[AnalyzerConfig] = None,
) -> float:
    """
    Calculate keyword density as percentage.

    Args:
        text: Text to analyze.
        phrase: Target phrase.
        config: Optional analyzer config.

    Returns:
        Keyword density rounded to 2 decimals (0 for empty text).
    """
    config = config or AnalyzerConfig()
    normalized = normalize_text(text)
    tokens = normalized.split()
    occurrences = count_phrase_occurrences(
        normalized, tokens, normalize_text(phrase), config.count_distributed_matches
    )
    return round_percentage(percentage(occurrences, len(tokens)))


def extract_related_keywords(
    tokens: list[str],
    config: Optional[AnalyzerConfig] = None,
    target_phrase: Optional[str] = None,
) -> list[RelatedKeyword]:
    """
    Rank frequent non-stop-word tokens.

    Args:
        tokens: Tokens of the normalized text.
        config: Optional analyzer config (stop words, limit, exclusion).
        target_phrase: Normalized target phrase, skipped when the config
            excludes the target from related keywords.

    Returns:
        Up to config.related_keyword_limit keywords, most frequent first.
        Ties keep the order in which the tokens first appeared.
    """
    config = config or AnalyzerConfig()
    excluded = target_phrase if config.exclude_target_from_related else None

    counts: Counter[str] = Counter()
    for token in tokens:
        if len(token) < config.min_related_length or config.is_stop_word(token):
            continue
        if excluded is not None and token == excluded:
            continue
        counts[token] += 1

    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    total_words = len(tokens)

    return [
        RelatedKeyword(
            keyword=keyword,
            count=count,
            density=percentage(count, total_words),
        )
        for keyword, count in ranked[: config.related_keyword_limit]
    ]


def analyze_keyword_density(
    text: Optional[str],
    target_phrase: Optional[str],
    config: Optional[AnalyzerConfig] = None,
    related_keyword_limit: Optional[int] = None,
    exclude_target_from_related: Optional[bool] = None,
) -> AnalysisResult:
    """
    Analyze keyword density, related keywords and SEO score for a text.

    Args:
        text: Raw page text.
        target_phrase: The keyword or phrase to measure.
        config: Analyzer config; defaults to AnalyzerConfig.extended().
        related_keyword_limit: Override for config.related_keyword_limit.
        exclude_target_from_related: Override for
            config.exclude_target_from_related.

    Returns:
        AnalysisResult. Empty text yields a zero-valued result.
    """
    config = config or AnalyzerConfig.extended()
    overrides = {}
    if related_keyword_limit is not None:
        overrides["related_keyword_limit"] = related_keyword_limit
    if exclude_target_from_related is not None:
        overrides["exclude_target_from_related"] = exclude_target_from_related
    if overrides:
        config = config.with_overrides(**overrides)

    target_phrase = target_phrase or ""
    normalized_text = normalize_text(text)
    tokens = normalized_text.split()
    total_words = len(tokens)
    normalized_phrase = normalize_text(target_phrase)

    keyword_count = count_phrase_occurrences(
        normalized_text, tokens, normalized_phrase, config.count_distributed_matches
    )
    raw_density = percentage(keyword_count, total_words)
    density = round_percentage(raw_density)

    related_keywords = extract_related_keywords(tokens, config, normalized_phrase)

    breakdown = calculate_score_breakdown(
        raw_density, keyword_count, total_words, len(related_keywords), config.scoring
    )

    suggestions = generate_suggestions(
        raw_density,
        keyword_count,
        total_words,
        target_phrase,
        config.advice,
        formatted_density=f"{density:.2f}",
    )
    improvements = generate_improvements(
        raw_density, keyword_count, total_words, breakdown.total, config.advice
    )

    logger.debug(
        f"Analyzed '{target_phrase}': {total_words} words, "
        f"{keyword_count} occurrences, density {density}%, score {breakdown.total}"
    )

    return AnalysisResult(
        target_keyword=target_phrase,
        density=density,
        total_words=total_words,
        keyword_count=keyword_count,
        related_keywords=tuple(related_keywords),
        seo_score=breakdown.total,
        suggestions=tuple(suggestions),
        improvements=tuple(improvements),
        score_breakdown=breakdown,
    )
