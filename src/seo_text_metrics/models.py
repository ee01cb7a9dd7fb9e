"""
Data models for SEO Text Metrics.

This module defines the result records produced by the analyzer and the
content records produced by the content sources.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class RelatedKeyword:
    """A frequent non-stop-word token and its own density."""
    keyword: str
    count: int
    density: float

    def to_dict(self) -> dict:
        return {"keyword": self.keyword, "count": self.count, "density": self.density}


@dataclass(frozen=True)
class ScoreBreakdown:
    """Points awarded by each band of the SEO score."""
    density: int = 0
    frequency: int = 0
    length: int = 0
    diversity: int = 0
    max_score: int = 100

    @property
    def raw_total(self) -> int:
        """Sum of the bands before clamping."""
        return self.density + self.frequency + self.length + self.diversity

    @property
    def total(self) -> int:
        """Composite score clamped to [0, max_score]."""
        return max(0, min(self.raw_total, self.max_score))

    def to_dict(self) -> dict:
        return {
            "density": self.density,
            "frequency": self.frequency,
            "length": self.length,
            "diversity": self.diversity,
        }


@dataclass(frozen=True)
class AnalysisResult:
    """
    Result of a keyword density analysis.

    Attributes:
        target_keyword: The target phrase as given by the caller.
        density: Percentage of tokens attributed to the phrase (2 decimals).
        total_words: Number of tokens in the normalized text.
        keyword_count: Phrase occurrences (exact plus distributed credit).
        related_keywords: Most frequent qualifying tokens, highest first.
        seo_score: Composite score in [0, 100].
        suggestions: Advisory text about the current content.
        improvements: Recommended next steps.
        score_breakdown: Points awarded per score band.
    """
    target_keyword: str
    density: float = 0.0
    total_words: int = 0
    keyword_count: int = 0
    related_keywords: tuple[RelatedKeyword, ...] = ()
    seo_score: int = 0
    suggestions: tuple[str, ...] = ()
    improvements: tuple[str, ...] = ()
    score_breakdown: ScoreBreakdown = field(default_factory=ScoreBreakdown)

    @property
    def is_empty(self) -> bool:
        """Check if the analyzed text had no tokens."""
        return self.total_words == 0

    def to_dict(self) -> dict:
        """Render the result in the JSON shape served by the API."""
        return {
            "targetKeyword": self.target_keyword,
            "density": self.density,
            "totalWords": self.total_words,
            "keywordCount": self.keyword_count,
            "relatedKeywords": [kw.to_dict() for kw in self.related_keywords],
            "seoScore": self.seo_score,
            "scoreBreakdown": self.score_breakdown.to_dict(),
            "suggestions": list(self.suggestions),
            "improvements": list(self.improvements),
        }


@dataclass
class PageContent:
    """Text obtained from a URL or a local file, ready for analysis."""
    text: str
    source: str
    title: Optional[str] = None

    def __post_init__(self) -> None:
        """Normalize the extracted text."""
        self.text = " ".join((self.text or "").split())

    @property
    def word_count(self) -> int:
        """Approximate word count (whitespace split)."""
        return len(self.text.split())

    @property
    def is_empty(self) -> bool:
        """Check if no text was extracted."""
        return not self.text
