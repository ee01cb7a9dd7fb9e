"""
SEO Text Metrics

Keyword density analysis for the free SEO tools site:
- Fetches page text from URLs, Word documents or text files
- Measures keyword density and ranks related keywords
- Scores content (0-100) and suggests improvements
"""

__version__ = "1.0.0"
__author__ = "SEO Text Metrics Team"

from .config import (
    DEFAULT_STOP_WORDS,
    AdviceThresholds,
    AnalysisMode,
    AnalyzerConfig,
    ScoringConfig,
)

from .models import (
    AnalysisResult,
    PageContent,
    RelatedKeyword,
    ScoreBreakdown,
)

from .analysis import (
    analyze_keyword_density,
    calculate_keyword_density,
    count_phrase_occurrences,
    extract_related_keywords,
    normalize_text,
    tokenize,
)

from .scoring import (
    calculate_score_breakdown,
    calculate_seo_score,
)

from .recommendations import (
    generate_improvements,
    generate_suggestions,
)

from .content_sources import (
    ContentExtractionError,
    HtmlTextExtractor,
    fetch_url_content,
    load_content,
    load_docx_content,
    load_text_file,
)

__all__ = [
    # Configuration
    "DEFAULT_STOP_WORDS",
    "AdviceThresholds",
    "AnalysisMode",
    "AnalyzerConfig",
    "ScoringConfig",
    # Models
    "AnalysisResult",
    "PageContent",
    "RelatedKeyword",
    "ScoreBreakdown",
    # Analysis
    "analyze_keyword_density",
    "calculate_keyword_density",
    "count_phrase_occurrences",
    "extract_related_keywords",
    "normalize_text",
    "tokenize",
    # Scoring
    "calculate_score_breakdown",
    "calculate_seo_score",
    # Advice
    "generate_improvements",
    "generate_suggestions",
    # Content sources
    "ContentExtractionError",
    "HtmlTextExtractor",
    "fetch_url_content",
    "load_content",
    "load_docx_content",
    "load_text_file",
]
