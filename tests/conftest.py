"""
Pytest fixtures and configuration for SEO Text Metrics tests.
"""

import pytest
from pathlib import Path

from docx import Document


# Twenty distinct words, none of them stop words, all longer than 3 chars
FILLER_WORDS = [
    "apple", "banana", "cherry", "damson", "elder", "figgy", "grape", "honey",
    "icing", "jelly", "kiwis", "lemon", "mango", "nutty", "olive", "peach",
    "quince", "rasp", "straw", "tomato",
]


def build_text(keyword: str, keyword_times: int, total_words: int) -> str:
    """Build text with a keyword repeated keyword_times among total_words tokens."""
    filler_count = total_words - keyword_times
    tokens = [keyword] * keyword_times
    tokens += [FILLER_WORDS[i % len(FILLER_WORDS)] for i in range(filler_count)]
    return " ".join(tokens)


@pytest.fixture
def seo_tools_text() -> str:
    """Short text with a two-word phrase repeated three times."""
    return "SEO tools help you rank. SEO tools are free SEO tools for everyone."


@pytest.fixture
def well_optimized_text() -> str:
    """500 words, 'keyword' used 5 times (1% density), 20 distinct fillers."""
    return build_text("keyword", 5, 500)


@pytest.fixture
def sample_docx(tmp_path: Path) -> Path:
    """Create a sample Word document."""
    docx_path = tmp_path / "sample.docx"
    doc = Document()

    doc.add_heading("Professional Liability Insurance Guide", level=1)
    doc.add_paragraph(
        "This guide covers everything you need to know about professional liability "
        "insurance. We will explain the key concepts and help you understand your coverage options."
    )
    doc.add_heading("What is Professional Liability Insurance?", level=2)
    doc.add_paragraph(
        "Professional liability insurance protects businesses and professionals from claims "
        "of negligence, errors, or omissions in their professional services."
    )
    doc.add_paragraph("")

    doc.save(str(docx_path))
    return docx_path


@pytest.fixture
def sample_html_content() -> str:
    """Sample HTML content for testing URL parsing."""
    return """
<!DOCTYPE html>
<html>
<head>
    <title>Free SEO Tools | Keyword Density Checker</title>
    <meta name="description" content="Check keyword density with our free SEO tools.">
    <style>body { color: red; }</style>
</head>
<body>
    <header>
        <nav>Navigation content</nav>
    </header>
    <main>
        <h1>Keyword Density Checker</h1>
        <p>Our free SEO tools measure keyword density for any page.</p>
        <script>var tracking = "analytics";</script>
        <p>Paste a URL and a target keyword to get started.</p>
    </main>
    <footer>Footer content</footer>
</body>
</html>
"""
