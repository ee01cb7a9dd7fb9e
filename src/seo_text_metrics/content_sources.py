"""
Content extraction from various sources (URLs, Word documents, text files).

This module produces the plain text the analyzer works on:
- Web URLs are fetched with requests and reduced to their visible text
  with BeautifulSoup (script, style, navigation, header and footer removed)
- Word documents (.docx files using python-docx)
- Plain text, Markdown and saved HTML files
"""

import logging
import os
import re
from pathlib import Path
from typing import Optional, Union
from urllib.parse import urlparse

import requests
from bs4 import BeautifulSoup
from charset_normalizer import from_bytes
from docx import Document

from .models import PageContent

logger = logging.getLogger(__name__)


# Default headers for web requests
DEFAULT_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    ),
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.5",
}

# Hard deadline for page fetches, in seconds
DEFAULT_TIMEOUT = 10.0

# Elements that never hold page content
NON_CONTENT_TAGS = ["script", "style", "noscript", "nav", "header", "footer"]

# Containers searched for the main content, in priority order
CONTENT_CONTAINERS = ["main", "article", "body"]

TEXT_FILE_SUFFIXES = {".txt", ".md", ".markdown"}
HTML_FILE_SUFFIXES = {".html", ".htm"}


class ContentExtractionError(Exception):
    """Raised when content extraction fails."""
    pass


class HtmlTextExtractor:
    """
    Extracts the visible text of an HTML page.

    Any object with an ``extract_visible_text(markup) -> str`` method can
    be used in its place by the loaders below.
    """

    def __init__(self, parser: str = "lxml", remove_tags: Optional[list[str]] = None):
        self.parser = parser
        self.remove_tags = remove_tags if remove_tags is not None else list(NON_CONTENT_TAGS)

    def _parse(self, markup: str) -> BeautifulSoup:
        return BeautifulSoup(markup or "", self.parser)

    def extract_visible_text(self, markup: str) -> str:
        """
        Return the visible body text of an HTML document.

        Args:
            markup: Raw HTML.

        Returns:
            Whitespace-normalized text of <main>, <article> or <body>
            (first found) with non-content tags removed.
        """
        soup = self._parse(markup)

        for tag in soup.find_all(self.remove_tags):
            tag.decompose()

        container = None
        for name in CONTENT_CONTAINERS:
            container = soup.find(name)
            if container:
                break
        source = container or soup

        text = source.get_text(separator=" ", strip=True)
        return " ".join(text.split())

    def extract_title(self, markup: str) -> Optional[str]:
        """Return the <title> text, if any."""
        title_tag = self._parse(markup).find("title")
        if not title_tag:
            return None
        title = " ".join(title_tag.get_text(separator=" ", strip=True).split())
        return title or None


def _resolve_timeout(timeout: Optional[float]) -> float:
    """Pick the explicit timeout, then SEO_FETCH_TIMEOUT, then the default."""
    if timeout is not None:
        return timeout
    env_value = os.environ.get("SEO_FETCH_TIMEOUT")
    if env_value:
        try:
            return float(env_value)
        except ValueError:
            logger.warning(f"Ignoring invalid SEO_FETCH_TIMEOUT value: {env_value!r}")
    return DEFAULT_TIMEOUT


def _decode_html_safely(response) -> str:
    """
    Decode HTTP response to string with proper encoding detection.

    Detection order:
    1. Content-Type header charset
    2. HTML meta charset tag
    3. charset_normalizer detection
    4. UTF-8 with replacement characters

    Args:
        response: requests.Response object

    Returns:
        Decoded HTML string
    """
    content_bytes = response.content

    # 1. Content-Type header charset
    content_type = response.headers.get("Content-Type", "")
    if "charset=" in content_type.lower():
        charset = content_type.lower().split("charset=")[-1].split(";")[0].strip().strip("\"'")
        try:
            return content_bytes.decode(charset)
        except (UnicodeDecodeError, LookupError) as e:
            logger.debug(f"Header charset {charset} failed: {e}")

    # 2. Meta charset in the first 8KB
    head_text = content_bytes[:8192].decode("ascii", errors="ignore")
    charset_match = re.search(r'<meta[^>]+charset=["\']?([^"\'>\s;]+)', head_text, re.I)
    if charset_match:
        charset = charset_match.group(1)
        try:
            return content_bytes.decode(charset)
        except (UnicodeDecodeError, LookupError) as e:
            logger.debug(f"Meta charset {charset} failed: {e}")

    # 3. charset_normalizer detection
    best = from_bytes(content_bytes).best()
    if best is not None:
        logger.debug(f"charset_normalizer detected: {best.encoding}")
        return str(best)

    # 4. UTF-8 with replacement, so encoding problems stay visible
    logger.debug("Falling back to UTF-8 decode")
    return content_bytes.decode("utf-8", errors="replace")


def fetch_url_content(
    url: str,
    timeout: Optional[float] = None,
    extractor: Optional[HtmlTextExtractor] = None,
) -> PageContent:
    """
    Fetch a URL and extract its visible text.

    Args:
        url: The URL to fetch content from.
        timeout: Request timeout in seconds (defaults to SEO_FETCH_TIMEOUT
            or DEFAULT_TIMEOUT).
        extractor: HTML-to-text extractor; defaults to HtmlTextExtractor.

    Returns:
        PageContent with the page text and title.

    Raises:
        ContentExtractionError: If the URL is invalid or fetching fails.
    """
    parsed = urlparse(url or "")
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ContentExtractionError(f"Invalid URL: {url}")

    extractor = extractor or HtmlTextExtractor()
    timeout = _resolve_timeout(timeout)

    logger.info(f"Fetching {url} (timeout {timeout}s)")
    try:
        response = requests.get(url, headers=DEFAULT_HEADERS, timeout=timeout)
        response.raise_for_status()
    except requests.Timeout as e:
        raise ContentExtractionError(f"Timed out fetching URL after {timeout}s: {url}") from e
    except requests.RequestException as e:
        raise ContentExtractionError(f"Failed to fetch URL: {e}") from e

    html = _decode_html_safely(response)
    text = extractor.extract_visible_text(html)
    title = extractor.extract_title(html) if hasattr(extractor, "extract_title") else None

    content = PageContent(text=text, source=url, title=title)
    logger.info(f"Extracted ~{content.word_count} words from {url}")
    return content


def load_docx_content(file_path: Union[str, Path]) -> PageContent:
    """
    Load text from a Word document.

    Args:
        file_path: Path to the .docx file.

    Returns:
        PageContent with all non-empty paragraphs joined; the first
        heading-styled paragraph is used as title.

    Raises:
        ContentExtractionError: If the file cannot be read or parsed.
    """
    path = Path(file_path)

    if not path.exists():
        raise ContentExtractionError(f"File not found: {file_path}")

    if not path.suffix.lower() == ".docx":
        raise ContentExtractionError(f"File must be a .docx file: {file_path}")

    try:
        doc = Document(str(path))
    except Exception as e:
        raise ContentExtractionError(f"Failed to open Word document: {e}") from e

    paragraphs: list[str] = []
    title = None

    for para in doc.paragraphs:
        text = para.text.strip()
        if not text:
            continue
        style_name = para.style.name if para.style is not None else ""
        if title is None and (style_name.startswith("Heading") or style_name == "Title"):
            title = text
        paragraphs.append(text)

    return PageContent(text="\n".join(paragraphs), source=str(path), title=title)


def load_text_file(
    file_path: Union[str, Path],
    extractor: Optional[HtmlTextExtractor] = None,
) -> PageContent:
    """
    Load text from a plain text, Markdown or saved HTML file.

    Raises:
        ContentExtractionError: If the file is missing, unreadable or of an
            unsupported type.
    """
    path = Path(file_path)

    if not path.exists():
        raise ContentExtractionError(f"File not found: {file_path}")

    suffix = path.suffix.lower()
    if suffix not in TEXT_FILE_SUFFIXES | HTML_FILE_SUFFIXES:
        raise ContentExtractionError(f"Unsupported file type: {file_path}")

    try:
        raw = path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise ContentExtractionError(f"Failed to read file: {e}") from e

    if suffix in HTML_FILE_SUFFIXES:
        extractor = extractor or HtmlTextExtractor()
        title = extractor.extract_title(raw) if hasattr(extractor, "extract_title") else None
        return PageContent(text=extractor.extract_visible_text(raw), source=str(path), title=title)

    return PageContent(text=raw, source=str(path))


def load_content(source: str, timeout: Optional[float] = None) -> PageContent:
    """
    Load content from a URL or a local file.

    Args:
        source: URL (http/https) or path to a .docx/.txt/.md/.html file.
        timeout: Request timeout for URLs.

    Returns:
        PageContent for the source.

    Raises:
        ContentExtractionError: If loading fails.
    """
    if urlparse(source).scheme in ("http", "https"):
        return fetch_url_content(source, timeout=timeout)

    if source.lower().endswith(".docx"):
        return load_docx_content(source)

    return load_text_file(source)
