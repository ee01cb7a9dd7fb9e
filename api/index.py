"""
FastAPI wrapper for SEO Text Metrics - Vercel Serverless Function.

This module exposes the keyword density analysis as a REST API
for deployment on Vercel.
"""

import logging
from enum import Enum
from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, ConfigDict, Field

# Add src to path for imports
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from seo_text_metrics import __version__
from seo_text_metrics.analysis import analyze_keyword_density
from seo_text_metrics.config import AnalyzerConfig
from seo_text_metrics.content_sources import ContentExtractionError, fetch_url_content

logger = logging.getLogger(__name__)

MISSING_INPUT_MESSAGE = "Target keyword and either URL or content is required"
NO_CONTENT_MESSAGE = "Could not extract content from the provided URL"

app = FastAPI(
    title="SEO Text Metrics API",
    description="Keyword density analysis with related keywords, SEO score and suggestions",
    version=__version__,
)

# Enable CORS for all origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class AnalysisModeEnum(str, Enum):
    """Related keyword mode selection."""
    basic = "basic"  # Top 10 related keywords, target phrase excluded
    extended = "extended"  # Top 15 related keywords, nothing excluded


class KeywordDensityRequest(BaseModel):
    """Request model for keyword density analysis."""
    model_config = ConfigDict(populate_by_name=True)

    url: Optional[str] = Field(None, description="URL to fetch content from")
    content: Optional[str] = Field(None, description="Text to analyze (takes precedence over url)")
    target_keyword: Optional[str] = Field(
        None, alias="targetKeyword", description="Keyword or phrase to measure"
    )
    mode: AnalysisModeEnum = Field(
        AnalysisModeEnum.extended,
        description="'extended' (15 related keywords) or 'basic' (10, target excluded)",
    )


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str


@app.get("/api/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    return HealthResponse(
        status="healthy",
        version=__version__,
    )


@app.post("/api/keyword-density")
def keyword_density(request: KeywordDensityRequest):
    """
    Analyze keyword density for a URL or raw content.

    Content is used directly when given; otherwise the URL is fetched and
    reduced to its visible text before analysis.
    """
    if not request.target_keyword or (not request.url and not request.content):
        raise HTTPException(status_code=400, detail=MISSING_INPUT_MESSAGE)

    logger.info(f"Keyword density analysis for: {request.target_keyword}")

    text = request.content
    if request.url and not request.content:
        try:
            text = fetch_url_content(request.url).text
        except ContentExtractionError as e:
            logger.error(f"Error scraping {request.url}: {e}")
            raise HTTPException(status_code=400, detail=NO_CONTENT_MESSAGE)

    if not text or not text.strip():
        raise HTTPException(status_code=400, detail=NO_CONTENT_MESSAGE)

    try:
        result = analyze_keyword_density(
            text,
            request.target_keyword,
            config=AnalyzerConfig.for_mode(request.mode.value),
        )
    except Exception as e:
        logger.exception(f"Error in keyword density analysis: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")

    logger.info(f"Analysis completed. Density: {result.density}%")
    return result.to_dict()
