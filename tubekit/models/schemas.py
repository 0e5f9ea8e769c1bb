"""
Data models for the TubeKit application.
"""
from typing import Optional, List

from pydantic import BaseModel, Field, field_validator

from tubekit.config import config


class TranscriptSegment(BaseModel):
    """A caption fragment as received from the transcript source."""
    text: str = ""
    offset: Optional[float] = None
    start: Optional[float] = None
    duration: Optional[float] = None

    model_config = {"frozen": True}


class NormalizedSegment(BaseModel):
    """A caption fragment ready for display."""
    text: str
    timestamp: str


class SummaryConfig(BaseModel):
    """Configuration for summarization requests."""
    model: str = config.SUMMARY_MODEL
    temperature: float = config.SUMMARY_TEMPERATURE
    max_tokens: int = config.SUMMARY_MAX_TOKENS


class SeoConfig(BaseModel):
    """Configuration for SEO suggestion requests."""
    model: str = config.SEO_MODEL
    temperature: float = config.SEO_TEMPERATURE
    max_tokens: int = config.SEO_MAX_TOKENS
    max_attempts: int = Field(default=config.SEO_MAX_ATTEMPTS, ge=1)


class SeoSuggestionBundle(BaseModel):
    """Validated SEO suggestions parsed from model output."""
    title: List[str] = Field(min_length=1)
    description: List[str] = Field(min_length=1)
    tags: List[str] = Field(min_length=1)
    keywords: List[str] = Field(min_length=1)

    @field_validator("title", "description", "tags", "keywords", mode="before")
    @classmethod
    def stringify_items(cls, value):
        # models sometimes emit bare numbers as tags or keywords
        if isinstance(value, list):
            return [item if isinstance(item, str) else str(item) for item in value]
        return value


class ThumbnailSet(BaseModel):
    """Thumbnail URLs keyed by quality label."""
    default: str
    medium: str
    high: str
    standard: str
    maxres: str


class ThumbnailListing(BaseModel):
    """Thumbnails plus the display title of the video."""
    thumbnails: ThumbnailSet
    title: Optional[str] = None
