from typing import List, Optional, Union

from pydantic import BaseModel, Field

from tubekit.models.schemas import NormalizedSegment


class VideoRequest(BaseModel):
    """Model for requests keyed by a YouTube URL."""
    url: str = ""


class SeoRequest(BaseModel):
    """Model for SEO enhancement requests."""
    title: str = ""
    description: str = ""
    tags: Optional[Union[str, List[str]]] = None


class ThumbnailDownloadRequest(BaseModel):
    """Model for thumbnail download requests."""
    image_url: str = Field(default="", alias="imageUrl")

    model_config = {"populate_by_name": True}


class TranscriptResponse(BaseModel):
    """Model for transcript responses."""
    transcript: List[NormalizedSegment]


class SummaryResponse(BaseModel):
    """Model for summary responses."""
    summary: str


class HealthResponse(BaseModel):
    status: str
    version: str
