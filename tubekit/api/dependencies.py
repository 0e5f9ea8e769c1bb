"""
Dependency providers for the API routes.

Each handler receives its collaborators through ``Depends`` so tests can
swap them with ``app.dependency_overrides``.
"""

from tubekit.api.schemas import SeoRequest, VideoRequest
from tubekit.core.seo import SeoEnhancer
from tubekit.core.summarizer import TranscriptSummarizer
from tubekit.core.thumbnails import ThumbnailProxy, ThumbnailResolver
from tubekit.core.transcript import TranscriptFetcher
from tubekit.core.video_id import extract_video_id
from tubekit.utils.error_handling import InvalidInputError


def require_video_id(request: VideoRequest) -> str:
    """Extract the video ID from the request body or reject the request."""
    video_id = extract_video_id(request.url)
    if not video_id:
        raise InvalidInputError("Invalid YouTube URL")
    return video_id


def get_transcript_fetcher() -> TranscriptFetcher:
    return TranscriptFetcher()


def get_summarizer() -> TranscriptSummarizer:
    return TranscriptSummarizer.from_config()


def get_seo_enhancer() -> SeoEnhancer:
    return SeoEnhancer.from_config()


def get_thumbnail_resolver() -> ThumbnailResolver:
    return ThumbnailResolver()


def get_thumbnail_proxy() -> ThumbnailProxy:
    return ThumbnailProxy()


def require_seo_fields(request: SeoRequest) -> SeoRequest:
    if not request.title or not request.description:
        raise InvalidInputError("Title and description are required")
    return request
