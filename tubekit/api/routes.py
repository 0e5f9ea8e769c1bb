"""
API routes for the TubeKit application.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from tubekit.api.dependencies import (
    get_seo_enhancer,
    get_summarizer,
    get_thumbnail_proxy,
    get_thumbnail_resolver,
    get_transcript_fetcher,
    require_seo_fields,
    require_video_id,
)
from tubekit.api.schemas import (
    HealthResponse,
    SeoRequest,
    SummaryResponse,
    ThumbnailDownloadRequest,
    TranscriptResponse,
)
from tubekit.config import config
from tubekit.core.seo import SeoEnhancer
from tubekit.core.summarizer import TranscriptSummarizer
from tubekit.core.thumbnails import (
    DOWNLOAD_CONTENT_TYPE,
    DOWNLOAD_DISPOSITION,
    ThumbnailProxy,
    ThumbnailResolver,
)
from tubekit.core.transcript import TranscriptFetcher, normalize_transcript
from tubekit.models.schemas import SeoSuggestionBundle, ThumbnailListing
from tubekit.utils.error_handling import log_diagnostic_info
from tubekit.utils.logger import logging

router = APIRouter(prefix="/api/v1", tags=["youtube"])


@router.get("/health", response_model=HealthResponse)
def health_check():
    """Health check endpoint."""
    return HealthResponse(status="healthy", version=config.APP_VERSION)


@router.post("/transcript", response_model=TranscriptResponse)
def get_transcript(
    video_id: str = Depends(require_video_id),
    fetcher: TranscriptFetcher = Depends(get_transcript_fetcher),
):
    """Fetch the transcript of a video with entity-decoded text and MM:SS timestamps."""
    segments = fetcher.fetch_segments(video_id)
    return TranscriptResponse(transcript=normalize_transcript(segments))


@router.post("/summarize", response_model=SummaryResponse)
def summarize_video(
    video_id: str = Depends(require_video_id),
    fetcher: TranscriptFetcher = Depends(get_transcript_fetcher),
    summarizer: TranscriptSummarizer = Depends(get_summarizer),
):
    """
    Summarize a YouTube video by URL.

    The full transcript is sent to the text-generation backend in one
    request; markdown emphasis is stripped from the reply.
    """
    transcript_text = fetcher.fetch_text(video_id)
    summary = summarizer.summarize(transcript_text)
    log_diagnostic_info({
        "video_id": video_id,
        "transcript_chars": len(transcript_text),
        "summary_chars": len(summary),
    })
    return SummaryResponse(summary=summary)


@router.post("/seo-enhance", response_model=SeoSuggestionBundle)
def enhance_seo(
    request: SeoRequest = Depends(require_seo_fields),
    enhancer: SeoEnhancer = Depends(get_seo_enhancer),
):
    """Suggest optimized titles, descriptions, tags and keywords."""
    return enhancer.enhance(request.title, request.description, request.tags)


@router.post("/thumbnails", response_model=ThumbnailListing)
def list_thumbnails(
    video_id: str = Depends(require_video_id),
    resolver: ThumbnailResolver = Depends(get_thumbnail_resolver),
):
    """List the thumbnail URLs of a video together with its title."""
    return resolver.resolve(video_id)


@router.post("/download-thumbnail")
def download_thumbnail(
    request: ThumbnailDownloadRequest,
    proxy: ThumbnailProxy = Depends(get_thumbnail_proxy),
):
    """Relay an image as an attachment so the browser can save it."""
    content = proxy.fetch(request.image_url)
    logging.info(f"Relaying {len(content)} bytes from {request.image_url}")
    return Response(
        content=content,
        media_type=DOWNLOAD_CONTENT_TYPE,
        headers={"Content-Disposition": DOWNLOAD_DISPOSITION},
    )
