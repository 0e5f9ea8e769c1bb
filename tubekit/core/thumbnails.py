"""
Module for resolving and downloading YouTube thumbnails.
"""

from typing import Optional
from urllib.parse import urlparse

import requests

from tubekit.config import config
from tubekit.models.schemas import ThumbnailSet, ThumbnailListing
from tubekit.utils.error_handling import UpstreamServiceError
from tubekit.utils.helpers import sanitize_filename
from tubekit.utils.logger import logging

THUMBNAIL_URL_TEMPLATE = "https://img.youtube.com/vi/{video_id}/{name}.jpg"
OEMBED_URL = "https://www.youtube.com/oembed"
WATCH_URL_TEMPLATE = "https://www.youtube.com/watch?v={video_id}"

# quality label -> file name on the thumbnail CDN
THUMBNAIL_QUALITIES = {
    "default": "default",
    "medium": "mqdefault",
    "high": "hqdefault",
    "standard": "sddefault",
    "maxres": "maxresdefault",
}

DOWNLOAD_CONTENT_TYPE = "image/jpeg"
DOWNLOAD_DISPOSITION = 'attachment; filename="thumbnail.jpg"'


def build_thumbnail_set(video_id: str) -> ThumbnailSet:
    """Build the thumbnail URLs of a video. No network access."""
    return ThumbnailSet(**{
        quality: THUMBNAIL_URL_TEMPLATE.format(video_id=video_id, name=name)
        for quality, name in THUMBNAIL_QUALITIES.items()
    })


def thumbnail_filename(quality: str, title: Optional[str] = None) -> str:
    """File name offered when a thumbnail is saved from the UI."""
    return sanitize_filename(f"youtube-thumbnail-{quality}-{title or 'video'}") + ".jpg"


class ThumbnailResolver:
    """Class to list the thumbnails and title of a video."""

    def __init__(self, session: Optional[requests.Session] = None, timeout: Optional[float] = None):
        self.session = session or requests.Session()
        self.timeout = timeout or config.REQUEST_TIMEOUT

    def fetch_title(self, video_id: str) -> Optional[str]:
        """
        Look up the display title through YouTube's oEmbed endpoint.

        Args:
            video_id: YouTube video ID

        Returns:
            The video title
        """
        params = {"url": WATCH_URL_TEMPLATE.format(video_id=video_id), "format": "json"}
        try:
            response = self.session.get(OEMBED_URL, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            logging.error(f"oEmbed lookup failed for {video_id}: {str(e)}")
            raise UpstreamServiceError("Failed to fetch thumbnails") from e

        if not response.ok:
            logging.error(f"oEmbed lookup for {video_id} returned {response.status_code}")
            raise UpstreamServiceError(f"Failed to fetch video details (status {response.status_code})")

        try:
            data = response.json()
        except ValueError as e:
            raise UpstreamServiceError("Failed to parse video details") from e

        return data.get("title") if isinstance(data, dict) else None

    def resolve(self, video_id: str) -> ThumbnailListing:
        """Return the five thumbnail URLs and the video title."""
        thumbnails = build_thumbnail_set(video_id)
        title = self.fetch_title(video_id)
        logging.info(f"Resolved thumbnails for video {video_id}")
        return ThumbnailListing(thumbnails=thumbnails, title=title)


class ThumbnailProxy:
    """Class to download an image on behalf of the browser."""

    def __init__(self, session: Optional[requests.Session] = None, timeout: Optional[float] = None):
        self.session = session or requests.Session()
        self.timeout = timeout or config.REQUEST_TIMEOUT

    def fetch(self, image_url: str) -> bytes:
        """
        Download an image.

        Args:
            image_url: Absolute http(s) URL of the image

        Returns:
            The image bytes
        """
        if not image_url or urlparse(image_url).scheme not in ("http", "https"):
            logging.error(f"Refusing to download from {image_url!r}")
            raise UpstreamServiceError("Failed to download image")

        try:
            response = self.session.get(image_url, timeout=self.timeout)
        except requests.RequestException as e:
            logging.error(f"Download error for {image_url}: {str(e)}")
            raise UpstreamServiceError("Failed to download image") from e

        if not response.ok:
            logging.error(f"Download of {image_url} returned {response.status_code}")
            raise UpstreamServiceError("Failed to download image")

        return response.content
