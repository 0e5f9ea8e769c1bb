"""
API client for communicating with the TubeKit backend.
"""

import requests
from typing import Dict, List, Any, Optional, Union
from urllib.parse import urljoin

from tubekit.config import config
from tubekit.core.video_id import extract_video_id


class ApiError(Exception):
    """Error reported by the API, carrying its ``error`` message."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ApiClient:
    """Client for interacting with the TubeKit API."""

    def __init__(self, base_url: str = config.PUBLIC_URL, timeout: float = 120):
        """
        Initialize the API client.

        Args:
            base_url: Base URL of the API
            timeout: Seconds to wait for each response
        """
        self.base_url = base_url
        self.api_base = urljoin(base_url, "/api/v1/")
        self.timeout = timeout

    def _url(self, endpoint: str) -> str:
        """Get the full URL for an endpoint."""
        return urljoin(self.api_base, endpoint)

    def _post(self, endpoint: str, payload: Dict[str, Any]) -> requests.Response:
        response = requests.post(self._url(endpoint), json=payload, timeout=self.timeout)
        if not response.ok:
            try:
                message = response.json().get("error")
            except ValueError:
                message = None
            raise ApiError(message or f"Request failed with status {response.status_code}", response.status_code)
        return response

    def fetch_transcript(self, url: str) -> List[Dict[str, str]]:
        """
        Fetch the transcript of a video.

        Args:
            url: YouTube video URL

        Returns:
            List of ``{text, timestamp}`` segments
        """
        return self._post("transcript", {"url": url}).json()["transcript"]

    def summarize_video(self, url: str) -> str:
        """
        Request a video summary.

        Args:
            url: YouTube video URL

        Returns:
            Summary text
        """
        return self._post("summarize", {"url": url}).json()["summary"]

    def enhance_seo(self, title: str, description: str, tags: Union[str, List[str], None] = None) -> Dict[str, List[str]]:
        """
        Request SEO suggestions.

        Args:
            title: Current video title
            description: Current video description
            tags: Current tags

        Returns:
            Dictionary with title, description, tags and keywords lists
        """
        payload = {"title": title, "description": description, "tags": tags}
        return self._post("seo-enhance", payload).json()

    def list_thumbnails(self, url: str) -> Dict[str, Any]:
        """Get the thumbnail URLs and title of a video."""
        return self._post("thumbnails", {"url": url}).json()

    def download_thumbnail(self, image_url: str) -> bytes:
        """Download a thumbnail through the API proxy."""
        return self._post("download-thumbnail", {"imageUrl": image_url}).content

    def extract_video_id(self, url: str) -> Optional[str]:
        """
        Extract YouTube video ID from a URL.

        Args:
            url: YouTube URL

        Returns:
            Video ID or None if extraction fails
        """
        return extract_video_id(url)
