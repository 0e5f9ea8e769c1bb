"""
Extraction of YouTube video identifiers from URLs.
"""

import re
from typing import Optional

# Tried in order; the first pattern that matches wins.
VIDEO_ID_PATTERNS = [
    re.compile(r"(?:youtube\.com/watch\?v=|youtu\.be/)([^&\n?#]+)"),
    re.compile(r"youtube\.com/embed/([^&\n?#]+)"),
    re.compile(r"youtube\.com/v/([^&\n?#]+)"),
]


def extract_video_id(url: str) -> Optional[str]:
    """
    Extract the video ID from a YouTube URL.

    Accepts ``watch?v=``, ``youtu.be/``, ``embed/`` and ``/v/`` URLs. The
    captured value is not checked for length, so a truncated id is
    returned as-is.

    Args:
        url: YouTube URL

    Returns:
        Video ID or None if no pattern matches
    """
    if not isinstance(url, str) or not url:
        return None

    for pattern in VIDEO_ID_PATTERNS:
        match = pattern.search(url)
        if match:
            return match.group(1)

    return None
