"""
Tests for YouTube video ID extraction.
"""

import pytest

from tubekit.core.video_id import extract_video_id


@pytest.mark.parametrize("url", [
    "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
    "https://youtube.com/watch?v=dQw4w9WgXcQ&t=42s",
    "https://youtu.be/dQw4w9WgXcQ",
    "https://youtu.be/dQw4w9WgXcQ?si=-InVol0JhtWji-6R",
    "https://www.youtube.com/embed/dQw4w9WgXcQ",
    "https://www.youtube.com/v/dQw4w9WgXcQ",
    "https://www.youtube.com/watch?v=dQw4w9WgXcQ#comments",
])
def test_extract_video_id_accepted_shapes(url):
    """Every accepted URL shape yields the bare identifier."""
    assert extract_video_id(url) == "dQw4w9WgXcQ"


@pytest.mark.parametrize("url", [
    "https://vimeo.com/123456",
    "not a url at all",
    "https://www.youtube.com/channel/UC38IQsAvIsxxjztdMZQtwHA",
    "",
])
def test_extract_video_id_no_match(url):
    """Unrelated strings do not match."""
    assert extract_video_id(url) is None


def test_extract_video_id_non_string():
    assert extract_video_id(None) is None


def test_extract_video_id_passes_loose_ids_through():
    """The captured value is not length-checked."""
    assert extract_video_id("https://youtu.be/abc") == "abc"


def test_extract_video_id_prefers_watch_pattern():
    """Patterns are tried in order; the watch form wins over embed."""
    url = "https://www.youtube.com/watch?v=first111111&list=https://www.youtube.com/embed/second22222"
    assert extract_video_id(url) == "first111111"
