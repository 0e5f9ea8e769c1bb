"""
Tests for transcript fetching and normalization.
"""

import math
import pytest
from unittest.mock import MagicMock

from tubekit.core.transcript import (
    TranscriptFetcher,
    decode_html_entities,
    filter_segments,
    format_timestamp,
    normalize_transcript,
    segment_offset,
    timestamp_to_seconds,
    transcript_to_text,
)
from tubekit.models.schemas import NormalizedSegment, TranscriptSegment
from tubekit.utils.error_handling import UpstreamServiceError


@pytest.mark.parametrize("seconds, expected", [
    (0, "00:00"),
    (65, "01:05"),
    (59.99, "00:59"),
    (600, "10:00"),
    (3661, "61:01"),
    (float("nan"), "00:00"),
    (math.inf, "00:00"),
    (-5, "00:00"),
    ("65", "00:00"),
    (None, "00:00"),
    (True, "00:00"),
])
def test_format_timestamp(seconds, expected):
    assert format_timestamp(seconds) == expected


def test_decode_double_encoded_apostrophe():
    """``&amp;`` is collapsed before the other entities are resolved."""
    assert decode_html_entities("&amp;#39;") == "'"


def test_decode_does_not_rescan_output():
    """A double-encoded ampersand decodes only one level."""
    assert decode_html_entities("a &amp;amp; b") == "a &amp; b"


def test_decode_all_entities():
    text = "&#39;single&apos; &quot;double&quot; &lt;tag&gt;"
    assert decode_html_entities(text) == "'single' \"double\" <tag>"


def test_decode_leaves_unknown_entities():
    assert decode_html_entities("caf&eacute; &nbsp;") == "caf&eacute; &nbsp;"


def test_segment_offset_field_names():
    assert segment_offset({"text": "a", "offset": 12.5}) == 12.5
    assert segment_offset({"text": "a", "start": 7}) == 7
    assert segment_offset({"text": "a"}) == 0
    assert segment_offset(TranscriptSegment(text="a", start=3.0)) == 3.0


def test_normalize_transcript_preserves_order(raw_segments):
    """One output segment per input segment, in input order."""
    normalized = normalize_transcript(raw_segments)

    assert len(normalized) == len(raw_segments)
    assert normalized == [
        NormalizedSegment(text="We're no strangers to love", timestamp="00:00"),
        NormalizedSegment(text="You know the rules &amp; so do I", timestamp="01:05"),
        NormalizedSegment(text='"Never gonna give you up"', timestamp="61:01"),
    ]


def test_normalize_transcript_accepts_dicts():
    normalized = normalize_transcript([
        {"text": "first", "offset": 1},
        {"text": "second", "start": 125},
        {"text": "third", "start": float("nan")},
    ])
    assert [segment.timestamp for segment in normalized] == ["00:01", "02:05", "00:00"]


def test_normalize_empty_transcript():
    assert normalize_transcript([]) == []


def test_filter_segments_case_insensitive():
    segments = [
        NormalizedSegment(text="Hello World", timestamp="00:00"),
        NormalizedSegment(text="goodbye", timestamp="00:05"),
    ]
    assert filter_segments(segments, "WORLD") == segments[:1]
    assert filter_segments(segments, "") == segments
    assert filter_segments(segments, "missing") == []


def test_transcript_to_text():
    segments = [
        NormalizedSegment(text="one", timestamp="00:00"),
        NormalizedSegment(text="two", timestamp="01:05"),
    ]
    assert transcript_to_text(segments) == "one\ntwo"
    assert transcript_to_text(segments, with_timestamps=True) == "[00:00] one\n[01:05] two"


def test_timestamp_to_seconds():
    assert timestamp_to_seconds("01:05") == 65
    assert timestamp_to_seconds("61:01") == 3661
    assert timestamp_to_seconds("garbage") == 0


@pytest.fixture
def mock_transcript_api():
    """Fixture to mock the YouTubeTranscriptApi instance."""
    api = MagicMock()
    api.fetch.return_value.to_raw_data.return_value = [
        {"text": "Hello", "start": 0.0, "duration": 1.5},
        {"text": "there &amp;amp; welcome", "start": 1.5, "duration": 2.0},
    ]
    return api


def test_fetch_segments(mock_transcript_api):
    fetcher = TranscriptFetcher(api=mock_transcript_api, languages=["en", "de"])
    segments = fetcher.fetch_segments("dQw4w9WgXcQ")

    mock_transcript_api.fetch.assert_called_once_with("dQw4w9WgXcQ", languages=("en", "de"))
    assert segments == [
        TranscriptSegment(text="Hello", start=0.0, duration=1.5),
        TranscriptSegment(text="there &amp;amp; welcome", start=1.5, duration=2.0),
    ]


def test_fetch_text_joins_raw_text(mock_transcript_api):
    fetcher = TranscriptFetcher(api=mock_transcript_api)
    assert fetcher.fetch_text("dQw4w9WgXcQ") == "Hello there &amp;amp; welcome"


def test_fetch_segments_upstream_failure(mock_transcript_api):
    """Library errors surface as upstream errors with the library message."""
    mock_transcript_api.fetch.side_effect = RuntimeError("Transcripts are disabled for this video")
    fetcher = TranscriptFetcher(api=mock_transcript_api)

    with pytest.raises(UpstreamServiceError) as excinfo:
        fetcher.fetch_segments("dQw4w9WgXcQ")

    assert excinfo.value.status_code == 500
    assert "disabled" in excinfo.value.message
