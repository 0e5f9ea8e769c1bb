"""
Tests for the command line interface.
"""

import json
import pytest
from unittest.mock import patch

from tubekit.main import main
from tubekit.models.schemas import SeoSuggestionBundle, TranscriptSegment, ThumbnailListing
from tubekit.core.thumbnails import build_thumbnail_set
from tubekit.utils.error_handling import UpstreamServiceError


@pytest.fixture
def mock_fetcher():
    with patch("tubekit.main.TranscriptFetcher") as fetcher_class:
        fetcher = fetcher_class.return_value
        fetcher.fetch_segments.return_value = [
            TranscriptSegment(text="Hello &amp;#39;world&amp;#39;", start=0),
            TranscriptSegment(text="Second line", start=75),
        ]
        fetcher.fetch_text.return_value = "Hello world Second line"
        yield fetcher


def test_transcript_with_timestamps(mock_fetcher, capsys):
    exit_code = main(["transcript", "https://youtu.be/dQw4w9WgXcQ", "--timestamps"])

    assert exit_code == 0
    assert capsys.readouterr().out == "[00:00] Hello 'world'\n[01:15] Second line\n"
    mock_fetcher.fetch_segments.assert_called_once_with("dQw4w9WgXcQ")


def test_transcript_search(mock_fetcher, capsys):
    main(["transcript", "https://youtu.be/dQw4w9WgXcQ", "--search", "second"])

    assert capsys.readouterr().out == "Second line\n"


def test_invalid_url(mock_fetcher, capsys):
    exit_code = main(["transcript", "https://example.com"])

    assert exit_code == 1
    assert "Invalid YouTube URL" in capsys.readouterr().err
    mock_fetcher.fetch_segments.assert_not_called()


def test_summarize(mock_fetcher, capsys):
    with patch("tubekit.main.TranscriptSummarizer") as summarizer_class:
        summarizer_class.from_config.return_value.summarize.return_value = "A summary"
        exit_code = main(["summarize", "https://youtu.be/dQw4w9WgXcQ"])

    assert exit_code == 0
    assert capsys.readouterr().out == "A summary\n"
    summarizer_class.from_config.return_value.summarize.assert_called_once_with("Hello world Second line")


def test_summarize_upstream_error(mock_fetcher, capsys):
    mock_fetcher.fetch_text.side_effect = UpstreamServiceError("Transcripts are disabled")

    assert main(["summarize", "https://youtu.be/dQw4w9WgXcQ"]) == 1
    assert "Transcripts are disabled" in capsys.readouterr().err


def test_seo(capsys):
    bundle = SeoSuggestionBundle(title=["t"], description=["d"], tags=["g"], keywords=["k"])
    with patch("tubekit.main.SeoEnhancer") as enhancer_class:
        enhancer_class.from_config.return_value.enhance.return_value = bundle
        main(["seo", "--title", "T", "--description", "D", "--tags", "a,b"])

    enhancer_class.from_config.return_value.enhance.assert_called_once_with("T", "D", "a,b")
    assert json.loads(capsys.readouterr().out) == bundle.model_dump()


def test_thumbnails(capsys):
    listing = ThumbnailListing(thumbnails=build_thumbnail_set("dQw4w9WgXcQ"), title="Title")
    with patch("tubekit.main.ThumbnailResolver") as resolver_class:
        resolver_class.return_value.resolve.return_value = listing
        main(["thumbnails", "https://www.youtube.com/v/dQw4w9WgXcQ"])

    resolver_class.return_value.resolve.assert_called_once_with("dQw4w9WgXcQ")
    assert json.loads(capsys.readouterr().out)["thumbnails"]["maxres"].endswith("maxresdefault.jpg")
