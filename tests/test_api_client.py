"""
Tests for the frontend API client.
"""

import pytest
from unittest.mock import patch, MagicMock

from tubekit.frontend.api_client import ApiClient, ApiError


def make_response(status_code=200, json_data=None, content=b""):
    response = MagicMock()
    response.status_code = status_code
    response.ok = status_code < 400
    response.content = content
    response.json.return_value = json_data
    return response


@pytest.fixture
def mock_post():
    with patch("tubekit.frontend.api_client.requests.post") as post:
        yield post


@pytest.fixture
def api_client():
    return ApiClient("http://localhost:8000", timeout=10)


def test_fetch_transcript(mock_post, api_client):
    segments = [{"text": "hello", "timestamp": "00:00"}]
    mock_post.return_value = make_response(json_data={"transcript": segments})

    assert api_client.fetch_transcript("https://youtu.be/dQw4w9WgXcQ") == segments
    mock_post.assert_called_once_with(
        "http://localhost:8000/api/v1/transcript",
        json={"url": "https://youtu.be/dQw4w9WgXcQ"},
        timeout=10,
    )


def test_summarize_video(mock_post, api_client):
    mock_post.return_value = make_response(json_data={"summary": "Short summary"})

    assert api_client.summarize_video("https://youtu.be/dQw4w9WgXcQ") == "Short summary"
    assert mock_post.call_args[0][0] == "http://localhost:8000/api/v1/summarize"


def test_enhance_seo(mock_post, api_client):
    suggestions = {"title": ["t"], "description": ["d"], "tags": ["g"], "keywords": ["k"]}
    mock_post.return_value = make_response(json_data=suggestions)

    assert api_client.enhance_seo("title", "description", "a, b") == suggestions
    assert mock_post.call_args.kwargs["json"] == {"title": "title", "description": "description", "tags": "a, b"}


def test_download_thumbnail(mock_post, api_client):
    mock_post.return_value = make_response(content=b"jpeg")

    assert api_client.download_thumbnail("https://img.youtube.com/vi/x/default.jpg") == b"jpeg"
    assert mock_post.call_args.kwargs["json"] == {"imageUrl": "https://img.youtube.com/vi/x/default.jpg"}


def test_error_message_is_surfaced(mock_post, api_client):
    mock_post.return_value = make_response(status_code=400, json_data={"error": "Invalid YouTube URL"})

    with pytest.raises(ApiError) as excinfo:
        api_client.list_thumbnails("https://example.com")

    assert excinfo.value.message == "Invalid YouTube URL"
    assert excinfo.value.status_code == 400


def test_error_without_json_body(mock_post, api_client):
    response = make_response(status_code=502)
    response.json.side_effect = ValueError("no json")
    mock_post.return_value = response

    with pytest.raises(ApiError, match="502"):
        api_client.summarize_video("https://youtu.be/dQw4w9WgXcQ")


def test_extract_video_id(api_client):
    assert api_client.extract_video_id("https://www.youtube.com/embed/dQw4w9WgXcQ") == "dQw4w9WgXcQ"
    assert api_client.extract_video_id("https://example.com") is None
