"""
Configuration for pytest tests.
"""

import os
import tempfile

# Settings are read when tubekit.config is imported.
os.environ["GROQ_API_KEY"] = os.environ.get("GROQ_API_KEY", "test_api_key")
os.environ["ENVIRONMENT"] = "development"
os.environ.setdefault("LOG_DIR", os.path.join(tempfile.gettempdir(), "tubekit-test-logs"))

import pytest
from unittest.mock import MagicMock
from fastapi.testclient import TestClient
from langchain_core.messages import AIMessage

from tubekit.api.app import app
from tubekit.models.schemas import TranscriptSegment


@pytest.fixture(scope="session")
def test_video_url():
    """Return a test YouTube video URL."""
    return "https://youtu.be/dQw4w9WgXcQ"


@pytest.fixture
def raw_segments():
    """Transcript segments as the transcript source returns them."""
    return [
        TranscriptSegment(text="We&amp;#39;re no strangers to love", start=0.0, duration=3.2),
        TranscriptSegment(text="You know the rules &amp;amp; so do I", start=65.4, duration=4.1),
        TranscriptSegment(text="&quot;Never gonna give you up&quot;", start=3661.0, duration=2.0),
    ]


@pytest.fixture
def mock_llm():
    """Chat model whose replies are set per test through ``reply``."""
    llm = MagicMock()

    def reply(content):
        llm.invoke.return_value = AIMessage(content=content)
        return llm

    llm.reply = reply
    return llm


@pytest.fixture
def client():
    """API test client; dependency overrides are cleared afterwards."""
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
