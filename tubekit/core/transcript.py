"""
Module for fetching YouTube transcripts and normalizing them for display.
"""

import math
import re
from numbers import Real
from typing import Any, Iterable, List, Optional, Sequence

from youtube_transcript_api import YouTubeTranscriptApi

from tubekit.config import config
from tubekit.models.schemas import TranscriptSegment, NormalizedSegment
from tubekit.utils.error_handling import UpstreamServiceError
from tubekit.utils.logger import logging

_ENTITY_RE = re.compile(r"&(#39|apos|quot|lt|gt);")
_ENTITIES = {
    "#39": "'",
    "apos": "'",
    "quot": '"',
    "lt": "<",
    "gt": ">",
}


def decode_html_entities(text: str) -> str:
    """
    Decode the HTML entities YouTube leaves in caption text.

    ``&amp;`` is collapsed first so double-encoded entities such as
    ``&amp;#39;`` resolve. The remaining entities are then replaced in a
    single pass that never re-reads its own output.
    """
    text = text.replace("&amp;", "&")
    return _ENTITY_RE.sub(lambda match: _ENTITIES[match.group(1)], text)


def format_timestamp(seconds: Any) -> str:
    """
    Format an offset in seconds as ``MM:SS``.

    There is no hour component, minutes keep growing past 59
    (``3661`` -> ``"61:01"``). Anything that is not a finite,
    non-negative number formats as ``"00:00"``.
    """
    if isinstance(seconds, bool) or not isinstance(seconds, Real):
        return "00:00"
    if math.isnan(seconds) or math.isinf(seconds) or seconds < 0:
        return "00:00"

    minutes = math.floor(seconds / 60)
    remaining_seconds = math.floor(seconds % 60)
    return f"{minutes:02d}:{remaining_seconds:02d}"


def timestamp_to_seconds(timestamp: str) -> int:
    """Convert an ``MM:SS`` timestamp back to whole seconds."""
    minutes, _, seconds = timestamp.partition(":")
    try:
        return int(minutes) * 60 + int(seconds)
    except ValueError:
        return 0


def _field(segment: Any, name: str) -> Any:
    if isinstance(segment, dict):
        return segment.get(name)
    return getattr(segment, name, None)


def segment_offset(segment: Any) -> Any:
    """Return the start offset of a segment, whichever field carries it."""
    return _field(segment, "offset") or _field(segment, "start") or 0


def normalize_segment(segment: Any) -> NormalizedSegment:
    return NormalizedSegment(
        text=decode_html_entities(_field(segment, "text") or ""),
        timestamp=format_timestamp(segment_offset(segment)),
    )


def normalize_transcript(segments: Iterable[Any]) -> List[NormalizedSegment]:
    """
    Convert raw transcript segments into display segments.

    The output has one entry per input segment, in the same order.

    Args:
        segments: Raw segments (mappings or objects with ``text`` and
            ``offset``/``start``)

    Returns:
        List of NormalizedSegment
    """
    return [normalize_segment(segment) for segment in segments]


def filter_segments(segments: Sequence[NormalizedSegment], query: str) -> List[NormalizedSegment]:
    """Case-insensitive substring search over segment text."""
    if not query:
        return list(segments)
    needle = query.lower()
    return [segment for segment in segments if needle in segment.text.lower()]


def transcript_to_text(segments: Sequence[NormalizedSegment], with_timestamps: bool = False) -> str:
    """Render segments one per line, optionally prefixed with ``[MM:SS]``."""
    if with_timestamps:
        return "\n".join(f"[{segment.timestamp}] {segment.text}" for segment in segments)
    return "\n".join(segment.text for segment in segments)


class TranscriptFetcher:
    """Class to fetch transcripts from YouTube."""

    def __init__(self, api: Optional[YouTubeTranscriptApi] = None, languages: Optional[Sequence[str]] = None):
        """
        Initialize the fetcher.

        Args:
            api: Transcript API instance (a new one is created if None)
            languages: Preferred caption languages, in priority order
        """
        self.api = api or YouTubeTranscriptApi()
        self.languages = tuple(languages or config.TRANSCRIPT_LANGUAGES or ("en",))

    def fetch_segments(self, video_id: str) -> List[TranscriptSegment]:
        """
        Fetch the raw caption segments of a video.

        Args:
            video_id: YouTube video ID

        Returns:
            List of TranscriptSegment in playback order
        """
        logging.info(f"Fetching transcript for video {video_id}")
        try:
            fetched = self.api.fetch(video_id, languages=self.languages)
            raw_segments = fetched.to_raw_data()
        except Exception as e:
            logging.error(f"Transcript fetch failed for {video_id}: {str(e)}")
            raise UpstreamServiceError(str(e) or "Failed to fetch transcript") from e

        segments = [TranscriptSegment(**raw) for raw in raw_segments]
        logging.info(f"Fetched {len(segments)} transcript segments for video {video_id}")
        return segments

    def fetch_text(self, video_id: str) -> str:
        """Fetch a transcript and join its caption texts with spaces."""
        return " ".join(segment.text for segment in self.fetch_segments(video_id))
