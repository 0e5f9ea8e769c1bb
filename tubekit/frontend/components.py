"""
Reusable UI components for the Streamlit app.
"""

import streamlit as st
from typing import Any, Callable, Dict, List, Optional, Tuple

from tubekit.core.thumbnails import THUMBNAIL_QUALITIES, thumbnail_filename
from tubekit.core.transcript import filter_segments, timestamp_to_seconds, transcript_to_text
from tubekit.models.schemas import NormalizedSegment

DOWNLOAD_KEY_PREFIX = "thumbnail_download_"

TOOLS = {
    "Transcript Explorer": "Search a video transcript and copy it with or without timestamps.",
    "Video Summarizer": "Get an AI summary of a video with main points, an analogy and keywords.",
    "SEO Enhancer": "Get optimized titles, descriptions, tags and keywords for a video.",
    "Thumbnail Downloader": "Download the thumbnails of a video in every available resolution.",
}


def header():
    """Display the application header."""
    st.set_page_config(
        page_title="TubeKit",
        page_icon="🎬",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    st.title("🎬 TubeKit")
    st.markdown("""
    Small tools for YouTube creators: transcripts, summaries, SEO and thumbnails.
    """)
    st.divider()


def sidebar() -> str:
    """
    Display the sidebar with the tool selector and settings.

    Returns:
        Name of the selected tool
    """
    with st.sidebar:
        st.title("TubeKit")
        tool = st.radio("Tools", list(TOOLS.keys()), key="tool")
        st.info(TOOLS[tool])

        st.markdown("## Settings")
        st.text_input("API URL", key="api_url")

    return tool


def url_form(key: str, button_label: str) -> Optional[str]:
    """
    Display a YouTube URL input form.

    Returns:
        The submitted URL or None
    """
    with st.form(key=key):
        url = st.text_input(
            "Enter YouTube URL",
            placeholder="https://www.youtube.com/watch?v=VIDEO_ID",
        )
        submit = st.form_submit_button(button_label)

    if submit and url:
        return url
    return None


def display_error(message: str):
    st.error(message)


def youtube_embed(video_id: str, start: int = 0):
    """
    Embed a YouTube video.

    Args:
        video_id: YouTube video ID
        start: Playback offset in seconds
    """
    src = f"https://www.youtube.com/embed/{video_id}"
    if start:
        src += f"?start={start}&autoplay=1"
    st.markdown(f"""
    <iframe width="560" height="315" src="{src}"
    frameborder="0" allow="accelerometer; autoplay; clipboard-write; encrypted-media;
    gyroscope; picture-in-picture" allowfullscreen></iframe>
    """, unsafe_allow_html=True)


def display_transcript(segments: List[Dict[str, str]], video_id: Optional[str] = None):
    """
    Display a searchable transcript.

    Args:
        segments: ``{text, timestamp}`` dictionaries from the API
        video_id: YouTube video ID for the embedded player
    """
    normalized = [NormalizedSegment(**segment) for segment in segments]

    if video_id:
        jump_to = st.selectbox(
            "Jump to",
            [segment.timestamp for segment in normalized],
            index=None,
            placeholder="Pick a timestamp",
        )
        youtube_embed(video_id, timestamp_to_seconds(jump_to) if jump_to else 0)

    query = st.text_input("Search transcript...", key="transcript_query")
    matches = filter_segments(normalized, query)
    st.caption(f"{len(matches)} of {len(normalized)} segments")

    with st.container(height=400):
        for segment in matches:
            st.markdown(f"`{segment.timestamp}` {segment.text}")

    with_timestamps, text_only = st.tabs(["With Timestamps", "Text Only"])
    with with_timestamps:
        st.code(transcript_to_text(normalized, with_timestamps=True), language=None)
    with text_only:
        st.code(transcript_to_text(normalized), language=None)


def display_summary(summary: str, video_id: Optional[str] = None):
    if video_id:
        video_col, summary_col = st.columns([1, 2])
        with video_col:
            youtube_embed(video_id)
    else:
        summary_col = st.container()

    with summary_col:
        st.markdown("### Summary")
        st.text(summary)
        with st.expander("Copy Summary"):
            st.code(summary, language=None)


def seo_form() -> Optional[Tuple[str, str, str]]:
    """
    Display the SEO input form.

    Returns:
        (title, description, tags) when submitted, else None
    """
    with st.form(key="seo_form"):
        title = st.text_input("Current title")
        description = st.text_area("Current description", height=200)
        tags = st.text_input("Current tags (comma-separated)")
        submit = st.form_submit_button("Enhance")

    if not submit:
        return None
    return title, description, tags


def display_seo(suggestions: Dict[str, List[str]]):
    """Display the four SEO suggestion lists."""
    st.markdown("### Titles")
    for title in suggestions["title"]:
        st.code(title, language=None)

    st.markdown("### Descriptions")
    for index, description in enumerate(suggestions["description"]):
        with st.expander(f"Description {index + 1}", expanded=index == 0):
            st.code(description, language=None)

    col1, col2 = st.columns(2)
    with col1:
        st.markdown("### Tags")
        st.code(", ".join(suggestions["tags"]), language=None)
    with col2:
        st.markdown("### Keywords")
        st.code(", ".join(suggestions["keywords"]), language=None)


def download_key(url: str) -> str:
    """Session state key holding the downloaded bytes of a thumbnail URL."""
    return f"{DOWNLOAD_KEY_PREFIX}{url}"


def clear_thumbnail_downloads():
    """Forget thumbnails downloaded for a previously listed video."""
    for key in [key for key in st.session_state if str(key).startswith(DOWNLOAD_KEY_PREFIX)]:
        del st.session_state[key]


def display_thumbnails(listing: Dict[str, Any], download_callback: Callable[[str], bytes]):
    """
    Display thumbnail previews with download buttons.

    Args:
        listing: ``{thumbnails, title}`` from the API
        download_callback: Function returning the image bytes for a URL
    """
    title = listing.get("title")
    if title:
        st.markdown(f"## {title}")

    for quality in THUMBNAIL_QUALITIES:
        url = listing["thumbnails"][quality]
        st.markdown(f"### {quality.capitalize()} quality")
        st.image(url)

        key = download_key(url)
        if st.button(f"Prepare {quality} download", key=f"prepare_{quality}"):
            try:
                st.session_state[key] = download_callback(url)
            except Exception as e:
                display_error(f"Failed to download image. Please try again. ({e})")

        if key in st.session_state:
            st.download_button(
                f"Download {quality} Quality",
                data=st.session_state[key],
                file_name=thumbnail_filename(quality, title),
                mime="image/jpeg",
                key=f"download_{quality}",
            )
