"""
Main Streamlit application for TubeKit.
"""

import os

import streamlit as st
from dotenv import load_dotenv

from tubekit.frontend.api_client import ApiClient, ApiError
from tubekit.frontend.components import (
    header, sidebar, url_form, display_error, display_transcript,
    display_summary, seo_form, display_seo, display_thumbnails, clear_thumbnail_downloads,
)


load_dotenv()


def init_session_state():
    """Initialize session state variables."""
    if "api_url" not in st.session_state:
        st.session_state.api_url = os.getenv("API_URL", "http://localhost:8000")


def get_client() -> ApiClient:
    client = st.session_state.get("api_client")
    if client is None or client.base_url != st.session_state.api_url:
        client = ApiClient(st.session_state.api_url)
        st.session_state.api_client = client
    return client


def transcript_view(client: ApiClient):
    st.markdown("## Transcript Explorer")
    url = url_form("transcript_form", "Get Transcript")
    if url:
        video_id = client.extract_video_id(url)
        if not video_id:
            display_error("Invalid YouTube URL")
            return
        try:
            with st.spinner("Fetching transcript..."):
                st.session_state.transcript = (video_id, client.fetch_transcript(url))
        except ApiError as e:
            display_error(e.message)
            return

    if "transcript" in st.session_state:
        video_id, segments = st.session_state.transcript
        display_transcript(segments, video_id)


def summary_view(client: ApiClient):
    st.markdown("## Video Summarizer")
    url = url_form("summary_form", "Summarize")
    if url:
        video_id = client.extract_video_id(url)
        if not video_id:
            display_error("Invalid YouTube URL")
            return
        try:
            with st.spinner("Generating summary..."):
                st.session_state.summary = (video_id, client.summarize_video(url))
        except ApiError as e:
            display_error(e.message)
            return

    if "summary" in st.session_state:
        video_id, summary = st.session_state.summary
        display_summary(summary, video_id)


def seo_view(client: ApiClient):
    st.markdown("## SEO Enhancer")
    submitted = seo_form()
    if submitted:
        title, description, tags = submitted
        try:
            with st.spinner("Generating suggestions..."):
                st.session_state.seo = client.enhance_seo(title, description, tags)
        except ApiError as e:
            display_error(e.message)
            return

    if "seo" in st.session_state:
        display_seo(st.session_state.seo)


def thumbnail_view(client: ApiClient):
    st.markdown("## Thumbnail Downloader")
    url = url_form("thumbnail_form", "Get Thumbnails")
    if url:
        try:
            with st.spinner("Fetching thumbnails..."):
                st.session_state.thumbnails = client.list_thumbnails(url)
            clear_thumbnail_downloads()
        except ApiError as e:
            display_error(e.message)
            return

    if "thumbnails" in st.session_state:
        display_thumbnails(st.session_state.thumbnails, client.download_thumbnail)


VIEWS = {
    "Transcript Explorer": transcript_view,
    "Video Summarizer": summary_view,
    "SEO Enhancer": seo_view,
    "Thumbnail Downloader": thumbnail_view,
}


def main():
    """Main application entry point."""
    header()
    init_session_state()
    tool = sidebar()
    VIEWS[tool](get_client())


if __name__ == "__main__":
    main()
