"""
Command line entry point for TubeKit.

Runs the same components as the API directly, without the web server.
"""

import argparse
import json
import sys

from dotenv import load_dotenv

from tubekit.core.seo import SeoEnhancer
from tubekit.core.summarizer import TranscriptSummarizer
from tubekit.core.thumbnails import ThumbnailResolver
from tubekit.core.transcript import (
    TranscriptFetcher,
    filter_segments,
    normalize_transcript,
    transcript_to_text,
)
from tubekit.core.video_id import extract_video_id
from tubekit.utils.error_handling import InvalidInputError, TubeKitError
from tubekit.utils.logger import logging


def _video_id(url: str) -> str:
    video_id = extract_video_id(url)
    if not video_id:
        raise InvalidInputError("Invalid YouTube URL")
    return video_id


def run_transcript(args) -> str:
    segments = normalize_transcript(TranscriptFetcher().fetch_segments(_video_id(args.url)))
    segments = filter_segments(segments, args.search)
    return transcript_to_text(segments, with_timestamps=args.timestamps)


def run_summarize(args) -> str:
    transcript_text = TranscriptFetcher().fetch_text(_video_id(args.url))
    return TranscriptSummarizer.from_config().summarize(transcript_text)


def run_seo(args) -> str:
    bundle = SeoEnhancer.from_config().enhance(args.title, args.description, args.tags)
    return json.dumps(bundle.model_dump(), indent=2, ensure_ascii=False)


def run_thumbnails(args) -> str:
    listing = ThumbnailResolver().resolve(_video_id(args.url))
    return json.dumps(listing.model_dump(), indent=2, ensure_ascii=False)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="TubeKit YouTube utilities")
    subparsers = parser.add_subparsers(dest="command", required=True)

    transcript = subparsers.add_parser("transcript", help="Print a video transcript")
    transcript.add_argument("url", help="YouTube video URL")
    transcript.add_argument("--timestamps", action="store_true", help="Prefix each line with [MM:SS]")
    transcript.add_argument("--search", default="", help="Only print segments containing this text")
    transcript.set_defaults(func=run_transcript)

    summarize = subparsers.add_parser("summarize", help="Summarize a video")
    summarize.add_argument("url", help="YouTube video URL")
    summarize.set_defaults(func=run_summarize)

    seo = subparsers.add_parser("seo", help="Suggest SEO metadata")
    seo.add_argument("--title", required=True, help="Current video title")
    seo.add_argument("--description", required=True, help="Current video description")
    seo.add_argument("--tags", default="", help="Current tags, comma-separated")
    seo.set_defaults(func=run_seo)

    thumbnails = subparsers.add_parser("thumbnails", help="List thumbnail URLs")
    thumbnails.add_argument("url", help="YouTube video URL")
    thumbnails.set_defaults(func=run_thumbnails)

    return parser


def main(argv=None) -> int:
    """Main function to run the application from command line."""
    load_dotenv()
    args = build_parser().parse_args(argv)

    try:
        output = args.func(args)
    except TubeKitError as e:
        logging.error(f"{args.command} failed: {e.message}")
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
