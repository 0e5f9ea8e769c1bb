"""
Helper utility functions for the TubeKit application.
"""

import re

_UNSAFE_FILENAME_CHARS = re.compile(r'[\\/*?:"<>|\s]')
MAX_FILENAME_LENGTH = 100


def sanitize_filename(filename: str) -> str:
    """
    Make a video title safe to use in a saved thumbnail's file name.

    Path separators, shell wildcards and whitespace become underscores and
    the result is capped at ``MAX_FILENAME_LENGTH`` characters.

    Args:
        filename: File name built from a video title

    Returns:
        Sanitized filename
    """
    return _UNSAFE_FILENAME_CHARS.sub("_", filename)[:MAX_FILENAME_LENGTH]


def truncate_text(text: str, max_length: int = 100, suffix: str = "...") -> str:
    """Shorten a model reply before it is written to the log."""
    if len(text) <= max_length:
        return text
    return text[:max_length - len(suffix)] + suffix
