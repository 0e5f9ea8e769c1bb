"""
TubeKit: YouTube creator utilities.

This application fetches and searches video transcripts, generates AI
summaries and SEO suggestions, and lists/downloads video thumbnails.
"""

from tubekit.config import config

__version__ = config.APP_VERSION
