"""
Core functionality for the TubeKit application.

This package contains modules for extracting video identifiers, fetching
and normalizing transcripts, requesting summaries and SEO suggestions,
and resolving thumbnails.
"""
