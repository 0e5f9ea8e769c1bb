"""
Centralized error handling for the application.

Every failure a handler can run into is raised as a ``TubeKitError``
subclass carrying the HTTP status it maps to. The API layer turns these
into ``{"error": message}`` JSON bodies.
"""

from typing import Optional, Dict, Any
import json

from tubekit.config import config
from tubekit.utils.logger import logging


class TubeKitError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.message}


class InvalidInputError(TubeKitError):
    """Malformed URL or missing required field."""

    status_code = 400


class UpstreamServiceError(TubeKitError):
    """Network error, non-OK status or empty reply from an external service."""

    status_code = 500


class SuggestionFormatError(UpstreamServiceError):
    """Model output that is not valid JSON or lacks the expected keys."""


def log_diagnostic_info(context: Dict[str, Any]):
    """
    Log diagnostic information for debugging.

    Args:
        context: Dictionary of diagnostic information
    """
    if not config.DEBUG:
        return

    try:
        logging.debug(f"Diagnostic info: {json.dumps(context, default=str)}")
    except (TypeError, ValueError) as e:
        logging.error(f"Error logging diagnostic info: {str(e)}")
