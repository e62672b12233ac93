"""
YouTube API failure types
"""

from typing import Optional


class YouTubeApiError(Exception):
    """Base exception for failed YouTube Data API calls."""

    def __init__(self, message: str, url: str):
        super().__init__(message)
        self.url = url


class TransportError(YouTubeApiError):
    """Raised when a request could not complete (connection, timeout, HTTP status)."""

    def __init__(self, message: str, url: str, status_code: Optional[int] = None):
        super().__init__(message, url)
        self.status_code = status_code


class DecodeError(YouTubeApiError):
    """Raised when a response body is not a valid JSON object."""
    pass
