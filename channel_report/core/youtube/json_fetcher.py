"""
JSON Fetcher
Single GET-and-decode primitive shared by every YouTube Data API call
"""

import logging
from typing import Any, Dict, Optional

import requests

from .error_reporter import ErrorReporter, LoggingErrorReporter
from .errors import DecodeError, TransportError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


class JsonFetcher:
    """
    Performs authenticated GET requests and decodes the JSON body.

    Responsibilities:
    - Attach the API key and the Accept header to every request.
    - Enforce a bounded per-request timeout.
    - Report transport and decode failures once, then raise them typed.
    """

    def __init__(
        self,
        api_key: str,
        timeout: float = DEFAULT_TIMEOUT,
        reporter: Optional[ErrorReporter] = None,
        session: Optional[requests.Session] = None
    ):
        self._api_key = api_key
        self._timeout = timeout
        self._reporter = reporter or LoggingErrorReporter()
        self._owns_session = session is None
        self._session = session or requests.Session()

    def close(self) -> None:
        """Close the HTTP session if this fetcher created it."""
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> "JsonFetcher":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def fetch_json(self, url: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        GET ``url`` and return the decoded JSON object.

        Raises:
            TransportError: connection failure, timeout or non-success status
            DecodeError: body is not a valid JSON object
        """
        query = dict(params or {})
        query["key"] = self._api_key

        # exception text from requests embeds the full URL, key included
        try:
            response = self._session.get(
                url,
                params=query,
                headers={"Accept": "application/json"},
                timeout=self._timeout,
            )
            response.raise_for_status()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            self._fail_transport(f"YouTube API returned HTTP {status}", url, status)
        except requests.RequestException as e:
            self._fail_transport(f"Failed to fetch data from YouTube API ({type(e).__name__})", url)

        try:
            data = response.json()
        except ValueError:
            self._fail_decode("Invalid JSON response from YouTube API", url)

        if not isinstance(data, dict):
            self._fail_decode(
                f"Expected a JSON object from YouTube API, got {type(data).__name__}", url
            )

        logger.debug(f"GET {url} -> {response.status_code}")
        return data

    def _fail_transport(self, message: str, url: str, status: Optional[int] = None):
        self._reporter.capture_message(message, url=url, status=status)
        raise TransportError(message, url, status)

    def _fail_decode(self, message: str, url: str):
        self._reporter.capture_message(message, url=url)
        raise DecodeError(message, url)
