"""Unit tests for JsonFetcher."""
from __future__ import annotations

import json
import logging
from unittest.mock import MagicMock, patch

import pytest
import requests

from channel_report.core.youtube import (
    DecodeError,
    ErrorReporter,
    JsonFetcher,
    LoggingErrorReporter,
    TransportError,
)

URL = "https://api.test/youtube/v3/channels"


class TestFetchJsonSuccess:

    def test_returns_decoded_object(self, fetcher, mock_session):
        mock_session.get.return_value.json.return_value = {"items": [{"id": "UC1"}]}

        assert fetcher.fetch_json(URL, {"id": "UC1"}) == {"items": [{"id": "UC1"}]}

    def test_sends_key_accept_header_and_timeout(self, fetcher, mock_session):
        fetcher.fetch_json(URL, {"part": "statistics"})

        mock_session.get.assert_called_once_with(
            URL,
            params={"part": "statistics", "key": "secret-key"},
            headers={"Accept": "application/json"},
            timeout=10.0,
        )

    def test_does_not_mutate_caller_params(self, fetcher):
        params = {"part": "snippet"}

        fetcher.fetch_json(URL, params)

        assert params == {"part": "snippet"}

    def test_success_reports_nothing(self, fetcher, mock_reporter):
        fetcher.fetch_json(URL)

        mock_reporter.capture_message.assert_not_called()


class TestFetchJsonTransportFailures:

    @pytest.mark.parametrize(
        "error",
        [
            requests.ConnectionError(f"Max retries exceeded with url: {URL}?key=secret-key"),
            requests.Timeout("read timed out"),
        ],
    )
    def test_network_errors_raise_transport_error(self, fetcher, mock_session, mock_reporter, error):
        mock_session.get.side_effect = error

        with pytest.raises(TransportError) as exc_info:
            fetcher.fetch_json(URL)

        assert exc_info.value.url == URL
        assert exc_info.value.status_code is None
        assert "secret-key" not in str(exc_info.value)
        mock_reporter.capture_message.assert_called_once()

    def test_http_error_status_raises_transport_error(self, fetcher, mock_session, mock_reporter):
        response = mock_session.get.return_value
        response.status_code = 403
        response.raise_for_status.side_effect = requests.HTTPError(
            f"403 Client Error for url: {URL}?key=secret-key", response=response
        )

        with pytest.raises(TransportError) as exc_info:
            fetcher.fetch_json(URL)

        assert exc_info.value.status_code == 403
        assert "secret-key" not in str(exc_info.value)
        mock_reporter.capture_message.assert_called_once_with(
            "YouTube API returned HTTP 403", url=URL, status=403
        )


class TestFetchJsonDecodeFailures:

    def test_invalid_json_raises_decode_error(self, fetcher, mock_session, mock_reporter):
        mock_session.get.return_value.json.side_effect = json.JSONDecodeError("Expecting value", "<html>", 0)

        with pytest.raises(DecodeError) as exc_info:
            fetcher.fetch_json(URL)

        assert not isinstance(exc_info.value, TransportError)
        mock_reporter.capture_message.assert_called_once_with(
            "Invalid JSON response from YouTube API", url=URL
        )

    def test_non_object_body_raises_decode_error(self, fetcher, mock_session, mock_reporter):
        mock_session.get.return_value.json.return_value = ["not", "an", "object"]

        with pytest.raises(DecodeError):
            fetcher.fetch_json(URL)

        mock_reporter.capture_message.assert_called_once()


class TestLoggingErrorReporter:

    def test_default_reporter_logs_failures(self, mock_session, caplog):
        mock_session.get.side_effect = requests.ConnectionError("refused")
        fetcher = JsonFetcher("secret-key", session=mock_session)

        with caplog.at_level(logging.ERROR):
            with pytest.raises(TransportError):
                fetcher.fetch_json(URL)

        assert "Failed to fetch data from YouTube API (ConnectionError)" in caplog.text
        assert "secret-key" not in caplog.text

    def test_context_is_appended(self, caplog):
        reporter = LoggingErrorReporter(logging.getLogger("test.reporter"))

        with caplog.at_level(logging.ERROR, logger="test.reporter"):
            reporter.capture_message("Invalid JSON", url=URL, status=None)

        assert f"Invalid JSON (status=None, url={URL})" in caplog.text

    def test_default_timeout_is_ten_seconds(self):
        session = MagicMock()
        session.get.return_value.json.return_value = {}

        JsonFetcher("k", session=session).fetch_json(URL)

        assert session.get.call_args.kwargs["timeout"] == 10.0

    def test_reporter_interface_is_abstract(self):
        with pytest.raises(TypeError):
            ErrorReporter()


class TestFetcherLifecycle:

    def test_context_manager_closes_own_session(self):
        with patch("channel_report.core.youtube.json_fetcher.requests.Session") as session_cls:
            with JsonFetcher("k"):
                pass

        session_cls.return_value.close.assert_called_once_with()

    def test_injected_session_left_open(self, mock_session):
        with JsonFetcher("k", session=mock_session):
            pass

        mock_session.close.assert_not_called()
